"""
Key casing between the SDK (snake_case) and the NovaCloud wire format (camelCase).
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from typing import Any

_LOWER_UPPER = re.compile(r"([a-z\d])([A-Z])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")


def camelize_key(key: Any) -> Any:
    """Convert a single key to camelCase. Keys that are already camelCase are kept."""
    if not isinstance(key, str):
        return key
    normalized = _LOWER_UPPER.sub(r"\1_\2", key).replace("-", "_").lower()
    head, *rest = normalized.split("_")
    return head + "".join(segment.capitalize() for segment in rest)


def snake_key(key: Any) -> Any:
    """Convert a single camelCase/PascalCase key to snake_case."""
    if not isinstance(key, str):
        return key
    s = _ACRONYM_BOUNDARY.sub(r"\1_\2", key)
    s = _LOWER_UPPER.sub(r"\1_\2", s)
    return s.replace("-", "_").lower()


def _as_mapping(value: Any) -> dict | None:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return None


def _transform(value: Any, convert) -> Any:
    if isinstance(value, Mapping):
        return {convert(k): _transform(v, convert) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_transform(item, convert) for item in value]
    mapping = _as_mapping(value)
    if mapping is not None:
        return _transform(mapping, convert)
    return value


def to_wire(value: Any) -> Any:
    """Recursively camelize mapping keys for an outbound payload."""
    return _transform(value, camelize_key)


def from_wire(value: Any) -> Any:
    """Recursively snake_case mapping keys from an inbound payload."""
    return _transform(value, snake_key)
