"""Typed records hydrated from NovaCloud wire payloads.

Each record is a dataclass; its fields are the allow-list of attributes that
can be populated. ``Record.from_wire`` resolves every incoming key in order:

1. exact field name,
2. the snake_case form of the key,
3. the record's declared aliases (matched against the key or its snake form).

Unknown keys are dropped so new server fields never break older clients.
"""

from __future__ import annotations

import dataclasses
import functools
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any, TypeVar

from ..case import snake_key

R = TypeVar("R", bound="Record")

_TIMESTAMP_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y/%m/%d %H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%a, %d %b %Y %H:%M:%S %Z",
)


def wire_field(
    default: Any = None,
    *,
    coerce: Callable[[Any], Any] | None = None,
    aliases: tuple[str, ...] = (),
    default_factory: Callable[[], Any] | None = None,
) -> Any:
    """Declare a record field with an optional coercer and wire aliases."""
    metadata = {"coerce": coerce, "aliases": aliases}
    if default_factory is not None:
        return dataclasses.field(default_factory=default_factory, metadata=metadata)
    return dataclasses.field(default=default, metadata=metadata)


def parse_timestamp(value: Any) -> Any:
    """Parse a textual timestamp. Unparseable input is returned unchanged."""
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        return value
    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return value


def to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true")
    return value is True or value == 1


def to_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def to_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def to_dict(value: Any) -> dict:
    return dict(value) if isinstance(value, Mapping) else {}


def optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def nested(record_cls: type[Record]) -> Callable[[Any], Any]:
    """Coercer wrapping a mapping (or each mapping in a list) as ``record_cls``."""

    def build(value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return [record_cls.from_wire(item) for item in value if isinstance(item, Mapping)]
        if isinstance(value, Mapping):
            return record_cls.from_wire(value)
        return value

    return build


def nested_list(record_cls: type[Record]) -> Callable[[Any], list]:
    build = nested(record_cls)
    return lambda value: to_list(build(value))


@functools.lru_cache(maxsize=None)
def _field_index(cls: type) -> tuple[dict[str, str], dict[str, Callable[[Any], Any] | None]]:
    names: dict[str, str] = {}
    coercers: dict[str, Callable[[Any], Any] | None] = {}
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        coercers[f.name] = f.metadata.get("coerce")
        for alias in f.metadata.get("aliases", ()):
            names.setdefault(alias, f.name)
    for name in coercers:
        names[name] = name
    return names, coercers


@dataclasses.dataclass(frozen=True)
class Record:
    """Base class for every hydrated record."""

    @classmethod
    def resolve_field(cls, key: Any) -> str | None:
        names, _ = _field_index(cls)
        if key in names:
            return names[key]
        normalized = snake_key(key)
        return names.get(normalized)

    @classmethod
    def from_wire(cls: type[R], data: Mapping[str, Any]) -> R:
        if not isinstance(data, Mapping):
            raise TypeError(f"{cls.__name__} expects a mapping, got {type(data).__name__}")

        _, coercers = _field_index(cls)
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = cls.resolve_field(key)
            if name is None:
                continue
            coerce = coercers[name]
            values[name] = coerce(value) if coerce else value
        return cls(**values)

    @classmethod
    def from_wire_list(cls: type[R], rows: Any) -> list[R]:
        if isinstance(rows, Mapping):
            return []
        return [cls.from_wire(row) for row in to_list(rows) if isinstance(row, Mapping)]

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)
