from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..client.http import SignedHttpClient
from ..errors import ValidationError

MAX_BATCH = 100


def validate_player_ids(ids: Sequence[Any] | None, max_count: int = MAX_BATCH, field: str = "player_ids") -> None:
    if isinstance(ids, (str, bytes)):
        raise ValidationError(f"{field} must be a list of ids")
    if not ids:
        raise ValidationError(f"{field} cannot be empty")
    if len(ids) > max_count:
        raise ValidationError(f"maximum {max_count} player IDs allowed")


def require_text(value: Any, field: str) -> None:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required")


def require_present(value: Any, field: str) -> None:
    if value is None:
        raise ValidationError(f"{field} is required")
    if hasattr(value, "__len__") and len(value) == 0:
        raise ValidationError(f"{field} is required")


def validate_percentage(value: Any, field: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 100:
        raise ValidationError(f"{field} must be an integer between 0 and 100")


def normalize_screen_status(status: Any) -> str:
    normalized = str(status).strip().lower() if isinstance(status, str) else None
    if normalized == "open":
        return "OPEN"
    if normalized in ("close", "closed"):
        return "CLOSE"
    raise ValidationError("status must be OPEN or CLOSE")


def rows(response: Any, key: str) -> list:
    if not isinstance(response, Mapping):
        return []
    return response.get(key) or []


class Resource:
    """Shared plumbing for the endpoint wrappers."""

    def __init__(self, http: SignedHttpClient) -> None:
        self.http = http

    def _get(self, path: str, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Any:
        return self.http.get(path, params, **kwargs)

    def _post(self, path: str, params: Mapping[str, Any] | None = None, **kwargs: Any) -> Any:
        return self.http.post(path, params, **kwargs)
