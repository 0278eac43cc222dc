from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..errors import ValidationError
from ..objects import ControlResult, to_int
from .base import MAX_BATCH, Resource, normalize_screen_status, validate_player_ids

# These endpoints reject an empty weekDays array.
_OMIT_EMPTY_WEEK_DAYS = frozenset({"brightness", "video-source"})

Schedules = Mapping[str, Any] | Sequence[Mapping[str, Any]]


def fetch_optional(entry: Mapping[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        if key in entry:
            return entry[key]
    return default


def fetch_required(entry: Mapping[str, Any], *keys: str) -> Any:
    value = fetch_optional(entry, *keys)
    if value is None or not str(value).strip():
        raise ValidationError(f"{keys[0]} is required")
    return value


def _as_mapping(entry: Any) -> Mapping[str, Any]:
    to_dict = getattr(entry, "to_dict", None)
    if callable(to_dict):
        entry = to_dict()
    if not isinstance(entry, Mapping):
        raise ValidationError("schedule entries must be mappings")
    return entry


class ScheduledControl(Resource):
    """Recurring control plans. Schedule keys may be given in either casing."""

    BASE_PATH = "/v2/player/scheduled-control"

    def screen_status(self, player_ids: Sequence[str], schedules: Schedules) -> ControlResult:
        def build(base: dict[str, Any], entry: Mapping[str, Any]) -> dict[str, Any]:
            base["week_days"] = list(fetch_optional(entry, "week_days", "weekDays") or [])
            base["exec_time"] = fetch_required(entry, "exec_time", "execTime")
            base["status"] = normalize_screen_status(fetch_required(entry, "status"))
            return base

        return self._schedule("screen-status", player_ids, self._normalize(schedules, build))

    def reboot(self, player_ids: Sequence[str], schedules: Schedules) -> ControlResult:
        def build(base: dict[str, Any], entry: Mapping[str, Any]) -> dict[str, Any]:
            base["exec_time"] = fetch_required(entry, "exec_time", "execTime")
            return base

        return self._schedule("reboot", player_ids, self._normalize(schedules, build))

    def volume(self, player_ids: Sequence[str], schedules: Schedules) -> ControlResult:
        def build(base: dict[str, Any], entry: Mapping[str, Any]) -> dict[str, Any]:
            base["exec_time"] = fetch_required(entry, "exec_time", "execTime")
            value = to_int(fetch_required(entry, "value"))
            if not 0 <= value <= 100:
                raise ValidationError("value must be between 0 and 100")
            base["value"] = value
            base["week_days"] = list(fetch_optional(entry, "week_days", "weekDays") or [])
            return base

        return self._schedule("volume", player_ids, self._normalize(schedules, build))

    def brightness(
        self,
        player_ids: Sequence[str],
        schedules: Schedules,
        auto_profile: Mapping[str, Any] | None = None,
    ) -> ControlResult:
        """Scheduled brightness; ``auto_profile`` sets sensor-driven segments."""

        def build(base: dict[str, Any], entry: Mapping[str, Any]) -> dict[str, Any]:
            base["exec_time"] = fetch_required(entry, "exec_time", "execTime")
            base["type"] = to_int(fetch_required(entry, "type"))
            value = fetch_optional(entry, "value")
            if value is not None:
                base["value"] = to_int(value)
            return base

        extra = {"auto_profile": auto_profile} if auto_profile else None
        return self._schedule("brightness", player_ids, self._normalize(schedules, build), extra)

    def video_source(self, player_ids: Sequence[str], schedules: Schedules) -> ControlResult:
        def build(base: dict[str, Any], entry: Mapping[str, Any]) -> dict[str, Any]:
            base["exec_time"] = fetch_required(entry, "exec_time", "execTime")
            base["source"] = fetch_required(entry, "source")
            week_days = fetch_optional(entry, "week_days", "weekDays")
            if week_days is not None:
                base["week_days"] = list(week_days)
            return base

        return self._schedule("video-source", player_ids, self._normalize(schedules, build))

    def _normalize(self, schedules: Any, build) -> list[dict[str, Any]]:
        if schedules is None:
            raise ValidationError("schedules must be provided")
        if isinstance(schedules, Mapping) or hasattr(schedules, "to_dict"):
            entries = [schedules]
        else:
            entries = list(schedules)
        if not entries:
            raise ValidationError("schedules cannot be empty")

        normalized = []
        for raw in entries:
            entry = _as_mapping(raw)
            base = {
                "start_date": fetch_required(entry, "start_date", "startDate"),
                "end_date": fetch_required(entry, "end_date", "endDate"),
            }
            normalized.append(build(base, entry))
        return normalized

    def _schedule(
        self,
        command: str,
        player_ids: Sequence[str],
        schedules: list[dict[str, Any]],
        extra_payload: dict[str, Any] | None = None,
    ) -> ControlResult:
        validate_player_ids(player_ids, MAX_BATCH)

        if command in _OMIT_EMPTY_WEEK_DAYS:
            for schedule in schedules:
                if "week_days" in schedule and not schedule["week_days"]:
                    del schedule["week_days"]

        payload: dict[str, Any] = {"player_ids": list(player_ids), "schedules": schedules}
        payload.update(extra_payload or {})

        response = self._post(f"{self.BASE_PATH}/{command}", payload, camelize=True)
        return ControlResult.from_wire(response or {})
