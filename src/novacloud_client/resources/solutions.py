"""Solution (program) publishing workflows.

Program pages, attributes and schedules are free-form nested structures;
they are accepted in snake_case and camelized on the way out.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ..errors import ValidationError
from ..objects import OfflineExportResult, OverSpecDetectionResult, PublishResult
from .base import Resource, require_present, validate_player_ids


class Solutions(Resource):
    def emergency_page(
        self, player_ids: Sequence[str], attribute: Mapping[str, Any], page: Mapping[str, Any]
    ) -> PublishResult:
        """Publish a single-page emergency insertion program."""
        validate_player_ids(player_ids)
        require_present(attribute, "attribute")
        require_present(page, "page")

        payload = {"player_ids": list(player_ids), "attribute": attribute, "page": page}
        response = self._post("/v2/player/emergency-program/page", payload, camelize=True)
        return PublishResult.from_wire(response or {})

    def cancel_emergency(self, player_ids: Sequence[str]) -> PublishResult:
        validate_player_ids(player_ids)

        payload = {"player_ids": list(player_ids)}
        response = self._post("/v2/player/emergency-program/cancel", payload, camelize=True)
        return PublishResult.from_wire(response or {})

    def common_solution(
        self,
        player_ids: Sequence[str],
        pages: Sequence[Mapping[str, Any]],
        schedule: Mapping[str, Any] | None = None,
    ) -> PublishResult:
        """Publish a normal solution, optionally with a playback schedule."""
        validate_player_ids(player_ids)
        require_present(pages, "pages")

        payload: dict[str, Any] = {"player_ids": list(player_ids), "pages": pages}
        if schedule:
            payload["schedule"] = schedule

        response = self._post("/v2/player/program/normal", payload, camelize=True)
        return PublishResult.from_wire(response or {})

    def offline_export(
        self,
        program_type: int,
        pages: Sequence[Mapping[str, Any]],
        plan_version: str | None = None,
        schedule: Mapping[str, Any] | None = None,
        **options: Any,
    ) -> OfflineExportResult:
        """Export an offline program bundle without publishing it.

        Extra keyword arguments are sent as additional top-level attributes.
        """
        require_present(pages, "pages")
        if program_type is None:
            raise ValidationError("program_type is required")

        payload = {
            "program_type": program_type,
            "pages": pages,
            "plan_version": plan_version,
            "schedule": schedule,
            **options,
        }
        payload = {key: value for key, value in payload.items() if value is not None}

        response = self._post("/v2/player/program/offline-export", payload, camelize=True)
        return OfflineExportResult.from_wire(response or {})

    def set_over_spec_detection(self, player_ids: Sequence[str], enable: bool) -> PublishResult:
        validate_player_ids(player_ids)
        if not isinstance(enable, bool):
            raise ValidationError("enable must be true or false")

        payload = {"playerIds": list(player_ids), "enable": enable}
        response = self._post("/v2/player/immediateControl/over-specification-options", payload)
        return PublishResult.from_wire(response or {})

    def program_over_spec_detection(
        self, player_ids: Sequence[str], pages: Sequence[Mapping[str, Any]]
    ) -> OverSpecDetectionResult:
        """Check whether a program exceeds the players' hardware specifications."""
        validate_player_ids(player_ids)
        require_present(pages, "pages")

        payload = {"player_ids": list(player_ids), "pages": pages}
        response = self._post("/v2/player/program/over-specification-check", payload, camelize=True)
        return OverSpecDetectionResult.from_wire(response or {})
