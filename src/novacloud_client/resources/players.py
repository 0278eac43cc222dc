from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..errors import ValidationError
from ..objects import Player, PlayerStatus, QueuedRequest
from .base import MAX_BATCH, Resource, require_text, rows, validate_player_ids

CONFIG_STATUS_COMMANDS = (
    "volumeValue",
    "brightnessValue",
    "videoSourceValue",
    "timeValue",
    "screenPowerStatus",
    "syncPlayStatus",
    "powerStatus",
)


class Players(Resource):
    """Player inventory and status endpoints."""

    def list(self, start: int = 0, count: int = 20, name: str | None = None) -> list[Player]:
        """List players, optionally fuzzy-matching on ``name``."""
        params: dict[str, Any] = {"start": start, "count": count}
        if name:
            params["name"] = name

        response = self._get("/v2/player/list", params)
        return Player.from_wire_list(rows(response, "rows"))

    def statuses(
        self,
        player_ids: Sequence[str] | None = None,
        player_sns: Sequence[str] | None = None,
    ) -> list[PlayerStatus]:
        """Current online status by player id and/or serial number."""
        payload: dict[str, Any] = {}
        if player_ids is not None:
            validate_player_ids(player_ids, MAX_BATCH)
            payload["playerIds"] = list(player_ids)
        if player_sns is not None:
            validate_player_ids(player_sns, MAX_BATCH, field="player_sns")
            payload["playerSns"] = list(player_sns)
        if not payload:
            raise ValidationError("provide player_ids or player_sns")

        response = self._post("/v2/player/current/online-status", payload)
        return PlayerStatus.from_wire_list(response)

    def running_status(
        self, player_ids: Sequence[str], commands: Sequence[str], notice_url: str
    ) -> QueuedRequest:
        validate_player_ids(player_ids, MAX_BATCH)
        if not commands:
            raise ValidationError("commands cannot be empty")
        require_text(notice_url, "notice_url")

        payload = {
            "playerIds": list(player_ids),
            "commands": list(commands),
            "noticeUrl": notice_url,
        }
        response = self._post("/v2/player/current/running-status", payload)
        return QueuedRequest.from_wire(response or {})

    def config_status(
        self,
        player_ids: Sequence[str],
        notice_url: str,
        commands: Sequence[str] = CONFIG_STATUS_COMMANDS,
    ) -> QueuedRequest:
        """``running_status`` with the recommended configuration command set."""
        return self.running_status(player_ids, commands, notice_url)
