"""Real-time control commands.

Every command is queued server-side; the returned ``QueuedRequest`` carries a
``request_id`` that ``Control.request_result`` resolves once the players have
reported back (results are also POSTed to ``notice_url``).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..errors import ValidationError
from ..objects import ControlResult, QueuedRequest
from .base import (
    MAX_BATCH,
    Resource,
    normalize_screen_status,
    require_text,
    validate_percentage,
    validate_player_ids,
)

def normalize_power_state(state: Any) -> int:
    if isinstance(state, bool):
        return int(state)
    if isinstance(state, int) and state in (0, 1):
        return state
    if isinstance(state, str) and state.strip().lower() in ("on", "off"):
        return 1 if state.strip().lower() == "on" else 0
    raise ValidationError("state must be one of 'on', 'off', True, False, or 0/1")


class Control(Resource):
    BASE_PATH = "/v2/player/real-time-control"

    def brightness(self, player_ids: Sequence[str], brightness: int, notice_url: str) -> QueuedRequest:
        validate_percentage(brightness, "brightness")
        return self._enqueue("brightness", player_ids, notice_url, {"brightness": brightness})

    def volume(self, player_ids: Sequence[str], volume: int, notice_url: str) -> QueuedRequest:
        validate_percentage(volume, "volume")
        return self._enqueue("volume", player_ids, notice_url, {"volume": volume})

    def video_source(self, player_ids: Sequence[str], source: str, notice_url: str) -> QueuedRequest:
        """Switch the input source (e.g. ``"HDMI1"``)."""
        require_text(source, "source")
        return self._enqueue("video-source", player_ids, notice_url, {"videoSource": source})

    def screen_power(self, player_ids: Sequence[str], state: Any, notice_url: str) -> QueuedRequest:
        """``state`` accepts "on"/"off", True/False or 1/0."""
        option = normalize_power_state(state)
        return self._enqueue("power", player_ids, notice_url, {"option": option})

    def screen_status(self, player_ids: Sequence[str], status: str, notice_url: str) -> QueuedRequest:
        """Toggle black screen (``"close"``) and normal display (``"open"``)."""
        payload = {"status": normalize_screen_status(status)}
        return self._enqueue("screen-status", player_ids, notice_url, payload)

    def screenshot(self, player_ids: Sequence[str], notice_url: str) -> QueuedRequest:
        return self._enqueue("screen-capture", player_ids, notice_url)

    def reboot(self, player_ids: Sequence[str], notice_url: str) -> QueuedRequest:
        return self._enqueue("reboot", player_ids, notice_url)

    def request_result(self, request_id: str) -> ControlResult:
        require_text(request_id, "request_id")
        response = self._get("/v2/player/control/request-result", {"requestId": request_id})
        return ControlResult.from_wire(response or {})

    def _enqueue(
        self,
        command: str,
        player_ids: Sequence[str],
        notice_url: str,
        extra_payload: dict[str, Any] | None = None,
    ) -> QueuedRequest:
        validate_player_ids(player_ids, MAX_BATCH)
        require_text(notice_url, "notice_url")

        payload: dict[str, Any] = {"playerIds": list(player_ids)}
        payload.update(extra_payload or {})
        payload["noticeUrl"] = notice_url

        response = self._post(f"{self.BASE_PATH}/{command}", payload)
        return QueuedRequest.from_wire(response or {})
