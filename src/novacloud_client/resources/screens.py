from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

from ..errors import ValidationError
from ..objects import Screen, ScreenDetail, ScreenMonitor
from .base import Resource, require_text, rows

MAX_DETAIL_BATCH = 10


class Screens(Resource):
    """VNNOXCare screen inventory and monitoring endpoints."""

    def list(self, start: int = 0, count: int = 20, status: int | None = None) -> list[Screen]:
        params: dict[str, Any] = {"start": start, "count": count}
        if status is not None:
            params["status"] = status

        response = self._get("/v2/device-status-monitor/screen/list", params)
        return Screen.from_wire_list(rows(response, "items"))

    def monitor(self, serial_number: str | None = None, sn: str | None = None) -> ScreenMonitor:
        serial = serial_number or sn
        require_text(serial, "serial_number")

        response = self._get(f"/v2/device-status-monitor/screen/monitor/{quote(str(serial), safe='')}")
        return ScreenMonitor.from_wire(response or {})

    def detail(self, sn_list: Sequence[str]) -> list[ScreenDetail]:
        """Deep telemetry for up to 10 screens."""
        if isinstance(sn_list, (str, bytes)):
            raise ValidationError("sn_list must be a list of serial numbers")
        if not sn_list:
            raise ValidationError("sn_list cannot be empty")
        if len(sn_list) > MAX_DETAIL_BATCH:
            raise ValidationError(f"maximum {MAX_DETAIL_BATCH} screen serial numbers allowed")

        response = self._post("/v2/device-status-monitor/all", {"snList": list(sn_list)})
        return ScreenDetail.from_wire_list(rows(response, "value"))
