from __future__ import annotations

from ..objects import ControlLogEntry
from .base import Resource, require_text, rows


class Logs(Resource):
    def control_history(
        self, player_id: str, start: int = 0, count: int = 20, task_type: int | None = None
    ) -> list[ControlLogEntry]:
        """Remote control execution history for one player."""
        require_text(player_id, "player_id")

        params = {"playerId": player_id, "start": str(start), "count": str(count)}
        if task_type is not None:
            params["taskType"] = str(task_type)

        response = self._get("/v2/logs/remote-control", params)
        return ControlLogEntry.from_wire_list(rows(response, "rows"))
