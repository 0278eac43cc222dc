from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import Record, parse_timestamp, to_int, wire_field


@dataclass(frozen=True)
class Player(Record):
    """A player returned from the player list API."""

    player_id: str | None = None
    player_type: Any = None
    name: str | None = None
    sn: str | None = None
    version: str | None = None
    ip: str | None = None
    last_online_time: datetime | str | None = wire_field(coerce=parse_timestamp)
    online_status: int = wire_field(0, coerce=to_int)

    @property
    def online(self) -> bool:
        return self.online_status == 1

    @property
    def offline(self) -> bool:
        return not self.online

    @property
    def synchronous(self) -> bool:
        return to_int(self.player_type) == 1

    @property
    def asynchronous(self) -> bool:
        return to_int(self.player_type) == 2


@dataclass(frozen=True)
class PlayerStatus(Record):
    """Online status for a single player."""

    player_id: str | None = None
    sn: str | None = None
    online_status: int = wire_field(0, coerce=to_int)
    last_online_time: datetime | str | None = wire_field(coerce=parse_timestamp)

    @property
    def online(self) -> bool:
        return self.online_status == 1

    @property
    def offline(self) -> bool:
        return not self.online
