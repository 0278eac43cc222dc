from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import Record, to_dict, to_int, wire_field


@dataclass(frozen=True)
class Screen(Record):
    """A screen/device entry from the VNNOXCare monitoring APIs."""

    sid: Any = None
    name: str | None = None
    mac: str | None = None
    sn: str | None = None
    address: str | None = None
    longitude: Any = None
    latitude: Any = None
    status: Any = wire_field(aliases=("screenStatus",))
    camera: Any = None
    brightness: Any = None
    env_brightness: Any = None

    @property
    def online(self) -> bool:
        return to_int(self.status) == 1

    @property
    def camera_enabled(self) -> bool:
        return to_int(self.camera) == 1


@dataclass(frozen=True)
class ScreenMonitor(Record):
    display_device: Any = None
    brightness: Any = None
    env_brightness: Any = None
    height: Any = None
    width: Any = None
    sn: str | None = None


@dataclass(frozen=True)
class ScreenDetail(Record):
    """Detailed telemetry for a screen. Hardware sections default to ``{}``."""

    identifier: Any = None
    input_source: dict = wire_field(coerce=to_dict, default_factory=dict)
    mac: str | None = None
    master_control: dict = wire_field(coerce=to_dict, default_factory=dict)
    module: dict = wire_field(coerce=to_dict, default_factory=dict)
    monitor_card: dict = wire_field(coerce=to_dict, default_factory=dict)
    receiving_card: dict = wire_field(coerce=to_dict, default_factory=dict)
    screen: dict = wire_field(coerce=to_dict, default_factory=dict)
    sid: Any = None
    smart_module: dict = wire_field(coerce=to_dict, default_factory=dict)
    sn: str | None = None
