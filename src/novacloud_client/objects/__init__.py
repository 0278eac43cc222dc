from .base import Record, parse_timestamp, to_bool, to_int, to_list
from .control import BatchOutcome, ControlLogEntry, ControlResult, QueuedRequest
from .player import Player, PlayerStatus
from .screen import Screen, ScreenDetail, ScreenMonitor
from .solutions import (
    Artifact,
    OfflineExportResult,
    OverSpecDetail,
    OverSpecDetectionResult,
    OverSpecItem,
    PublishResult,
    Recommendation,
)

__all__ = [
    "Artifact",
    "BatchOutcome",
    "ControlLogEntry",
    "ControlResult",
    "OfflineExportResult",
    "OverSpecDetail",
    "OverSpecDetectionResult",
    "OverSpecItem",
    "Player",
    "PlayerStatus",
    "PublishResult",
    "QueuedRequest",
    "Recommendation",
    "Record",
    "Screen",
    "ScreenDetail",
    "ScreenMonitor",
    "parse_timestamp",
    "to_bool",
    "to_int",
    "to_list",
]
