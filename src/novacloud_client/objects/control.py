from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .base import Record, optional_str, parse_timestamp, to_int, to_list, wire_field


class BatchOutcome(ABC):
    """Predicates over a success/fail pair. Recomputed on every access."""

    @abstractmethod
    def _succeeded(self) -> list: ...

    @abstractmethod
    def _failed(self) -> list: ...

    @property
    def all_successful(self) -> bool:
        return not self._failed()

    @property
    def all_failed(self) -> bool:
        return not self._succeeded()

    @property
    def partial_success(self) -> bool:
        return bool(self._succeeded()) and bool(self._failed())

    @property
    def success_count(self) -> int:
        return len(self._succeeded())

    @property
    def failure_count(self) -> int:
        return len(self._failed())


@dataclass(frozen=True)
class ControlResult(BatchOutcome, Record):
    """Result of a control request: the players it succeeded and failed on."""

    success: list = wire_field(coerce=to_list, default_factory=list)
    fail: list = wire_field(coerce=to_list, default_factory=list)

    def _succeeded(self) -> list:
        return self.success

    def _failed(self) -> list:
        return self.fail


@dataclass(frozen=True)
class QueuedRequest(ControlResult):
    """Enqueue result for asynchronous player commands.

    ``request_id`` is used to poll ``Control.request_result`` later.
    """

    request_id: str | None = wire_field(coerce=optional_str)


@dataclass(frozen=True)
class ControlLogEntry(Record):
    """Execution record for a remote control command."""

    status: Any = None
    type: str | None = None
    execute_time: datetime | str | None = wire_field(coerce=parse_timestamp)

    @property
    def success(self) -> bool:
        return to_int(self.status) == 1
