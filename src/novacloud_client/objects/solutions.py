from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .base import Record, nested, nested_list, to_bool, to_list, wire_field
from .control import BatchOutcome


def _compact_list(value: Any) -> list:
    return [item for item in to_list(value) if item is not None]


def _optional_bool(value: Any) -> bool | None:
    return None if value is None else to_bool(value)


@dataclass(frozen=True)
class PublishResult(BatchOutcome, Record):
    """Publish outcome returned by the solution endpoints."""

    successful: list = wire_field(coerce=_compact_list, aliases=("success",), default_factory=list)
    failed: list = wire_field(coerce=_compact_list, aliases=("fail",), default_factory=list)

    def _succeeded(self) -> list:
        return self.successful

    def _failed(self) -> list:
        return self.failed


@dataclass(frozen=True)
class Artifact(Record):
    """A downloadable file (JSON, playlist, ...) produced by an offline export."""

    md5: str | None = None
    file_name: str | None = None
    url: str | None = None
    program_name: str | None = None
    support_md5_checkout: bool | None = wire_field(
        coerce=_optional_bool, aliases=("is_support_md5_checkout",)
    )


_artifact = nested(Artifact)


@dataclass(frozen=True)
class OfflineExportResult(Record):
    """Each attribute holds an Artifact, a list of them, or None."""

    display_solutions: Any = wire_field(coerce=_artifact)
    play_relations: Any = wire_field(coerce=_artifact)
    play_solutions: Any = wire_field(coerce=_artifact)
    playlists: Any = wire_field(coerce=_artifact)
    schedule_constraints: Any = wire_field(coerce=_artifact)
    plan_json: Any = wire_field(coerce=_artifact)


@dataclass(frozen=True)
class Recommendation(Record):
    """Suggested settings that bring a widget within spec."""

    width: Any = None
    height: Any = None
    postfix: Any = None
    fps: Any = None
    byte_rate: Any = None
    codec: str | None = None


@dataclass(frozen=True)
class OverSpecDetail(Record):
    page_id: Any = None
    widget_id: Any = None
    over_spec_error_code: list = wire_field(coerce=to_list, default_factory=list)
    recommendation: Recommendation | None = wire_field(
        coerce=nested(Recommendation), aliases=("recommend",)
    )

    @property
    def over_spec_error_codes(self) -> list:
        return self.over_spec_error_code


@dataclass(frozen=True)
class OverSpecItem(Record):
    """Over-specification findings for one group of players."""

    over_spec: bool = wire_field(False, coerce=to_bool)
    over_spec_type: Any = None
    player_ids: list = wire_field(coerce=to_list, default_factory=list)
    details: list[OverSpecDetail] = wire_field(
        coerce=nested_list(OverSpecDetail), aliases=("over_spec_detail",), default_factory=list
    )


@dataclass(frozen=True)
class OverSpecDetectionResult(Record):
    logid: Any = None
    status: Any = None
    items: list[OverSpecItem] = wire_field(
        coerce=nested_list(OverSpecItem), aliases=("data",), default_factory=list
    )

    @property
    def data(self) -> list[OverSpecItem]:
        return self.items
