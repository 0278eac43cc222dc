"""Tests for record hydration from wire payloads."""

from datetime import datetime

import pytest

from novacloud_client.objects import (
    Artifact,
    BatchOutcome,
    ControlLogEntry,
    ControlResult,
    OfflineExportResult,
    OverSpecDetectionResult,
    Player,
    PlayerStatus,
    PublishResult,
    QueuedRequest,
    Screen,
    ScreenDetail,
    parse_timestamp,
    to_bool,
    to_int,
)


class TestCoercers:
    def test_parse_timestamp(self):
        assert parse_timestamp("2024-07-02 04:55:48") == datetime(2024, 7, 2, 4, 55, 48)
        assert parse_timestamp("2024-07-02T04:55:48").hour == 4
        assert parse_timestamp("2024/07/02 04:55:48") == datetime(2024, 7, 2, 4, 55, 48)

    def test_parse_timestamp_falls_back_to_raw(self):
        assert parse_timestamp("yesterday-ish") == "yesterday-ish"
        assert parse_timestamp(None) is None
        assert parse_timestamp(12345) == 12345

    def test_to_bool(self):
        assert to_bool(1) is True
        assert to_bool(True) is True
        assert to_bool("true") is True
        assert to_bool("1") is True
        assert to_bool(0) is False
        assert to_bool(None) is False
        assert to_bool("no") is False
        assert to_bool(2) is False

    def test_to_int(self):
        assert to_int("1") == 1
        assert to_int(3) == 3
        assert to_int("abc") == 0
        assert to_int(None) == 0


class TestControlLogEntry:
    def test_hydrates_camel_case_payload(self):
        entry = ControlLogEntry.from_wire(
            {"executeTime": "2024-07-02 04:55:48", "status": 1, "type": "openScreen"}
        )

        assert entry.execute_time == datetime(2024, 7, 2, 4, 55, 48)
        assert entry.success is True
        assert entry.type == "openScreen"

    def test_snake_case_payload_accepted(self):
        entry = ControlLogEntry.from_wire({"execute_time": "bad", "status": "0"})

        assert entry.execute_time == "bad"
        assert entry.success is False

    def test_unknown_fields_ignored(self):
        entry = ControlLogEntry.from_wire({"type": "reboot", "brandNewField": {"x": 1}})

        assert entry.type == "reboot"
        assert not hasattr(entry, "brand_new_field")

    def test_non_mapping_rejected(self):
        with pytest.raises(TypeError):
            ControlLogEntry.from_wire(["not", "a", "map"])


class TestPlayer:
    def test_from_wire_list_ignores_mapping_payload(self):
        assert PlayerStatus.from_wire_list({"code": 500, "message": "err"}) == []

    def test_player_fields(self):
        player = Player.from_wire(
            {
                "playerId": "p1",
                "playerType": 1,
                "name": "Lobby",
                "sn": "SN1",
                "version": "1.0",
                "ip": "10.0.0.1",
                "lastOnlineTime": "2024-01-01 10:00:00",
                "onlineStatus": "1",
            }
        )

        assert player.player_id == "p1"
        assert player.online
        assert not player.offline
        assert player.synchronous
        assert not player.asynchronous
        assert player.last_online_time == datetime(2024, 1, 1, 10)

    def test_status_defaults_to_zero(self):
        status = PlayerStatus.from_wire({"playerId": "p1", "onlineStatus": "n/a"})

        assert status.online_status == 0
        assert status.offline


class TestControlResult:
    def test_defaults_to_empty_lists(self):
        result = ControlResult.from_wire({"success": None})

        assert result.success == []
        assert result.fail == []
        assert result.all_successful
        assert result.all_failed

    def test_predicates(self):
        result = ControlResult.from_wire({"success": ["p1"], "fail": ["p2", "p3"]})

        assert result.partial_success
        assert not result.all_successful
        assert not result.all_failed
        assert result.success_count == 1
        assert result.failure_count == 2

    def test_predicates_are_not_cached(self):
        result = ControlResult.from_wire({"success": ["p1"], "fail": []})
        assert result.all_successful

        result.fail.append("p2")

        assert not result.all_successful
        assert result.partial_success

    def test_batch_outcome_is_abstract(self):
        with pytest.raises(TypeError):
            BatchOutcome()

        assert ControlResult().all_successful

    def test_queued_request_id(self):
        queued = QueuedRequest.from_wire({"requestId": 12345, "success": ["p1"], "fail": []})

        assert queued.request_id == "12345"
        assert queued.all_successful


class TestScreens:
    def test_screen_status_alias(self):
        screen = Screen.from_wire({"sid": 1, "screenStatus": 1, "camera": 0, "envBrightness": 300})

        assert screen.status == 1
        assert screen.online
        assert not screen.camera_enabled
        assert screen.env_brightness == 300

    def test_detail_nested_defaults(self):
        detail = ScreenDetail.from_wire({"sn": "SN1", "inputSource": {"hdmi": 1}, "module": None})

        assert detail.input_source == {"hdmi": 1}
        assert detail.module == {}
        assert detail.receiving_card == {}


class TestSolutions:
    def test_publish_result(self):
        result = PublishResult.from_wire({"success": ["p1", None], "fail": ["p2"]})

        assert result.successful == ["p1"]
        assert result.failed == ["p2"]
        assert not result.all_successful
        assert result.partial_success

    def test_offline_export_artifacts(self):
        result = OfflineExportResult.from_wire(
            {
                "displaySolutions": {"md5": "123", "fileName": "display.json"},
                "playlists": [{"fileName": "a.json"}, {"fileName": "b.json"}],
                "planJson": {"isSupportMd5Checkout": 1, "programName": "Program"},
            }
        )

        assert isinstance(result.display_solutions, Artifact)
        assert result.display_solutions.file_name == "display.json"
        assert [a.file_name for a in result.playlists] == ["a.json", "b.json"]
        assert result.plan_json.support_md5_checkout is True
        assert result.plan_json.program_name == "Program"
        assert result.play_relations is None

    def test_artifact_checkout_flag_unset(self):
        assert Artifact.from_wire({"md5": "x"}).support_md5_checkout is None

    def test_over_spec_detection(self):
        result = OverSpecDetectionResult.from_wire(
            {
                "logid": 111,
                "status": 0,
                "data": [
                    {
                        "overSpec": True,
                        "overSpecType": 1,
                        "playerIds": ["p1"],
                        "overSpecDetail": [
                            {
                                "pageId": 1,
                                "widgetId": 2,
                                "overSpecErrorCode": [-20, -21],
                                "recommend": {"width": "1920", "byteRate": "78.000000", "codec": "h264"},
                            }
                        ],
                    },
                    {"overSpec": False, "playerIds": ["p2"]},
                ],
            }
        )

        assert result.logid == 111
        assert len(result.items) == 2
        assert result.data is result.items

        item = result.items[0]
        assert item.over_spec is True
        assert item.over_spec_type == 1
        detail = item.details[0]
        assert detail.page_id == 1
        assert detail.over_spec_error_codes == [-20, -21]
        assert detail.recommendation.byte_rate == "78.000000"
        assert detail.recommendation.codec == "h264"

        clean = result.items[1]
        assert clean.over_spec is False
        assert clean.details == []
