import pytest

from alerting.config import Settings
from alerting.domain.models import Alert, AlertInputKind
from alerting.services.normalization import build_alert, classify_input, resolve_source
from alerting.utils.redaction import REDACTED


@pytest.mark.parametrize("value", [None, "", False, float("nan")])
def test_falsy_inputs_produce_no_alert(value) -> None:
    assert classify_input(value) == AlertInputKind.rejected
    assert build_alert(value, "t") is None


def test_zero_is_a_meaningful_input() -> None:
    alert = build_alert(0, "t")

    assert alert is not None
    assert alert.data == {"message": "0"}


def test_empty_containers_still_alert() -> None:
    assert build_alert({}, "t").data == {"message": "An error occurred"}
    assert build_alert([], "t").data == {"message": "An error occurred"}


def test_exception_becomes_error_summary() -> None:
    alert = build_alert(Exception("boom"), "err.type")

    assert alert.source == "test-source"
    assert alert.type == "err.type"
    assert alert.data["name"] == "Exception"
    assert alert.data["message"] == "boom"
    assert len(alert.data["stack"].split("\n")) <= 5


def test_prebuilt_alert_keeps_data_and_backfills_message_from_outer_input() -> None:
    raw = {"source": "svc", "message": "outer", "data": {"foo": "bar"}}
    alert = build_alert(raw, "t")

    assert alert.source == "svc"
    assert alert.type == "t"
    assert alert.data == {"foo": "bar", "message": "outer"}
    assert raw["data"] == {"foo": "bar"}


def test_prebuilt_alert_without_outer_message_uses_default() -> None:
    alert = build_alert({"source": "svc", "data": {"foo": "bar", "msg": "inner"}}, "t")

    assert alert.data == {"foo": "bar", "msg": "inner", "message": "An error occurred"}


def test_prebuilt_alert_keeps_existing_data_message() -> None:
    alert = build_alert({"type": "own.type", "data": {"message": "kept"}}, "t")

    assert alert.type == "own.type"
    assert alert.data == {"message": "kept"}


def test_prebuilt_alert_without_data_sanitizes_whole_input() -> None:
    alert = build_alert({"type": "x", "msg": "hello", "token": "abc"}, "t")

    assert alert.data == {"type": "x", "msg": "hello", "token": REDACTED, "message": "hello"}


@pytest.mark.parametrize("data", [None, 0, ""])
def test_prebuilt_alert_with_falsy_data_gets_message(data) -> None:
    alert = build_alert({"source": "svc", "msg": "fallback", "data": data}, "t")

    assert alert.data == {"message": "fallback"}


def test_prebuilt_alert_with_scalar_data_is_kept() -> None:
    alert = build_alert({"data": "just text"}, "t")

    assert alert.data == "just text"


def test_alert_instance_is_treated_as_prebuilt() -> None:
    alert = build_alert(Alert(source="svc", type="a", data={"k": 1}), "t")

    assert alert.source == "svc"
    assert alert.type == "a"
    assert alert.data == {"k": 1, "message": "An error occurred"}


def test_generic_record_is_sanitized_and_message_wins() -> None:
    alert = build_alert({"msg": "disk full", "message": "ignored", "password": "p"}, "t")

    assert alert.data == {"msg": "disk full", "message": "disk full", "password": REDACTED}


def test_generic_string_carries_message_only() -> None:
    alert = build_alert("  something broke ", "t")

    assert alert.data == {"message": "something broke"}


def test_generic_list_is_wrapped() -> None:
    alert = build_alert(["a", "", None, "b"], "t")

    assert alert.data == {"items": ["a", "b"], "message": "An error occurred"}


def test_generic_long_message_is_trusted() -> None:
    text = "y" * 300
    alert = build_alert({"msg": text}, "t")

    assert alert.data == {"msg": REDACTED, "message": text}


def test_source_resolution_order(monkeypatch) -> None:
    assert resolve_source("explicit") == "explicit"
    assert resolve_source(settings=Settings(alert_source="configured")) == "configured"
    assert resolve_source() == "test-source"

    monkeypatch.delenv("ALERT_SOURCE")
    assert resolve_source(settings=Settings()) == "alerting"


def test_build_alert_uses_explicit_source() -> None:
    alert = build_alert("x", "t", source="override")

    assert alert.source == "override"


def test_prebuilt_alert_ignores_non_string_type() -> None:
    alert = build_alert({"type": 500, "detail": "x"}, "t")

    assert alert.type == "t"
    assert alert.source == "test-source"
    assert alert.data == {"type": 500, "detail": "x", "message": "An error occurred"}


def test_prebuilt_alert_ignores_non_string_source() -> None:
    alert = build_alert({"source": {"host": "a"}, "msg": "x"}, "t")

    assert alert.source == "test-source"
    assert alert.data == {"source": {"host": "a"}, "msg": "x", "message": "x"}


def test_alert_with_undecodable_bytes_encodes() -> None:
    event = build_alert({"blob": b"\xff\xfe", "msg": "x"}, "t").to_event()

    assert event["data"] == {"blob": "\ufffd\ufffd", "msg": "x", "message": "x"}


def test_prebuilt_raw_bytes_data_encodes_as_base64() -> None:
    event = build_alert({"data": {"blob": b"\x00\xfe\x02"}}, "t").to_event()

    assert event["data"] == {"blob": "AP4C", "message": "An error occurred"}
