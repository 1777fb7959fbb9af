from __future__ import annotations

import logging

from intercom_client.result import Failure, Success, classify_response
from intercom_client.transport import TransportResponse


def test_success_prefers_json() -> None:
    result = classify_response(TransportResponse(status=201, json={"id": "c_1"}), "/contacts")

    assert result == Success(data={"id": "c_1"}, status=201)
    assert result.to_dict() == {"ok": True, "data": {"id": "c_1"}, "status": 201}


def test_success_falls_back_to_raw() -> None:
    result = classify_response(TransportResponse(status=202, raw="accepted"), "/x")

    assert result == Success(data="accepted", status=202)


def test_failure_uses_raw_text(caplog) -> None:
    with caplog.at_level(logging.ERROR, logger="intercom_client.result"):
        result = classify_response(TransportResponse(status=401, raw="unauthorized"), "/me")

    assert result == Failure(error="unauthorized", status=401, data="unauthorized")
    assert "status=401 path=/me" in caplog.text


def test_failure_serializes_json_body() -> None:
    body = {"type": "error.list", "errors": [{"code": "not_found", "message": "Contact Not Found"}]}

    result = classify_response(TransportResponse(status=404, json=body), "/contacts/1")

    assert result.ok is False
    assert result.status == 404
    assert result.data == body
    assert '"code": "not_found"' in result.error


def test_failure_without_body_reports_status() -> None:
    assert classify_response(TransportResponse(status=500, raw=""), "/x").error == "unexpected status 500"
    assert classify_response(TransportResponse(status=503), "/x").error == "unexpected status 503"


def test_redirect_status_is_a_failure() -> None:
    assert classify_response(TransportResponse(status=302, raw="moved"), "/x").ok is False


def test_local_failure_dict_has_no_status() -> None:
    assert Failure("missing id").to_dict() == {"ok": False, "error": "missing id"}


def test_json_null_failure_renders_null() -> None:
    result = classify_response(TransportResponse(status=500, json=None), "/x")

    assert result == Failure(error="null", status=500, data=None)


def test_json_null_success_keeps_none() -> None:
    assert classify_response(TransportResponse(status=200, json=None, raw=None), "/x") == Success(data=None, status=200)
