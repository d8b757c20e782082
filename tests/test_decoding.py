from __future__ import annotations

import httpx
import pytest

from nexus_sdk.decoding import decode_response
from nexus_sdk.errors import HttpStatusError, RequestFailedError, ResponseDecodeError
from nexus_sdk.models import ErrorCode, RawResponse


def raw(status: int, body: bytes = b"") -> RawResponse:
    return RawResponse(status=status, body=body, headers=httpx.Headers({"Content-Type": "application/json"}))


def test_success_yields_parsed_document() -> None:
    result = decode_response("/v1/games/skyrim.json", raw(200, b'{"a":1}'))
    assert result.ok
    assert result.data == {"a": 1}
    assert result.document() == {"a": 1}
    assert result.unwrap() == {"a": 1}


def test_error_status_is_tagged_with_excerpt() -> None:
    body = b"x" * 500
    result = decode_response("/v1/games/skyrim.json", raw(500, body))

    assert not result.ok
    assert result.error.code is ErrorCode.HTTP_STATUS
    assert result.error.status == 500
    assert result.error.message == "HTTP request failed with status 500 | Body: " + "x" * 300
    assert result.document() == {
        "code": 997,
        "message": result.error.message,
        "endpoint": "/v1/games/skyrim.json",
    }


def test_error_status_without_body() -> None:
    result = decode_response("/v1/games/nope.json", raw(404))
    assert result.error.message == "HTTP request failed with status 404"


def test_missing_response_reports_request_failure() -> None:
    result = decode_response("/v1/games/skyrim.json", None)
    assert result.error.code is ErrorCode.REQUEST_FAILED
    assert result.document()["code"] == 998
    assert result.endpoint == "/v1/games/skyrim.json"


@pytest.mark.parametrize("body", [b"", b"{not json", b"\xff\xfe\x00"])
def test_unparseable_success_body(body: bytes) -> None:
    result = decode_response("/v1/games/skyrim.json", raw(200, body))
    assert result.error.code is ErrorCode.DECODE_FAILED
    assert result.error.message.startswith("JSON parse failed: ")
    assert result.document()["code"] == 996


def test_api_payload_with_error_shaped_fields_stays_successful() -> None:
    payload = b'{"code": 997, "message": "from the server", "endpoint": "x"}'
    result = decode_response("/v1/games/skyrim.json", raw(200, payload))
    assert result.ok
    assert result.error is None


def test_unwrap_raises_matching_errors() -> None:
    with pytest.raises(HttpStatusError) as excinfo:
        decode_response("/p", raw(403, b"forbidden")).unwrap()
    assert excinfo.value.status == 403
    assert excinfo.value.endpoint == "/p"

    with pytest.raises(RequestFailedError):
        decode_response("/p", None).unwrap()

    with pytest.raises(ResponseDecodeError):
        decode_response("/p", raw(200, b"nope")).unwrap()
