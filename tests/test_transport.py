"""Tests for the requests-backed transport."""

from unittest.mock import MagicMock

import pytest
import requests

from predator_sdk.core.transport import HttpTransport, build_http_session, decode_body
from predator_sdk.utils.config import SdkConfig


def _response(status: int, body: bytes) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def http(session):
    return HttpTransport(SdkConfig(BaseUrl="https://api.predator.bot/"), session=session)


@pytest.mark.asyncio
async def test_get_joins_base_url_and_decodes_json(http, session):
    session.request.return_value = _response(200, b'{"encryptionKey": "00ff"}')

    result = await http.get("/encryption-key")

    assert result == {"encryptionKey": "00ff"}
    session.request.assert_called_once_with(
        "GET", "https://api.predator.bot/encryption-key", json=None, timeout=None
    )


@pytest.mark.asyncio
async def test_post_sends_json_body(http, session):
    session.request.return_value = _response(200, b'{"status": "ok"}')

    result = await http.post("/buy", {"encryptedData": "aa:bb"})

    assert result == {"status": "ok"}
    session.request.assert_called_once_with(
        "POST", "https://api.predator.bot/buy", json={"encryptedData": "aa:bb"}, timeout=None
    )


@pytest.mark.asyncio
async def test_error_status_raises_http_error_with_response(http, session):
    session.request.return_value = _response(503, b"maintenance")

    with pytest.raises(requests.HTTPError) as info:
        await http.post("/sell", {"encryptedData": "aa:bb"})

    assert info.value.response.status_code == 503


@pytest.mark.asyncio
async def test_connection_errors_propagate(http, session):
    session.request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(requests.ConnectionError):
        await http.get("/encryption-key")


def test_configured_timeout_is_used(session):
    http = HttpTransport(SdkConfig(RequestTimeout=12.5), session=session)

    assert http.timeout == 12.5


@pytest.mark.parametrize(
    "body, expected",
    [(b'{"a": 1}', {"a": 1}), (b"plain text", "plain text"), (b"", None), (b"[1, 2]", [1, 2])],
)
def test_decode_body(body, expected):
    assert decode_body(_response(200, body)) == expected


def test_session_gets_configured_headers():
    sess = build_http_session(SdkConfig(Headers={"Content-Type": "application/json", "X-Client": "sdk"}))

    assert sess.headers["X-Client"] == "sdk"
    assert sess.headers["Content-Type"] == "application/json"


def test_close_closes_session(http, session):
    http.close()

    session.close.assert_called_once()
