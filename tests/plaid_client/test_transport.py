import json

import httpx
import pytest
import requests
from unittest.mock import MagicMock

from plaid_client.errors import PlaidTimeoutError, PlaidTransportError
from plaid_client.transport import HttpxTransport, RequestsTransport, TransportResponse


class FakeResponse:
    def __init__(self, status_code=200, content=b"{}"):
        self.status_code = status_code
        self.content = content


@pytest.mark.unit
def test_requests_transport_posts_json():
    transport = RequestsTransport(timeout=5)
    transport.session.request = MagicMock(return_value=FakeResponse(200, b'{"ok": true}'))

    response = transport.execute(
        "POST", "https://sandbox.plaid.com/item/get", {"access_token": "a"}, {"X-Test": "1"}
    )

    assert response == TransportResponse(status_code=200, body=b'{"ok": true}')
    transport.session.request.assert_called_once_with(
        "POST",
        "https://sandbox.plaid.com/item/get",
        json={"access_token": "a"},
        headers={"X-Test": "1"},
        timeout=5,
    )


@pytest.mark.unit
def test_requests_transport_never_raises_on_status():
    transport = RequestsTransport()
    transport.session.request = MagicMock(return_value=FakeResponse(400, b'{"error_code": "X"}'))

    response = transport.execute("POST", "https://sandbox.plaid.com/item/get", {})

    assert response.status_code == 400


@pytest.mark.unit
def test_requests_transport_default_timeout():
    assert RequestsTransport().timeout == 30


@pytest.mark.unit
def test_requests_transport_timeout_raises():
    transport = RequestsTransport(timeout=2)
    transport.session.request = MagicMock(side_effect=requests.Timeout("timeout"))

    with pytest.raises(PlaidTimeoutError) as e:
        transport.execute("POST", "https://sandbox.plaid.com/item/get", {})

    assert "timed out" in str(e.value).lower()


@pytest.mark.unit
def test_requests_transport_connection_error_raises():
    transport = RequestsTransport()
    transport.session.request = MagicMock(side_effect=requests.ConnectionError("refused"))

    with pytest.raises(PlaidTransportError) as e:
        transport.execute("POST", "https://sandbox.plaid.com/item/get", {})

    assert not isinstance(e.value, PlaidTimeoutError)
    assert "refused" in str(e.value)


@pytest.mark.unit
def test_requests_transport_applies_default_headers():
    transport = RequestsTransport(default_headers={"User-Agent": "test-agent"})

    assert transport.session.headers["User-Agent"] == "test-agent"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_httpx_transport_posts_json():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["body"] = json.loads(request.content)
        seen["content_type"] = request.headers["Content-Type"]
        return httpx.Response(201, content=b'{"ok": true}')

    transport = HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    response = await transport.execute(
        "POST",
        "https://sandbox.plaid.com/item/get",
        {"access_token": "a"},
        {"Content-Type": "application/json"},
    )
    await transport.aclose()

    assert response == TransportResponse(status_code=201, body=b'{"ok": true}')
    assert seen == {
        "method": "POST",
        "url": "https://sandbox.plaid.com/item/get",
        "body": {"access_token": "a"},
        "content_type": "application/json",
    }


@pytest.mark.unit
@pytest.mark.asyncio
async def test_httpx_transport_timeout_raises():
    def handler(request):
        raise httpx.ReadTimeout("slow", request=request)

    transport = HttpxTransport(
        timeout=1, client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )

    with pytest.raises(PlaidTimeoutError):
        await transport.execute("POST", "https://sandbox.plaid.com/item/get", {})
    await transport.aclose()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_httpx_transport_connection_error_raises():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    transport = HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))

    with pytest.raises(PlaidTransportError) as e:
        await transport.execute("POST", "https://sandbox.plaid.com/item/get", {})
    await transport.aclose()

    assert not isinstance(e.value, PlaidTimeoutError)


@pytest.mark.unit
def test_transports_keep_explicit_timeout():
    assert RequestsTransport(timeout=0.5).timeout == 0.5
    assert HttpxTransport(timeout=0.5).timeout == 0.5
