"""Tests for the HTTPX transport."""

import httpx
import pytest

from flickr_image_search.errors import InvalidServerResponseError, InvalidURLError
from flickr_image_search.flickr.endpoints import build_search_request
from flickr_image_search.flickr.transport import HttpxTransport


def _transport(handler) -> HttpxTransport:
    return HttpxTransport(http_client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_send_returns_body():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, content=b'{"stat": "ok"}')

    body = _transport(handler).send(build_search_request("aaa", 2, api_key="KEY"))

    assert body == b'{"stat": "ok"}'
    assert seen[0].method == "GET"
    assert seen[0].url.host == "www.flickr.com"
    assert seen[0].url.path == "/services/rest/"
    assert list(seen[0].url.params.multi_items()) == [
        ("api_key", "KEY"),
        ("method", "flickr.photos.search"),
        ("text", "aaa"),
        ("page", "2"),
        ("per_page", "20"),
        ("format", "json"),
    ]


def test_send_connection_error_is_invalid_url():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(InvalidURLError):
        _transport(handler).send(build_search_request("aaa", 1, api_key="KEY"))


def test_send_timeout_is_invalid_url():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(InvalidURLError):
        _transport(handler).send(build_search_request("aaa", 1, api_key="KEY"))


@pytest.mark.parametrize("status", [404, 500, 503])
def test_send_error_status_is_invalid_server_response(status):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status)

    with pytest.raises(InvalidServerResponseError, match=str(status)):
        _transport(handler).send(build_search_request("aaa", 1, api_key="KEY"))


def test_context_manager_closes_owned_client():
    with HttpxTransport(timeout=5) as transport:
        client = transport.http_client
    assert client.is_closed


def test_close_leaves_injected_client_open():
    http_client = httpx.Client()
    HttpxTransport(http_client=http_client).close()
    assert not http_client.is_closed
    http_client.close()
