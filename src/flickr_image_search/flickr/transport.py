"""Transports that send a RequestDescriptor and return the response body."""

import logging
from typing import Protocol

import httpx

from flickr_image_search.config import HTTP_TIMEOUT
from flickr_image_search.errors import InvalidServerResponseError, InvalidURLError
from flickr_image_search.flickr.endpoints import RequestDescriptor

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Sends one request and returns the raw response body.

    Implementations raise ``InvalidURLError`` when no response could be
    obtained and ``InvalidServerResponseError`` for a non-success status.
    """

    def send(self, request: RequestDescriptor) -> bytes:
        """Send the request and return the body bytes."""


class HttpxTransport(Transport):
    """HTTPX-backed transport."""

    def __init__(
        self, http_client: httpx.Client | None = None, timeout: float = HTTP_TIMEOUT
    ) -> None:
        self._owns_client = http_client is None
        self.http_client = http_client or httpx.Client(timeout=timeout)

    def send(self, request: RequestDescriptor) -> bytes:
        try:
            resp = self.http_client.request(request.method, request.url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise InvalidServerResponseError(f"HTTP {e.response.status_code}.") from e
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise InvalidURLError() from e
        except httpx.TransportError as e:
            logger.debug("Transport failure for %s: %s", request.redacted_url(), e)
            raise InvalidURLError() from e
        return resp.content

    def close(self) -> None:
        """Close the underlying HTTP session if this transport created it."""
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
