"""Flickr REST API client."""

import logging

from flickr_image_search.config import FLICKR_API_KEY
from flickr_image_search.errors import FlickrReportedError
from flickr_image_search.flickr.decoder import decode_photo_bytes, decode_search_response
from flickr_image_search.flickr.endpoints import (
    build_photo_image_request,
    build_search_request,
)
from flickr_image_search.flickr.transport import HttpxTransport, Transport
from flickr_image_search.models import PhotoPage, PhotoRef, SearchRequest

logger = logging.getLogger(__name__)


class FlickrClient:
    """Client for Flickr photo search and photo downloads.

    Each call issues exactly one request through the transport and either
    returns its result or raises a single ``FlickrError``. Nothing is
    cached or retried.
    """

    def __init__(self, transport: Transport | None = None, api_key: str | None = None) -> None:
        self.api_key = api_key or FLICKR_API_KEY
        if not self.api_key:
            raise ValueError("Flickr API key is required. Set FLICKR_API_KEY in .env file.")
        self._owns_transport = transport is None
        self.transport = transport or HttpxTransport()

    def search_photos(self, search_term: str, page: int = 1) -> PhotoPage:
        """Search photos by free text and return one page of results.

        Raises:
            InvalidURLError: The request could not be sent.
            InvalidServerResponseError: The response was not a search payload.
            FlickrReportedError: Flickr rejected the request.
        """
        request = build_search_request(search_term, page, api_key=self.api_key)
        logger.debug("GET %s", request.redacted_url())
        body = self.transport.send(request)
        try:
            photo_page = decode_search_response(body)
        except FlickrReportedError as e:
            logger.warning("Flickr rejected search %r: %s", search_term, e.message)
            raise
        logger.debug(
            "Search %r page %d/%d: %d photos",
            search_term,
            photo_page.page,
            photo_page.pages,
            len(photo_page.photos),
        )
        return photo_page

    def search(self, request: SearchRequest) -> PhotoPage:
        """Run a search described by a SearchRequest."""
        return self.search_photos(request.search_term, request.page)

    def fetch_photo_bytes(self, photo: PhotoRef) -> bytes:
        """Download the large rendition of a photo."""
        request = build_photo_image_request(photo)
        logger.debug("GET %s", request.url)
        return decode_photo_bytes(self.transport.send(request))

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "FlickrClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
