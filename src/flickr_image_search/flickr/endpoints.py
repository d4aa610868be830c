"""Build request descriptors for the Flickr endpoints this package calls."""

from dataclasses import dataclass

import httpx

from flickr_image_search.config import (
    FLICKR_API_KEY,
    FLICKR_REST_HOST,
    FLICKR_REST_PATH,
    FLICKR_SEARCH_METHOD,
    FLICKR_STATIC_HOST,
    PHOTO_SIZE_SUFFIX,
    SEARCH_PER_PAGE,
)
from flickr_image_search.errors import InvalidURLError
from flickr_image_search.models import PhotoRef


@dataclass(frozen=True)
class RequestDescriptor:
    """Everything needed to build the URL of a GET request.

    Query values are kept verbatim; percent-encoding happens when the URL
    is rendered.
    """

    scheme: str
    host: str
    path: str
    query: tuple[tuple[str, str], ...] = ()
    method: str = "GET"

    @property
    def url(self) -> str:
        """Render the absolute URL, query parameters in stored order.

        Raises:
            InvalidURLError: The parts do not form a valid URL, e.g. control
                characters in the path or an over-long query.
        """
        try:
            url = httpx.URL(scheme=self.scheme, host=self.host, path=self.path)
            if self.query:
                url = url.copy_with(params=list(self.query))
        except httpx.InvalidURL as e:
            raise InvalidURLError() from e
        return str(url)

    def redacted_url(self) -> str:
        """Render the URL with the API key masked, for logs."""
        query = tuple(
            (name, "***" if name == "api_key" else value) for name, value in self.query
        )
        return RequestDescriptor(self.scheme, self.host, self.path, query, self.method).url


def build_search_request(
    search_term: str, page: int, api_key: str | None = None
) -> RequestDescriptor:
    """Build a ``flickr.photos.search`` request for one page of results."""
    key = FLICKR_API_KEY if api_key is None else api_key
    return RequestDescriptor(
        scheme="https",
        host=FLICKR_REST_HOST,
        path=FLICKR_REST_PATH,
        query=(
            ("api_key", key),
            ("method", FLICKR_SEARCH_METHOD),
            ("text", search_term),
            ("page", str(page)),
            ("per_page", str(SEARCH_PER_PAGE)),
            ("format", "json"),
        ),
    )


def build_photo_image_request(photo: PhotoRef) -> RequestDescriptor:
    """Build the request for the large (1024px) rendition of a photo."""
    return RequestDescriptor(
        scheme="https",
        host=FLICKR_STATIC_HOST,
        path=f"/{photo.server}/{photo.id}_{photo.secret}_{PHOTO_SIZE_SUFFIX}.jpg",
    )
