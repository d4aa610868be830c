"""Data models for Flickr search results."""

from dataclasses import dataclass
from typing import Literal

SearchStatus = Literal["ok", "fail"]


@dataclass(frozen=True)
class SearchRequest:
    """One keyword search for one result page."""

    search_term: str
    page: int = 1

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")


@dataclass(frozen=True)
class PhotoRef:
    """Metadata for a single photo from a Flickr search."""

    id: str
    owner: str
    secret: str
    server: str
    farm: int
    title: str
    is_public: bool = True
    is_friend: bool = False
    is_family: bool = False

    @property
    def page_url(self) -> str:
        """URL of the photo's page on flickr.com."""
        return f"https://www.flickr.com/photos/{self.owner}/{self.id}"


@dataclass(frozen=True)
class PhotoPage:
    """One page of search results, photos in the order Flickr sent them."""

    page: int
    pages: int
    per_page: int
    total: int
    photos: tuple[PhotoRef, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.photos

    @property
    def has_next_page(self) -> bool:
        return self.page < self.pages


@dataclass(frozen=True)
class SearchResult:
    """A decoded ``flickr.photos.search`` payload.

    ``status == "ok"`` carries a page and no error fields;
    ``status == "fail"`` carries both error fields and no page.
    """

    status: SearchStatus
    page: PhotoPage | None = None
    error_code: int | None = None
    error_message: str | None = None

    def __post_init__(self) -> None:
        if self.status == "ok":
            if self.page is None:
                raise ValueError("an ok result needs a photo page")
            if self.error_code is not None or self.error_message is not None:
                raise ValueError("an ok result cannot carry an error")
        elif self.status == "fail":
            if self.page is not None:
                raise ValueError("a failed result cannot carry a photo page")
            if self.error_code is None or self.error_message is None:
                raise ValueError("a failed result needs both code and message")
        else:
            raise ValueError(f"unknown status: {self.status!r}")

    @property
    def ok(self) -> bool:
        return self.status == "ok"


@dataclass(frozen=True)
class ImageViewModel:
    """A search hit ready for display: title plus image bytes, if fetched."""

    title: str
    image: bytes | None
    photo: PhotoRef | None = None
