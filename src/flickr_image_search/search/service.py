"""Image services: search results paired with their image bytes."""

import logging
from typing import Protocol

from flickr_image_search.errors import FlickrError
from flickr_image_search.flickr.client import FlickrClient
from flickr_image_search.models import ImageViewModel

logger = logging.getLogger(__name__)


class ImageService(Protocol):
    """Source of view models for one page of a keyword search."""

    def fetch_images(self, search_term: str, page: int = 1) -> list[ImageViewModel]:
        """Return the view models for one result page."""


class FlickrImageService(ImageService):
    """Searches Flickr and downloads each hit's image."""

    def __init__(self, client: FlickrClient) -> None:
        self.client = client

    def fetch_images(self, search_term: str, page: int = 1) -> list[ImageViewModel]:
        photo_page = self.client.search_photos(search_term, page)
        view_models: list[ImageViewModel] = []
        for photo in photo_page.photos:
            try:
                image = self.client.fetch_photo_bytes(photo)
            except FlickrError as e:
                logger.warning("Could not fetch image for photo %s: %s", photo.id, e)
                image = None
            view_models.append(ImageViewModel(title=photo.title, image=image, photo=photo))
        return view_models


class PreviewService(ImageService):
    """Fixed view models for previews and UI work without network access."""

    image_view_models = (
        ImageViewModel(title="Title 0\n2nd row", image=None),
        ImageViewModel(title="Title 1", image=None),
        ImageViewModel(title="Title 2", image=None),
    )

    def fetch_images(self, search_term: str, page: int = 1) -> list[ImageViewModel]:
        return list(self.image_view_models)
