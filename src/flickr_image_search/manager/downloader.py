"""Download the photos of a Flickr search page."""

import logging
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn

from flickr_image_search.config import DATA_DIR
from flickr_image_search.errors import FlickrError
from flickr_image_search.flickr.client import FlickrClient
from flickr_image_search.models import PhotoRef

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DownloadedPhoto:
    """A photo saved to disk."""

    photo: PhotoRef
    path: Path
    image_format: str | None
    width: int | None
    height: int | None
    file_size_bytes: int


def download_search_page(
    client: FlickrClient,
    search_term: str,
    page: int = 1,
    out_dir: Path | None = None,
) -> list[DownloadedPhoto]:
    """Download every photo on one page of search results.

    Args:
        client: FlickrClient instance.
        search_term: Free-text query.
        page: 1-based result page.
        out_dir: Download root; a per-term directory is created inside it.

    Returns:
        DownloadedPhoto for each newly saved file. Photos already on disk or
        whose download failed are skipped.
    """
    root = out_dir or DATA_DIR
    term_dir = root / (sanitize_dirname(search_term) or "untitled")
    term_dir.mkdir(parents=True, exist_ok=True)

    photo_page = client.search_photos(search_term, page)
    if photo_page.is_empty:
        return []

    downloaded: list[DownloadedPhoto] = []

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
        TextColumn("{task.completed}/{task.total}"),
    ) as progress:
        task = progress.add_task(
            f"Downloading '{search_term}' page {photo_page.page}", total=len(photo_page.photos)
        )
        for photo in photo_page.photos:
            result = _download_single_photo(client, photo, term_dir)
            if result is not None:
                downloaded.append(result)
            progress.advance(task)

    return downloaded


def _download_single_photo(
    client: FlickrClient, photo: PhotoRef, term_dir: Path
) -> DownloadedPhoto | None:
    """Download a single photo and describe the saved file."""
    local_path = term_dir / f"{photo.id}.jpg"
    if local_path.exists():
        return None

    try:
        content = client.fetch_photo_bytes(photo)
    except FlickrError as e:
        logger.warning("Skipping photo %s: %s", photo.id, e)
        return None

    local_path.write_bytes(content)

    try:
        img = Image.open(BytesIO(content))
        image_format = img.format
        width, height = img.size
    except UnidentifiedImageError:
        image_format = None
        width = None
        height = None

    return DownloadedPhoto(
        photo=photo,
        path=local_path,
        image_format=image_format,
        width=width,
        height=height,
        file_size_bytes=len(content),
    )


def sanitize_dirname(name: str) -> str:
    """Convert a search term to a safe directory name."""
    safe = "".join(c if c.isalnum() or c in "-_ " else "" for c in name)
    return safe.strip().replace(" ", "_").lower()
