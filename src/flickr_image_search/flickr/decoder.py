"""Decode Flickr REST responses into models or errors."""

import json
import re
from typing import Any

from flickr_image_search.errors import FlickrReportedError, InvalidServerResponseError
from flickr_image_search.models import PhotoPage, PhotoRef, SearchResult

# format=json without nojsoncallback answers with JSONP: jsonFlickrApi({...})
_JSONP_RE = re.compile(r"^\s*jsonFlickrApi\((?P<body>.*)\)\s*;?\s*$", re.DOTALL)


def _load_json(body: bytes | str) -> Any:
    """Parse the body as JSON, unwrapping the JSONP callback when present."""
    if isinstance(body, bytes):
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidServerResponseError("Body is not UTF-8.") from e
    else:
        text = body
    match = _JSONP_RE.match(text)
    if match:
        text = match.group("body")
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidServerResponseError(f"Body is not JSON: {e.msg}.") from e


def _require(data: dict, key: str) -> Any:
    if key not in data:
        raise InvalidServerResponseError(f"Missing field {key!r}.")
    return data[key]


def _require_str(data: dict, key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise InvalidServerResponseError(f"Field {key!r} must be a string.")
    return value


def _require_int(data: dict, key: str) -> int:
    """Read an integer field; Flickr sends some counts as digit strings."""
    value = _require(data, key)
    if isinstance(value, bool):
        raise InvalidServerResponseError(f"Field {key!r} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.strip().isdigit():
        return int(value)
    raise InvalidServerResponseError(f"Field {key!r} must be an integer.")


def _require_flag(data: dict, key: str) -> bool:
    value = _require(data, key)
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise InvalidServerResponseError(f"Field {key!r} must be 0 or 1.")


def _parse_photo(entry: Any) -> PhotoRef:
    if not isinstance(entry, dict):
        raise InvalidServerResponseError("Photo entry must be an object.")
    return PhotoRef(
        id=_require_str(entry, "id"),
        owner=_require_str(entry, "owner"),
        secret=_require_str(entry, "secret"),
        server=_require_str(entry, "server"),
        farm=_require_int(entry, "farm"),
        title=_require_str(entry, "title"),
        is_public=_require_flag(entry, "ispublic"),
        is_friend=_require_flag(entry, "isfriend"),
        is_family=_require_flag(entry, "isfamily"),
    )


def _parse_page(photos: Any) -> PhotoPage:
    if not isinstance(photos, dict):
        raise InvalidServerResponseError("Field 'photos' must be an object.")
    entries = _require(photos, "photo")
    if not isinstance(entries, list):
        raise InvalidServerResponseError("Field 'photo' must be a list.")
    return PhotoPage(
        page=_require_int(photos, "page"),
        pages=_require_int(photos, "pages"),
        per_page=_require_int(photos, "perpage"),
        total=_require_int(photos, "total"),
        photos=tuple(_parse_photo(entry) for entry in entries),
    )


def parse_search_result(body: bytes | str) -> SearchResult:
    """Parse a ``flickr.photos.search`` body without interpreting ``stat``.

    Raises:
        InvalidServerResponseError: The body does not have the expected shape.
    """
    data = _load_json(body)
    if not isinstance(data, dict):
        raise InvalidServerResponseError("Top-level value must be an object.")

    stat = _require_str(data, "stat")
    if stat == "ok":
        return SearchResult(status="ok", page=_parse_page(_require(data, "photos")))
    if stat == "fail":
        return SearchResult(
            status="fail",
            error_code=_require_int(data, "code"),
            error_message=_require_str(data, "message"),
        )
    raise InvalidServerResponseError(f"Unknown stat {stat!r}.")


def decode_search_response(body: bytes | str) -> PhotoPage:
    """Decode a search body into a page, which may hold zero photos.

    Raises:
        FlickrReportedError: Flickr answered with ``stat == "fail"``.
        InvalidServerResponseError: The body does not have the expected shape.
    """
    result = parse_search_result(body)
    if result.status == "fail":
        raise FlickrReportedError(result.error_code, result.error_message)
    return result.page


def decode_photo_bytes(body: bytes) -> bytes:
    """Return image bytes untouched; an empty body is not an image."""
    if not body:
        raise InvalidServerResponseError("Empty image body.")
    return body
