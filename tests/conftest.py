"""Shared test fixtures."""

import json
from collections.abc import Callable

import pytest

from flickr_image_search.flickr.endpoints import RequestDescriptor
from flickr_image_search.models import PhotoRef

API_KEY = "test-key"


class FakeTransport:
    """Transport double that records requests and answers from a callable."""

    def __init__(self, respond: Callable[[RequestDescriptor], bytes]) -> None:
        self.respond = respond
        self.requests: list[RequestDescriptor] = []

    def send(self, request: RequestDescriptor) -> bytes:
        self.requests.append(request)
        return self.respond(request)


def make_photo_entry(photo_id: str, title: str = "Photo") -> dict:
    """Helper to build one wire-format photo entry."""
    return {
        "id": photo_id,
        "owner": "12345678@N00",
        "secret": f"s{photo_id}",
        "server": "65535",
        "farm": 66,
        "title": title,
        "ispublic": 1,
        "isfriend": 0,
        "isfamily": 0,
    }


def make_search_body(
    entries: list[dict], page: int = 1, pages: int = 1, total: int | None = None
) -> bytes:
    """Helper to build an ok search payload."""
    return json.dumps(
        {
            "photos": {
                "page": page,
                "pages": pages,
                "perpage": 20,
                "total": len(entries) if total is None else total,
                "photo": entries,
            },
            "stat": "ok",
        }
    ).encode()


@pytest.fixture
def sample_photo() -> PhotoRef:
    """A single PhotoRef fixture."""
    return PhotoRef(
        id="53912345678",
        owner="12345678@N00",
        secret="abc123",
        server="65535",
        farm=66,
        title="Sunset",
        is_public=True,
        is_friend=False,
        is_family=False,
    )


@pytest.fixture
def empty_search_body() -> bytes:
    return b'{"stat":"ok","photos":{"page":1,"pages":0,"perpage":20,"total":0,"photo":[]}}'


@pytest.fixture
def invalid_key_body() -> bytes:
    return b'{"stat":"fail","code":100,"message":"Invalid API Key (Key has invalid format)"}'
