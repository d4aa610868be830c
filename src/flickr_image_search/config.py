"""Project-wide configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(os.environ.get("FLICKR_IMAGE_SEARCH_PROJECT_ROOT", Path.cwd()))

load_dotenv(PROJECT_ROOT / ".env")

DATA_DIR = PROJECT_ROOT / "data" / "flickr"

# Flickr REST API
FLICKR_API_KEY = os.environ.get("FLICKR_API_KEY", "")
FLICKR_REST_HOST = "www.flickr.com"
FLICKR_REST_PATH = "/services/rest/"
FLICKR_SEARCH_METHOD = "flickr.photos.search"
SEARCH_PER_PAGE = 20

# Flickr static photo hosting
FLICKR_STATIC_HOST = "live.staticflickr.com"
# b = 1024px on the longest side
PHOTO_SIZE_SUFFIX = "b"

HTTP_TIMEOUT = float(os.environ.get("FLICKR_HTTP_TIMEOUT", "30"))
