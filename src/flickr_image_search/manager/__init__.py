"""Command-line entry point: search Flickr and download result pages."""

import argparse
import logging
import sys


def main() -> None:
    """CLI entry point for Flickr image search."""
    parser = argparse.ArgumentParser(description="Flickr image search")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # search
    search_parser = subparsers.add_parser("search", help="Search photos by keyword")
    search_parser.add_argument("term", help="Search text")
    search_parser.add_argument("--page", type=int, default=1, help="Result page (default: 1)")

    # download
    dl_parser = subparsers.add_parser("download", help="Download one page of search results")
    dl_parser.add_argument("term", help="Search text")
    dl_parser.add_argument("--page", type=int, default=1, help="Result page (default: 1)")
    dl_parser.add_argument("--out", help="Download directory (default: data/flickr)")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    if args.page < 1:
        parser.error("--page must be >= 1")

    from flickr_image_search.app_logging import configure_logging
    from flickr_image_search.errors import FlickrError

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.command == "search":
            _cmd_search(args)
        elif args.command == "download":
            _cmd_download(args)
    except (FlickrError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


def _cmd_search(args: argparse.Namespace) -> None:
    """Print one page of search results."""
    from flickr_image_search.flickr.client import FlickrClient
    from flickr_image_search.flickr.endpoints import build_photo_image_request

    with FlickrClient() as client:
        photo_page = client.search_photos(args.term, args.page)
    print(f"Page {photo_page.page}/{photo_page.pages} ({photo_page.total} photos)")
    for photo in photo_page.photos:
        print(f"  {photo.id}  {photo.title}  {build_photo_image_request(photo).url}")


def _cmd_download(args: argparse.Namespace) -> None:
    """Download one page of search results."""
    from pathlib import Path

    from flickr_image_search.flickr.client import FlickrClient
    from flickr_image_search.manager.downloader import download_search_page

    out_dir = Path(args.out) if args.out else None
    with FlickrClient() as client:
        downloaded = download_search_page(client, args.term, args.page, out_dir)
    print(f"Downloaded {len(downloaded)} new images for '{args.term}'.")
