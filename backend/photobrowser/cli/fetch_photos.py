from __future__ import annotations

import argparse
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
import sys

from dotenv import load_dotenv

from photobrowser.logging_setup import configure_logging
from photobrowser.notifications import NotificationCenter
from photobrowser.rest.adapter import FlickrService, RestAdapter
from photobrowser.rest.executors import SynchronousExecutor
from photobrowser.rest.flickr import PHOTO_SIZES, build_flickr_service, build_photo_url
from photobrowser.rest.futures import CallFailed, fetch_page
from photobrowser.rest.mock import MockFlickrApi
from photobrowser.rest.notifier import FailureNotifier
from photobrowser.rest.types import FlickrResponse
from photobrowser.settings import FlickrSettings, load_flickr_settings


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
    return value


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be > 0, got {value}")
    return value


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch a page of interesting photos from Flickr")
    parser.add_argument("--page", type=_non_negative_int, default=0, help="Page number, default 0")
    parser.add_argument("--per-page", dest="per_page", type=_positive_int, default=None, help="Photos per page, default FLICKR_PER_PAGE")
    parser.add_argument("--size", default="z", choices=sorted(PHOTO_SIZES), help="Photo size suffix for printed URLs")
    parser.add_argument("--mock", action="store_true", help="Serve fixture pages instead of calling Flickr")
    return parser.parse_args(argv)


def _build_service(settings: FlickrSettings, use_mock: bool) -> FlickrService:
    if use_mock:
        return RestAdapter().create(MockFlickrApi())
    return build_flickr_service(
        settings,
        http_executor=SynchronousExecutor(),
        callback_executor=SynchronousExecutor(),
    )


def _print_page(response: FlickrResponse, size: str) -> None:
    info = response.photos_info
    for photo in info.photos:
        print(f"{photo.id}\t{photo.title}\t{build_photo_url(photo, size=size)}")
    print(f"Page {info.page} of {info.pages}: {len(info.photos)} photos ({info.total} total)")


def main(argv: list[str] | None = None) -> int:
    repo_root = Path(__file__).resolve().parents[3]
    load_dotenv(repo_root / ".env")

    args = _parse_args(argv)
    settings = load_flickr_settings()
    configure_logging(settings.log_level)

    service = _build_service(settings, use_mock=args.mock)
    notifier = FailureNotifier(NotificationCenter())
    per_page = args.per_page if args.per_page is not None else settings.per_page

    # the request has to be issued off the main thread
    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="photobrowser-cli") as pool:
        try:
            response, _meta = pool.submit(fetch_page, service, args.page, per_page).result()
        except CallFailed as failure:
            notification = notifier.notify(failure.outcome)
            print(notification.text, file=sys.stderr)
            return 1

    _print_page(response, args.size)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
