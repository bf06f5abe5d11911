from __future__ import annotations

from pathlib import Path
from typing import Callable

from dotenv import load_dotenv
import pytest

from photobrowser.notifications import NotificationCenter
from photobrowser.rest.adapter import FlickrService, RestAdapter, never_primary
from photobrowser.rest.mock import MockFlickrApi
from photobrowser.rest.notifier import FailureNotifier
from photobrowser.rest.types import FailureOutcome, FlickrResponse, ResponseMeta


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[2]
    dotenv_path = repo_root / ".env"
    if dotenv_path.exists():
        load_dotenv(dotenv_path=dotenv_path, override=False)


class RaisingApi:
    def __init__(self, error: BaseException) -> None:
        self.error = error
        self.calls: list[tuple[int, int]] = []

    def fetch_interesting_photos(self, page: int, per_page: int) -> tuple[FlickrResponse, ResponseMeta]:
        self.calls.append((page, per_page))
        raise self.error


class RecordingCallback:
    def __init__(self) -> None:
        self.successes: list[tuple[FlickrResponse, ResponseMeta]] = []
        self.failures: list[FailureOutcome] = []

    def success(self, response: FlickrResponse, meta: ResponseMeta) -> None:
        self.successes.append((response, meta))

    def failure(self, outcome: FailureOutcome) -> None:
        self.failures.append(outcome)


@pytest.fixture
def mock_api() -> MockFlickrApi:
    return MockFlickrApi()


@pytest.fixture
def rest_adapter() -> RestAdapter:
    # synchronous dispatch and delivery; every thread counts as a worker
    return RestAdapter(context_guard=never_primary)


@pytest.fixture
def flickr_service(rest_adapter: RestAdapter, mock_api: MockFlickrApi) -> FlickrService:
    return rest_adapter.create(mock_api)


@pytest.fixture
def failing_service(rest_adapter: RestAdapter) -> Callable[[BaseException], FlickrService]:
    def _build(error: BaseException) -> FlickrService:
        return rest_adapter.create(RaisingApi(error))

    return _build


@pytest.fixture
def recording_callback() -> RecordingCallback:
    return RecordingCallback()


@pytest.fixture
def notification_center() -> NotificationCenter:
    return NotificationCenter()


@pytest.fixture
def notifier(notification_center: NotificationCenter) -> FailureNotifier:
    return FailureNotifier(notification_center)
