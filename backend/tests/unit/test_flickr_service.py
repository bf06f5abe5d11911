from __future__ import annotations

import httpx
import pytest

from photobrowser.manifest import APP_MANIFEST, Permission
from photobrowser.notifications import NotificationCenter
from photobrowser.rest.adapter import RestAdapter
from photobrowser.rest.mock import PAGE_0, PAGE_1, PAGE_2, MockFlickrApi
from photobrowser.rest.notifier import FailureNotifier, NotifyingCallback
from photobrowser.rest.types import (
    ConversionError,
    HttpStatusError,
    IllegalStateError,
    UnexpectedFailure,
    UnexpectedRestError,
)
from photobrowser.settings import load_flickr_settings


def test_get_on_primary_context_raises_before_any_request(mock_api: MockFlickrApi, recording_callback) -> None:
    service = RestAdapter(context_guard=lambda: True).create(mock_api)

    with pytest.raises(IllegalStateError):
        service.get_interesting_photos(0, 10, recording_callback)

    assert mock_api.calls == []
    assert not recording_callback.successes
    assert not recording_callback.failures


def test_default_context_guard_rejects_main_thread(mock_api: MockFlickrApi, recording_callback) -> None:
    service = RestAdapter().create(mock_api)

    with pytest.raises(IllegalStateError):
        service.get_interesting_photos(PAGE_0, 10, recording_callback)

    assert mock_api.calls == []


def test_illegal_state_error_is_a_runtime_error() -> None:
    assert issubclass(IllegalStateError, RuntimeError)


def test_app_has_internet_permission() -> None:
    assert APP_MANIFEST.declares(Permission.INTERNET)


def test_api_key_is_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FLICKR_API_KEY", "test-key")
    assert load_flickr_settings().api_key == "test-key"


def test_should_return_some_photos(flickr_service, recording_callback) -> None:
    flickr_service.get_interesting_photos(PAGE_0, 10, recording_callback)

    assert not recording_callback.failures
    assert len(recording_callback.successes) == 1
    response, meta = recording_callback.successes[0]
    assert response.photos_info.photos
    assert meta.status_code == 200


def test_second_fixture_page_is_not_empty(flickr_service, recording_callback) -> None:
    flickr_service.get_interesting_photos(PAGE_1, 10, recording_callback)

    response, _meta = recording_callback.successes[0]
    assert response.photos_info.photos


def test_should_return_no_photos(flickr_service, recording_callback) -> None:
    flickr_service.get_interesting_photos(PAGE_2, 10, recording_callback)

    assert not recording_callback.failures
    response, _meta = recording_callback.successes[0]
    assert response.photos_info.photos == ()
    assert response.photos_info.is_empty


def test_per_page_limits_fixture_page(flickr_service, recording_callback) -> None:
    flickr_service.get_interesting_photos(PAGE_0, 1, recording_callback)

    response, _meta = recording_callback.successes[0]
    assert len(response.photos_info.photos) == 1


@pytest.mark.parametrize(("page", "per_page"), [(-1, 10), (0, 0), (0, -5)])
def test_invalid_arguments_are_rejected_without_a_request(
    page: int, per_page: int, flickr_service, mock_api: MockFlickrApi, recording_callback
) -> None:
    with pytest.raises(ValueError):
        flickr_service.get_interesting_photos(page, per_page, recording_callback)

    assert mock_api.calls == []


def test_toasts_if_network_error(failing_service, notifier: FailureNotifier, notification_center: NotificationCenter) -> None:
    service = failing_service(OSError("Network Error"))

    service.get_interesting_photos(0, 10, NotifyingCallback(notifier))

    assert notification_center.latest_text() == "Network Error"


def test_toasts_if_transport_error(failing_service, notifier: FailureNotifier, notification_center: NotificationCenter) -> None:
    service = failing_service(httpx.ConnectError("Network Error"))

    service.get_interesting_photos(0, 10, NotifyingCallback(notifier))

    assert notification_center.latest_text() == "Network Error"


def test_toasts_if_http_error(failing_service, notifier: FailureNotifier, notification_center: NotificationCenter) -> None:
    service = failing_service(HttpStatusError(404, "Page not found"))

    service.get_interesting_photos(0, 10, NotifyingCallback(notifier))

    assert notification_center.latest_text() == "Http Error"


def test_toasts_if_conversion_error(failing_service, notifier: FailureNotifier, notification_center: NotificationCenter) -> None:
    service = failing_service(ConversionError("Conversion Error"))

    service.get_interesting_photos(0, 10, NotifyingCallback(notifier))

    assert notification_center.latest_text() == "Conversion Error"


def test_rethrows_unexpected_error(failing_service, notifier: FailureNotifier, notification_center: NotificationCenter) -> None:
    cause = Exception("Unknown Error")
    service = failing_service(cause)

    with pytest.raises(UnexpectedRestError) as exc_info:
        service.get_interesting_photos(0, 10, NotifyingCallback(notifier))

    assert exc_info.value.__cause__ is cause
    assert isinstance(exc_info.value.outcome, UnexpectedFailure)
    assert notification_center.latest() is None


def test_each_failed_call_delivers_exactly_one_outcome(failing_service, recording_callback) -> None:
    service = failing_service(HttpStatusError(500, "Internal Server Error"))

    service.get_interesting_photos(0, 10, recording_callback)

    assert not recording_callback.successes
    assert len(recording_callback.failures) == 1
