from __future__ import annotations

import logging
from typing import NoReturn

from photobrowser.notifications import Duration, Notification, NotificationCenter
from photobrowser.rest.types import (
    ConversionFailure,
    FailureOutcome,
    FlickrResponse,
    HttpFailure,
    NetworkFailure,
    ResponseMeta,
    UnexpectedFailure,
    UnexpectedRestError,
)

LOGGER = logging.getLogger(__name__)

HTTP_ERROR_TEXT = "Http Error"
NETWORK_ERROR_TEXT = "Network Error"
CONVERSION_ERROR_TEXT = "Conversion Error"


def _cause_text(cause: BaseException, fallback: str) -> str:
    return str(cause) or fallback


def _rethrow(outcome: UnexpectedFailure) -> NoReturn:
    LOGGER.error("Unexpected failure, rethrowing: %r", outcome.cause)
    raise UnexpectedRestError(outcome) from outcome.cause


def notification_text(outcome: NetworkFailure | HttpFailure | ConversionFailure) -> str:
    match outcome:
        case NetworkFailure(cause=cause):
            return _cause_text(cause, NETWORK_ERROR_TEXT)
        case HttpFailure():
            return HTTP_ERROR_TEXT
        case ConversionFailure(cause=cause):
            return _cause_text(cause, CONVERSION_ERROR_TEXT)


class FailureNotifier:
    def __init__(self, center: NotificationCenter, duration: Duration = Duration.SHORT) -> None:
        self._center = center
        self._duration = duration

    def notify(self, outcome: FailureOutcome) -> Notification:
        """Show a notification for a recoverable failure.

        Unexpected failures are not recovered here: they are raised as
        ``UnexpectedRestError`` chained to the original cause.
        """
        match outcome:
            case UnexpectedFailure():
                _rethrow(outcome)
            case NetworkFailure() | HttpFailure() | ConversionFailure():
                text = notification_text(outcome)
                LOGGER.info("Showing %s failure notification: %s", outcome.kind, text)
                return self._center.show(text, self._duration)


class NotifyingCallback:
    """Callback whose failures go through a ``FailureNotifier``."""

    def __init__(self, notifier: FailureNotifier) -> None:
        self._notifier = notifier

    def success(self, response: FlickrResponse, meta: ResponseMeta) -> None:
        pass

    def failure(self, outcome: FailureOutcome) -> None:
        self._notifier.notify(outcome)
