from __future__ import annotations

import asyncio
import logging
import threading
from typing import Callable, Protocol

import httpx

from photobrowser.rest.executors import Executor, SynchronousExecutor
from photobrowser.rest.types import (
    Callback,
    ConversionError,
    ConversionFailure,
    FailureOutcome,
    FlickrResponse,
    HttpFailure,
    HttpStatusError,
    IllegalStateError,
    NetworkFailure,
    ResponseMeta,
    UnexpectedFailure,
)

LOGGER = logging.getLogger(__name__)

ContextGuard = Callable[[], bool]


def is_primary_context() -> bool:
    """Return True on the main thread or on a thread running an event loop."""
    if threading.current_thread() is threading.main_thread():
        return True
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


def never_primary() -> bool:
    return False


class FlickrApi(Protocol):
    def fetch_interesting_photos(self, page: int, per_page: int) -> tuple[FlickrResponse, ResponseMeta]:
        """Blocking call returning the decoded page, or raising on failure."""


def classify_exception(exc: BaseException) -> FailureOutcome:
    match exc:
        case HttpStatusError(status_code=status_code, message=message):
            return HttpFailure(status_code=status_code, message=message)
        case httpx.HTTPStatusError(response=response):
            return HttpFailure(status_code=response.status_code, message=response.reason_phrase)
        case ConversionError() | httpx.DecodingError():
            return ConversionFailure(cause=exc)
        case httpx.TransportError() | OSError():
            return NetworkFailure(cause=exc)
        case _:
            return UnexpectedFailure(cause=exc)


class FlickrService:
    def __init__(
        self,
        api: FlickrApi,
        http_executor: Executor,
        callback_executor: Executor,
        context_guard: ContextGuard,
    ) -> None:
        self._api = api
        self._http_executor = http_executor
        self._callback_executor = callback_executor
        self._context_guard = context_guard

    def get_interesting_photos(self, page: int, per_page: int, callback: Callback) -> None:
        if self._context_guard():
            raise IllegalStateError("get_interesting_photos must not be called on the primary execution context")
        if page < 0:
            raise ValueError("page must be >= 0")
        if per_page <= 0:
            raise ValueError("per_page must be > 0")

        LOGGER.debug("Dispatching interesting photos request page=%s per_page=%s", page, per_page)
        self._http_executor.execute(lambda: self._run(page, per_page, callback))

    def _run(self, page: int, per_page: int, callback: Callback) -> None:
        try:
            response, meta = self._api.fetch_interesting_photos(page, per_page)
        except Exception as exc:
            outcome = classify_exception(exc)
            LOGGER.warning("Interesting photos request failed (%s): %s", outcome.kind, exc)
            self._callback_executor.execute(lambda: callback.failure(outcome))
            return

        self._callback_executor.execute(lambda: callback.success(response, meta))


class RestAdapter:
    """Binds a service implementation to its dispatch and delivery executors."""

    def __init__(
        self,
        *,
        http_executor: Executor | None = None,
        callback_executor: Executor | None = None,
        context_guard: ContextGuard = is_primary_context,
    ) -> None:
        self._http_executor = http_executor or SynchronousExecutor()
        self._callback_executor = callback_executor or SynchronousExecutor()
        self._context_guard = context_guard

    def create(self, api: FlickrApi) -> FlickrService:
        return FlickrService(
            api=api,
            http_executor=self._http_executor,
            callback_executor=self._callback_executor,
            context_guard=self._context_guard,
        )
