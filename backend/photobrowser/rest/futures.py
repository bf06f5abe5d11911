from __future__ import annotations

from concurrent.futures import Future

from photobrowser.rest.adapter import FlickrService
from photobrowser.rest.types import FailureOutcome, FlickrResponse, ResponseMeta, RestError


class CallFailed(RestError):
    def __init__(self, outcome: FailureOutcome) -> None:
        super().__init__(f"{outcome.kind} failure")
        self.outcome = outcome


class FutureCallback:
    """Callback that completes a future, for callers that wait on the result."""

    def __init__(self) -> None:
        self.future: Future[tuple[FlickrResponse, ResponseMeta]] = Future()

    def success(self, response: FlickrResponse, meta: ResponseMeta) -> None:
        self.future.set_result((response, meta))

    def failure(self, outcome: FailureOutcome) -> None:
        self.future.set_exception(CallFailed(outcome))


def fetch_page(
    service: FlickrService,
    page: int,
    per_page: int,
    timeout: float | None = None,
) -> tuple[FlickrResponse, ResponseMeta]:
    """Issue one request and block until its outcome is delivered.

    Raises ``CallFailed`` carrying the outcome when the call does not succeed.
    """
    callback = FutureCallback()
    service.get_interesting_photos(page, per_page, callback)
    return callback.future.result(timeout=timeout)
