from .adapter import FlickrService, RestAdapter, classify_exception, is_primary_context, never_primary
from .executors import BackgroundExecutor, SynchronousExecutor
from .flickr import API_URL, FlickrHttpApi, build_flickr_service, build_photo_url
from .futures import CallFailed, FutureCallback, fetch_page
from .mock import PAGE_0, PAGE_1, PAGE_2, MockFlickrApi
from .notifier import FailureNotifier, NotifyingCallback
from .types import (
    ConversionFailure,
    FailureKind,
    FailureOutcome,
    FlickrResponse,
    HttpFailure,
    IllegalStateError,
    NetworkFailure,
    Photo,
    PhotosInfo,
    ResponseMeta,
    RestError,
    UnexpectedFailure,
    UnexpectedRestError,
)

__all__ = [
    "API_URL",
    "BackgroundExecutor",
    "CallFailed",
    "ConversionFailure",
    "FailureKind",
    "FailureNotifier",
    "FailureOutcome",
    "FlickrHttpApi",
    "FlickrResponse",
    "FlickrService",
    "FutureCallback",
    "HttpFailure",
    "IllegalStateError",
    "MockFlickrApi",
    "NetworkFailure",
    "NotifyingCallback",
    "PAGE_0",
    "PAGE_1",
    "PAGE_2",
    "Photo",
    "PhotosInfo",
    "ResponseMeta",
    "RestAdapter",
    "RestError",
    "SynchronousExecutor",
    "UnexpectedFailure",
    "UnexpectedRestError",
    "build_flickr_service",
    "build_photo_url",
    "classify_exception",
    "fetch_page",
    "is_primary_context",
    "never_primary",
]
