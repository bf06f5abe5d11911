from __future__ import annotations

import logging

import httpx

from photobrowser.rest.adapter import ContextGuard, FlickrService, RestAdapter, is_primary_context
from photobrowser.rest.conversion import decode_body
from photobrowser.rest.evidence import redact_payload
from photobrowser.rest.executors import Executor
from photobrowser.rest.types import ConfigurationError, FlickrResponse, HttpStatusError, Photo, ResponseMeta
from photobrowser.settings import FlickrSettings

LOGGER = logging.getLogger(__name__)

API_URL = "https://api.flickr.com/services/rest/"
INTERESTINGNESS_METHOD = "flickr.interestingness.getList"
PHOTO_SIZES = frozenset("sqtmnzcbhko")


def build_photo_url(photo: Photo, size: str = "z") -> str:
    if size not in PHOTO_SIZES:
        raise ValueError(f"Unknown photo size suffix: {size!r}")
    return f"https://farm{photo.farm}.staticflickr.com/{photo.server}/{photo.id}_{photo.secret}_{size}.jpg"


def raise_for_response(response: httpx.Response) -> None:
    if response.is_success:
        return
    raise HttpStatusError(status_code=response.status_code, message=response.reason_phrase or response.text[:300])


def response_meta(response: httpx.Response) -> ResponseMeta:
    return ResponseMeta(
        url=str(response.request.url.copy_remove_param("api_key")),
        status_code=response.status_code,
        reason=response.reason_phrase,
        headers=tuple(response.headers.items()),
    )


class FlickrHttpApi:
    def __init__(self, base_url: str, api_key: str, timeout: float = 30.0, client: httpx.Client | None = None) -> None:
        if not api_key:
            raise ConfigurationError("Missing Flickr API key")
        self._base_url = base_url
        self._api_key = api_key
        self._client = client or httpx.Client(timeout=timeout)

    def fetch_interesting_photos(self, page: int, per_page: int) -> tuple[FlickrResponse, ResponseMeta]:
        params = {
            "method": INTERESTINGNESS_METHOD,
            "api_key": self._api_key,
            "page": str(page),
            "per_page": str(per_page),
            "format": "json",
            "nojsoncallback": "1",
        }
        LOGGER.debug("GET %s params=%s", self._base_url, redact_payload(params))

        response = self._client.get(self._base_url, params=params)
        raise_for_response(response)
        return decode_body(response.content), response_meta(response)

    def close(self) -> None:
        self._client.close()


def build_flickr_service(
    settings: FlickrSettings,
    *,
    http_executor: Executor | None = None,
    callback_executor: Executor | None = None,
    context_guard: ContextGuard = is_primary_context,
    client: httpx.Client | None = None,
) -> FlickrService:
    adapter = RestAdapter(
        http_executor=http_executor,
        callback_executor=callback_executor,
        context_guard=context_guard,
    )
    api = FlickrHttpApi(
        base_url=settings.base_url,
        api_key=settings.api_key or "",
        timeout=settings.timeout_seconds,
        client=client,
    )
    return adapter.create(api)
