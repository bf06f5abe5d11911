from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

from dotenv import load_dotenv
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from photobrowser.logging_setup import configure_logging
from photobrowser.manifest import APP_MANIFEST
from photobrowser.notifications import NotificationCenter
from photobrowser.rest.adapter import FlickrService
from photobrowser.rest.executors import BackgroundExecutor, SynchronousExecutor
from photobrowser.rest.flickr import build_flickr_service, build_photo_url
from photobrowser.rest.futures import CallFailed, fetch_page
from photobrowser.rest.notifier import FailureNotifier
from photobrowser.rest.types import FlickrResponse
from photobrowser.settings import FlickrSettings, load_flickr_settings

repo_root = Path(__file__).resolve().parents[3]
load_dotenv(repo_root / ".env")


def _photos_payload(response: FlickrResponse, size: str) -> dict[str, Any]:
    info = response.photos_info
    return {
        "page": info.page,
        "pages": info.pages,
        "per_page": info.per_page,
        "total": info.total,
        "photos": [
            {
                "id": photo.id,
                "title": photo.title,
                "owner": photo.owner,
                "url": build_photo_url(photo, size=size),
            }
            for photo in info.photos
        ],
    }


def create_app(
    service: FlickrService | None = None,
    center: NotificationCenter | None = None,
    settings: FlickrSettings | None = None,
) -> FastAPI:
    settings = settings or load_flickr_settings()
    configure_logging(settings.log_level)
    center = center or NotificationCenter()
    notifier = FailureNotifier(center)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        if app.state.http_executor is not None:
            app.state.http_executor.shutdown(wait=False)

    app = FastAPI(title="Photo Browser API", version="0.1.0", lifespan=lifespan)
    app.state.service = service
    app.state.notifications = center
    # only owned when the service is built here
    app.state.http_executor = BackgroundExecutor() if service is None else None

    def current_service() -> FlickrService:
        if app.state.service is None:
            app.state.service = build_flickr_service(
                settings,
                http_executor=app.state.http_executor,
                callback_executor=SynchronousExecutor(),
            )
        return app.state.service

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/manifest")
    async def manifest() -> dict[str, object]:
        return {
            "package": APP_MANIFEST.package,
            "uses_permissions": sorted(APP_MANIFEST.uses_permissions),
        }

    @app.get("/photos")
    async def photos(
        page: int = Query(0, ge=0),
        per_page: int | None = Query(None, gt=0),
        size: str = Query("z", pattern="^[sqtmnzcbhko]$"),
    ) -> Any:
        flickr_service = current_service()
        try:
            response, _meta = await run_in_threadpool(
                fetch_page,
                flickr_service,
                page,
                per_page or settings.per_page,
            )
        except CallFailed as failure:
            notification = notifier.notify(failure.outcome)
            return JSONResponse(
                status_code=502,
                content={"notification": notification.text, "kind": str(failure.outcome.kind)},
            )

        return _photos_payload(response, size)

    @app.get("/notifications/latest")
    async def latest_notification() -> dict[str, str | None]:
        return {"notification": center.latest_text()}

    return app


app = create_app()
