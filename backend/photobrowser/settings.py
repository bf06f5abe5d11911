from __future__ import annotations

from dataclasses import dataclass
import os


@dataclass(frozen=True)
class FlickrSettings:
    api_key: str | None
    base_url: str
    timeout_seconds: float
    per_page: int
    log_level: str


def load_flickr_settings() -> FlickrSettings:
    return FlickrSettings(
        api_key=os.getenv("FLICKR_API_KEY"),
        base_url=os.getenv("FLICKR_BASE_URL", "https://api.flickr.com/services/rest/"),
        timeout_seconds=float(os.getenv("FLICKR_TIMEOUT_SECONDS", "30.0")),
        per_page=int(os.getenv("FLICKR_PER_PAGE", "25")),
        log_level=os.getenv("PHOTOBROWSER_LOG_LEVEL", "INFO").upper(),
    )
