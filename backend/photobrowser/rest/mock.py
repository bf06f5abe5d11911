from __future__ import annotations

from photobrowser.rest.types import FlickrResponse, Photo, PhotosInfo, ResponseMeta

PAGE_0 = 0
PAGE_1 = 1
PAGE_2 = 2

MOCK_URL = "mock://api.flickr.com/services/rest/"

_FIXTURE_PHOTOS: dict[int, tuple[Photo, ...]] = {
    PAGE_0: (
        Photo(id="53912345678", owner="12037949754@N01", secret="abc123", server="65535", farm=66, title="Harbour at dusk"),
        Photo(id="53912345679", owner="35034346050@N01", secret="def456", server="65535", farm=66, title="Fog over the bridge"),
        Photo(id="53912345680", owner="44124348109@N01", secret="0a1b2c", server="65535", farm=66, title="Market street"),
    ),
    PAGE_1: (
        Photo(id="53912345681", owner="12037949754@N01", secret="3d4e5f", server="65535", farm=66, title="Night train"),
    ),
}
_FIXTURE_TOTAL = sum(len(photos) for photos in _FIXTURE_PHOTOS.values())


class MockFlickrApi:
    """Deterministic stand-in for the Flickr API keyed by page number."""

    def __init__(self) -> None:
        self.calls: list[tuple[int, int]] = []

    def fetch_interesting_photos(self, page: int, per_page: int) -> tuple[FlickrResponse, ResponseMeta]:
        self.calls.append((page, per_page))
        photos = _FIXTURE_PHOTOS.get(page, ())
        info = PhotosInfo(
            page=page,
            pages=len(_FIXTURE_PHOTOS),
            per_page=per_page,
            total=_FIXTURE_TOTAL,
            photos=photos[:per_page],
        )
        meta = ResponseMeta(
            url=f"{MOCK_URL}?page={page}&per_page={per_page}",
            status_code=200,
            reason="OK",
            headers=(("Content-Type", "application/json"),),
        )
        return FlickrResponse(photos_info=info), meta
