from __future__ import annotations

import json
from typing import Any

from photobrowser.rest.types import ConversionError, FlickrResponse, Photo, PhotosInfo


def _coerce_int(value: Any, *, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConversionError(f"Invalid integer value for {field_name}") from exc


def _require_text(row: dict[str, Any], key: str) -> str:
    value = row.get(key)
    if value is None:
        raise ConversionError(f"Missing {key} in photo record")
    return str(value)


def parse_photo(row: Any) -> Photo:
    if not isinstance(row, dict):
        raise ConversionError("Unexpected photo record shape")

    return Photo(
        id=_require_text(row, "id"),
        owner=_require_text(row, "owner"),
        secret=_require_text(row, "secret"),
        server=_require_text(row, "server"),
        farm=_coerce_int(row.get("farm"), field_name="photo.farm"),
        title=str(row.get("title") or ""),
        is_public=bool(_coerce_int(row.get("ispublic", 1), field_name="photo.ispublic")),
    )


def parse_flickr_response(payload: Any) -> FlickrResponse:
    if not isinstance(payload, dict):
        raise ConversionError("Unexpected response shape")

    stat = payload.get("stat")
    if stat == "fail":
        raise ConversionError(f"Flickr error {payload.get('code')}: {payload.get('message', 'unknown')}")
    if stat != "ok":
        raise ConversionError("Missing stat in response")

    photos = payload.get("photos")
    if not isinstance(photos, dict):
        raise ConversionError("Missing photos in response")

    rows = photos.get("photo")
    if not isinstance(rows, list):
        raise ConversionError("Missing photo list in response")

    info = PhotosInfo(
        page=_coerce_int(photos.get("page"), field_name="photos.page"),
        pages=_coerce_int(photos.get("pages"), field_name="photos.pages"),
        per_page=_coerce_int(photos.get("perpage"), field_name="photos.perpage"),
        total=_coerce_int(photos.get("total"), field_name="photos.total"),
        photos=tuple(parse_photo(row) for row in rows),
    )
    return FlickrResponse(photos_info=info, stat=stat)


def decode_body(body: bytes | str) -> FlickrResponse:
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ConversionError(f"Response body is not valid JSON: {exc}") from exc
    return parse_flickr_response(payload)
