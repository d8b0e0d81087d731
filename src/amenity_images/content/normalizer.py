"""Utilities to transform raw content-provider payloads into typed media records."""
from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .models import ContentResponse, Derivative, MediaAsset, PropertyContent, RoomContent

logger = logging.getLogger(__name__)


def _to_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _to_float(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _extract_score(value: Any) -> Optional[float]:
    # Provider wraps the score as {"score": 0.93}; older payloads send the bare number.
    if isinstance(value, dict):
        return _to_float(value.get("score"))
    return _to_float(value)


def _extract_derivatives(entries: Optional[Iterable[dict[str, Any]]]) -> Tuple[Derivative, ...]:
    derivatives: List[Derivative] = []
    for entry in entries or []:
        if not isinstance(entry, dict):
            continue
        size = _to_int(entry.get("size"))
        name = entry.get("name")
        if size is None or not name:
            continue
        derivatives.append(Derivative(size=size, name=str(name)))
    return tuple(derivatives)


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def build_media_asset(media: dict[str, Any]) -> Optional[MediaAsset]:
    """Build a :class:`MediaAsset` from one provider media entry.

    Returns ``None`` for entries without a usable media id or subject id.
    """
    nested = _as_dict(media.get("media"))
    media_id = _to_int(media.get("mediaId"))
    if media_id is None:
        media_id = _to_int(nested.get("id"))
    subcategory_id = _to_int(media.get("subjectId"))
    if media_id is None or subcategory_id is None:
        logger.debug("Skipping media entry without mediaId/subjectId: %s", media)
        return None
    display = media.get("display")
    return MediaAsset(
        media_id=media_id,
        subcategory_id=subcategory_id,
        display=display if isinstance(display, str) else None,
        aesthetic_score=_extract_score(media.get("aestheticScore")),
        derivatives=_extract_derivatives(_as_list(media.get("derivatives")) or _as_list(nested.get("sizes"))),
    )


def _build_media_list(entries: Any) -> Tuple[MediaAsset, ...]:
    assets: List[MediaAsset] = []
    for entry in _as_list(entries):
        if not isinstance(entry, dict):
            continue
        asset = build_media_asset(entry)
        if asset is not None:
            assets.append(asset)
    return tuple(assets)


def _build_room_content(room: dict[str, Any]) -> RoomContent:
    room_id = _to_int(room.get("roomTypeContentId"))
    if room_id is None:
        room_id = _to_int(room.get("roomTypeContentIdd"))
    return RoomContent(room_id=room_id, medias=_build_media_list(room.get("medias")))


def build_property_content(entry: dict[str, Any]) -> PropertyContent:
    rooms = tuple(
        _build_room_content(room) for room in _as_list(entry.get("roomTypeContents")) if isinstance(room, dict)
    )
    return PropertyContent(medias=_build_media_list(entry.get("medias")), rooms=rooms)


def build_content_response(payload: Any) -> Optional[ContentResponse]:
    """Normalise a provider response.

    ``None`` and anything that is not a JSON object come back as ``None``,
    which reconciles to an empty mapping.
    """
    if not isinstance(payload, dict):
        if payload is not None:
            logger.warning("Ignoring content payload of type %s", type(payload).__name__)
        return None
    context = _as_dict(payload.get("context"))
    request_id = context.get("requestId")
    contents = tuple(
        build_property_content(entry)
        for entry in _as_list(payload.get("propertyContents"))
        if isinstance(entry, dict)
    )
    return ContentResponse(
        property_contents=contents,
        request_id=str(request_id) if request_id is not None else None,
    )
