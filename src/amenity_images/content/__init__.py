"""Content-provider media models and normalization helpers."""

from .models import (
    ALLOWED_RESOLUTIONS,
    THUMBNAIL_RESOLUTION,
    AmenityCategory,
    AmenityOrigin,
    ContentResponse,
    Derivative,
    Image,
    MediaAsset,
    PropertyContent,
    RoomContent,
    images_to_dict,
)
from .normalizer import build_content_response, build_media_asset, build_property_content

__all__ = [
    "ALLOWED_RESOLUTIONS",
    "THUMBNAIL_RESOLUTION",
    "AmenityCategory",
    "AmenityOrigin",
    "ContentResponse",
    "Derivative",
    "Image",
    "MediaAsset",
    "PropertyContent",
    "RoomContent",
    "build_content_response",
    "build_media_asset",
    "build_property_content",
    "images_to_dict",
]
