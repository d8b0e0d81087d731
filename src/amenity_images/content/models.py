"""Dataclasses for content-provider media and reconciled amenity images."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Mapping, Optional, Tuple

SIZE_500X500V = 14
SIZE_1000X1000V = 15
SIZE_160X90F = 16
SIZE_2000X2000V = 17

THUMBNAIL_RESOLUTION = SIZE_160X90F
ALLOWED_RESOLUTIONS: frozenset[int] = frozenset({SIZE_500X500V, SIZE_1000X1000V, SIZE_2000X2000V})


class AmenityCategory(str, Enum):
    """Customer-facing amenity groupings."""

    BREAKFAST = "BREAKFAST"
    RESTAURANT_IN_HOTEL = "RESTAURANT_IN_HOTEL"
    BAR = "BAR"
    POOL = "POOL"
    SPA = "SPA"
    FITNESS_CENTER = "FITNESS_CENTER"
    BUSINESS_CENTER = "BUSINESS_CENTER"
    ROOM_VIEW = "ROOM_VIEW"
    BATHROOM = "BATHROOM"
    LOBBY = "LOBBY"


class AmenityOrigin(str, Enum):
    """Scope an image was taken from."""

    ROOM_UNIT = "ROOM_UNIT"
    PROPERTY = "PROPERTY"


@dataclass(frozen=True, slots=True)
class Derivative:
    """One rendition of a media item at a given resolution code."""

    size: int
    name: str


@dataclass(frozen=True, slots=True)
class MediaAsset:
    """A single provider media item grouped under a subcategory (subject) id."""

    media_id: int
    subcategory_id: int
    display: Optional[str] = None
    aesthetic_score: Optional[float] = None
    derivatives: Tuple[Derivative, ...] = ()

    def has_allowed_resolution(self) -> bool:
        return any(derivative.size in ALLOWED_RESOLUTIONS for derivative in self.derivatives)

    def best_derivative(self) -> Derivative:
        """Return the largest non-thumbnail rendition.

        Only meaningful once :meth:`has_allowed_resolution` holds; an asset with
        nothing but thumbnails raises ``ValueError``.
        """
        return max(
            (derivative for derivative in self.derivatives if derivative.size != THUMBNAIL_RESOLUTION),
            key=lambda derivative: derivative.size,
        )


@dataclass(frozen=True, slots=True)
class RoomContent:
    room_id: Optional[int]
    medias: Tuple[MediaAsset, ...] = ()


@dataclass(frozen=True, slots=True)
class PropertyContent:
    """Property-level media plus the media of each room type."""

    medias: Tuple[MediaAsset, ...] = ()
    rooms: Tuple[RoomContent, ...] = ()

    def room_medias(self, room_id: Optional[int]) -> Tuple[MediaAsset, ...]:
        if room_id is None:
            return ()
        for room in self.rooms:
            if room.room_id == room_id:
                return room.medias
        return ()


@dataclass(frozen=True, slots=True)
class ContentResponse:
    """Top-level provider response."""

    property_contents: Tuple[PropertyContent, ...] = ()
    request_id: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Image:
    """A reconciled image ready to hand to API consumers."""

    url: str
    aesthetic_score: Optional[float]
    amenity_type: AmenityOrigin
    display_text: Optional[str] = None

    def to_dict(self) -> dict[str, object]:
        return {
            "url": self.url,
            "aesthetic_score": self.aesthetic_score,
            "amenity_type": self.amenity_type.value,
            "display_text": self.display_text,
        }


def images_to_dict(mapping: Mapping[AmenityCategory, Iterable[Image]]) -> dict[str, List[dict[str, object]]]:
    return {category.value: [image.to_dict() for image in images] for category, images in mapping.items()}
