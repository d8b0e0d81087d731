"""Reconcile room and property media into one amenity image mapping."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Sequence

from amenity_images.content.models import AmenityCategory, AmenityOrigin, ContentResponse, Image

from .category_index import CategoryIndex
from .merge import merge_reduce
from .selector import MediaSelector

if TYPE_CHECKING:  # pragma: no cover
    from amenity_images.config.category_config import CategoryConfig
    from amenity_images.config.settings import Settings

logger = logging.getLogger(__name__)

AmenityImageMap = Dict[AmenityCategory, List[Image]]


def _append_property_images(property_images: List[Image], room_images: List[Image]) -> List[Image]:
    return room_images + property_images


class AmenityImageReconciler:
    """Builds ``category -> images`` for a property and one of its rooms.

    The category index is built once and shared read-only; every call to
    :meth:`reconcile` allocates its own consumed-id set, so instances are safe to
    share between concurrent requests.
    """

    def __init__(
        self,
        index: CategoryIndex,
        image_base_url: str,
        *,
        prefill_requested: bool = False,
    ) -> None:
        self._selector = MediaSelector(index, image_base_url)
        self._prefill_requested = prefill_requested

    @classmethod
    def from_settings(cls, settings: "Settings", config: "CategoryConfig") -> "AmenityImageReconciler":
        return cls(
            CategoryIndex(config.categories),
            settings.image_base_url,
            prefill_requested=settings.prefill_requested_categories,
        )

    @property
    def index(self) -> CategoryIndex:
        return self._selector.index

    def reconcile(
        self,
        response: Optional[ContentResponse],
        requested_categories: Sequence[AmenityCategory],
        room_id: Optional[int],
    ) -> AmenityImageMap:
        if response is None or not response.property_contents or not requested_categories:
            return {}

        # Upstream guarantees a single property content entry.
        property_content = response.property_contents[0]
        requested = frozenset(requested_categories)
        consumed: set[int] = set()

        room_medias = property_content.room_medias(room_id)
        # Room pass must populate ``consumed`` before the property pass runs.
        room_images = self._selector.select(room_medias, requested, AmenityOrigin.ROOM_UNIT, consumed)
        property_images = self._selector.select(
            property_content.medias, requested, AmenityOrigin.PROPERTY, consumed
        )

        merged: AmenityImageMap = dict(
            merge_reduce(room_images, property_images, _append_property_images) or {}
        )

        logger.info(
            "Reconciled %d amenity categories (request_id=%s, room_id=%s, room_medias=%d, "
            "room_images=%d, property_images=%d)",
            len(merged),
            response.request_id,
            room_id,
            len(room_medias),
            sum(len(images) for images in room_images.values()),
            sum(len(images) for images in property_images.values()),
        )

        if self._prefill_requested:
            return _prefill(merged, requested_categories)
        return merged


def _prefill(images: AmenityImageMap, requested_categories: Sequence[AmenityCategory]) -> AmenityImageMap:
    """Legacy response shape: every requested category present, possibly empty."""
    filled: AmenityImageMap = {}
    for category in requested_categories:
        filled.setdefault(category, [])
    return dict(merge_reduce(filled, images, _append_property_images) or {})


__all__ = ["AmenityImageMap", "AmenityImageReconciler"]
