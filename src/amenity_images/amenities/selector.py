"""Select category-tagged images from one scope of provider media."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import AbstractSet, Dict, Iterable, List, MutableSet, Tuple

from amenity_images.content.models import AmenityCategory, AmenityOrigin, Image, MediaAsset

from .category_index import CategoryIndex

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _SelectionState:
    """Accumulator threaded through the per-asset fold."""

    consumed: MutableSet[int]
    images: Dict[AmenityCategory, List[Image]] = field(default_factory=dict)

    def emit(self, asset: MediaAsset, image: Image, categories: Iterable[AmenityCategory]) -> None:
        self.consumed.add(asset.media_id)
        for category in categories:
            self.images.setdefault(category, []).append(image)


class MediaSelector:
    """Expands media into amenity categories and picks one derivative per asset."""

    def __init__(self, index: CategoryIndex, image_base_url: str) -> None:
        self._index = index
        self._image_base_url = image_base_url

    @property
    def index(self) -> CategoryIndex:
        return self._index

    def select(
        self,
        medias: Iterable[MediaAsset],
        requested: AbstractSet[AmenityCategory],
        origin: AmenityOrigin,
        consumed: MutableSet[int],
    ) -> Dict[AmenityCategory, List[Image]]:
        """Return ``category -> images`` for ``medias``, adding emitted ids to ``consumed``.

        The first occurrence of a media id across the shared ``consumed`` set owns
        it; later occurrences are dropped. Categories without images are absent.
        """
        state = _SelectionState(consumed=consumed)
        for asset in medias:
            self._fold(state, asset, requested, origin)
        return state.images

    def _fold(
        self,
        state: _SelectionState,
        asset: MediaAsset,
        requested: AbstractSet[AmenityCategory],
        origin: AmenityOrigin,
    ) -> None:
        mapped = self._index.lookup(asset.subcategory_id)
        if not mapped:
            logger.debug("Dropping media %s: subcategory %s unmapped", asset.media_id, asset.subcategory_id)
            return

        categories = _requested_categories(mapped, requested)
        if not categories:
            logger.debug("Dropping media %s: no requested category", asset.media_id)
            return

        if asset.media_id in state.consumed:
            logger.debug("Dropping media %s: already selected", asset.media_id)
            return

        if not asset.has_allowed_resolution():
            logger.debug("Dropping media %s: no allowed resolution", asset.media_id)
            return

        best = asset.best_derivative()
        image = Image(
            url=self._image_base_url + best.name,
            aesthetic_score=asset.aesthetic_score,
            amenity_type=origin,
            display_text=asset.display,
        )
        state.emit(asset, image, categories)


def _requested_categories(
    mapped: Iterable[AmenityCategory],
    requested: AbstractSet[AmenityCategory],
) -> Tuple[AmenityCategory, ...]:
    # Collapse repeated memberships so one asset lands in a category at most once.
    seen: Dict[AmenityCategory, None] = {}
    for category in mapped:
        if category in requested:
            seen.setdefault(category, None)
    return tuple(seen)


__all__ = ["MediaSelector"]
