"""Subcategory to amenity-category lookup built from the configured groupings."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Tuple

from amenity_images.content.models import AmenityCategory


class CategoryIndex:
    """Inverted, read-only view of the category configuration.

    Configuration is authored as ``category -> [subcategory ids]`` because that
    is easier to maintain; media arrive keyed by subcategory, so the mapping is
    flipped once at startup::

        BREAKFAST:           [81012, 81003]
        RESTAURANT_IN_HOTEL: [81003, 81004]

    becomes ``{81012: [BREAKFAST], 81003: [BREAKFAST, RESTAURANT_IN_HOTEL],
    81004: [RESTAURANT_IN_HOTEL]}``.
    """

    __slots__ = ("_index",)

    def __init__(self, config: Mapping[AmenityCategory, Iterable[int]]) -> None:
        inverted = self.invert(config)
        self._index: Mapping[int, Tuple[AmenityCategory, ...]] = MappingProxyType(
            {subcategory: tuple(categories) for subcategory, categories in inverted.items()}
        )

    @staticmethod
    def invert(config: Mapping[AmenityCategory, Iterable[int]]) -> dict[int, list[AmenityCategory]]:
        """Flip ``category -> [subcategory]`` into ``subcategory -> [category]``.

        Categories are appended in the order they are encountered. A subcategory
        listed twice under one category keeps both memberships.
        """
        inverted: dict[int, list[AmenityCategory]] = {}
        for category, subcategories in config.items():
            for subcategory in subcategories:
                inverted.setdefault(subcategory, []).append(category)
        return inverted

    def lookup(self, subcategory_id: int) -> Tuple[AmenityCategory, ...]:
        return self._index.get(subcategory_id, ())

    def subcategories(self) -> Iterator[int]:
        return iter(self._index)

    def as_mapping(self) -> Mapping[int, Tuple[AmenityCategory, ...]]:
        return self._index

    def __contains__(self, subcategory_id: object) -> bool:
        return subcategory_id in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"CategoryIndex(subcategories={len(self._index)})"


__all__ = ["CategoryIndex"]
