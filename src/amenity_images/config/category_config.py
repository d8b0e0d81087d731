"""Amenity category groupings loaded from TOML at startup."""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from amenity_images.amenities.merge import merge_reduce
from amenity_images.content.models import AmenityCategory

logger = logging.getLogger(__name__)


def _override_list(override: list[int], _default: list[int]) -> list[int]:
    return override


class CategoryConfig(BaseModel):
    """``category -> [subcategory ids]`` as authored by operators.

    Example::

        [categories]
        BREAKFAST = [81012, 81003]            # Food and drink, Restaurant
        RESTAURANT_IN_HOTEL = [81003, 81004]  # Restaurant, Buffet
    """

    categories: dict[AmenityCategory, list[int]] = Field(default_factory=dict)

    @field_validator("categories", mode="before")
    @classmethod
    def _normalise_keys(cls, value: object) -> object:
        if not isinstance(value, dict):
            return value
        return {key.strip().upper() if isinstance(key, str) else key: ids for key, ids in value.items()}

    @classmethod
    def from_toml(cls, path: Path) -> "CategoryConfig":
        if not path.exists():
            raise FileNotFoundError(f"Category configuration not found at {path}")
        data = tomllib.loads(path.read_text())
        return cls.model_validate(data)

    @classmethod
    def load(cls, defaults: Path, overrides: Optional[Path] = None) -> "CategoryConfig":
        """Load ``defaults`` and lay ``overrides`` on top, category by category."""
        config = cls.from_toml(defaults)
        if overrides is None:
            return config
        override_config = cls.from_toml(overrides)
        logger.info(
            "Applying %d category override(s) from %s onto %s",
            len(override_config.categories),
            overrides,
            defaults,
        )
        return config.merged_with(override_config)

    def merged_with(self, other: "CategoryConfig") -> "CategoryConfig":
        merged = merge_reduce(self.categories, other.categories, _override_list) or {}
        return CategoryConfig(categories=dict(merged))


__all__ = ["CategoryConfig"]
