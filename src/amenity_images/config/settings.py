"""Runtime configuration for the amenity image service.

Relies on pydantic-settings so that environment variables (prefixed with
``AMENITY_IMAGES_``) can override defaults.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Captures runtime configuration for reconciliation runs."""

    image_base_url: str = Field(
        default="https://images.example.com/",
        description="Prefix joined with derivative names to build image URLs",
    )
    category_config_path: Path = Field(
        default=Path("config/categories.toml"),
        description="TOML file mapping amenity categories to provider subcategory ids",
    )
    category_overrides_path: Optional[Path] = Field(
        default=None,
        description="Optional TOML file whose category lists replace the defaults",
    )
    prefill_requested_categories: bool = Field(
        default=False,
        description="Return every requested category, with an empty list when nothing qualified",
    )

    content_base_url: str = Field(
        default="https://content.example.com/v1/properties",
        description="Content provider endpoint used to fetch property media",
    )
    content_timeout_s: float = Field(default=10.0, description="HTTP timeout for content fetches")

    log_level: str = Field(default="INFO")
    log_dir: Path = Field(default=Path("data/logs"))
    output_dir: Path = Field(default=Path("data/output"))

    model_config = SettingsConfigDict(
        env_prefix="AMENITY_IMAGES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("image_base_url", "content_base_url")
    def _require_url(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("base URLs must not be blank")
        return value.strip()

    @field_validator("category_config_path", "log_dir", "output_dir", mode="before")
    def _expand_path(cls, value: str | Path) -> Path:
        if isinstance(value, Path):
            return value.expanduser()
        return Path(value).expanduser()

    @field_validator("category_overrides_path", mode="before")
    def _expand_optional_path(cls, value: str | Path | None) -> Optional[Path]:
        if value in (None, ""):
            return None
        return Path(value).expanduser()

    def ensure_directories(self) -> None:
        """Create directories that must exist at runtime."""
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.output_dir.mkdir(parents=True, exist_ok=True)
