"""Configuration loading."""

from .category_config import CategoryConfig
from .settings import Settings

__all__ = ["CategoryConfig", "Settings"]
