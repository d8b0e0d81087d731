"""Service clients for the lodging content provider."""

from .content_client import ContentClient

__all__ = [
    "ContentClient",
]
