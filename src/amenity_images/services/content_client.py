"""Client for the lodging content provider."""
from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from typing import Any, Dict, Optional

import httpx

from amenity_images.content.models import ContentResponse
from amenity_images.content.normalizer import build_content_response

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_URL = "https://content.example.com/v1/properties"


class ContentClient(AbstractContextManager["ContentClient"]):
    """Thin wrapper around the property content endpoint."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_CONTENT_URL,
        timeout: float = 10.0,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        default_headers = {
            "Accept": "application/json",
            "User-Agent": "amenity-images/0.1.0",
        }
        if headers:
            default_headers.update(headers)
        self._client = httpx.Client(timeout=timeout, headers=default_headers, transport=transport)
        self._base_url = base_url.rstrip("/")

    def close(self) -> None:
        self._client.close()

    def __exit__(self, exc_type, exc, exc_tb) -> None:
        self.close()

    def fetch(self, property_id: str) -> Any:
        """Return the decoded JSON body; raises on HTTP errors and undecodable bodies."""
        url = f"{self._base_url}/{property_id}/content"
        logger.debug("Fetching content for property %s from %s", property_id, url)
        response = self._client.get(url, params={"include": "medias,roomTypeContents"})
        response.raise_for_status()
        return response.json()

    def fetch_response(self, property_id: str) -> Optional[ContentResponse]:
        try:
            payload = self.fetch(property_id)
        except httpx.HTTPError:
            logger.exception("Content fetch failed for property '%s'", property_id)
            return None
        except ValueError:
            logger.exception("Content for property '%s' is not valid JSON", property_id)
            return None
        if not isinstance(payload, dict):
            logger.error(
                "Content for property '%s' is a %s, expected an object", property_id, type(payload).__name__
            )
            return None
        return build_content_response(payload)
