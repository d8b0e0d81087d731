"""Entry point for manual amenity image reconciliation runs."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from amenity_images.amenities import AmenityImageReconciler, validate_request
from amenity_images.config import CategoryConfig, Settings
from amenity_images.content import ContentResponse, build_content_response, images_to_dict
from amenity_images.core.logging import configure_logging
from amenity_images.services import ContentClient
from amenity_images.storage import JsonStore

logger = logging.getLogger("reconcile_images")


def _load_response(args: argparse.Namespace, settings: Settings) -> Optional[ContentResponse]:
    if args.payload:
        return build_content_response(json.loads(args.payload.read_text()))
    with ContentClient(base_url=settings.content_base_url, timeout=settings.content_timeout_s) as client:
        return client.fetch_response(args.property_id)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Map provider media onto amenity categories")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--payload", type=Path, help="Provider content response saved as JSON")
    source.add_argument("--property-id", help="Fetch the content response for this property")
    parser.add_argument(
        "--category",
        dest="categories",
        action="append",
        default=[],
        help="Amenity category to include (repeatable)",
    )
    parser.add_argument("--room-id", help="Room type content id whose media take precedence")
    parser.add_argument("--output", type=Path, help="Write the result under the output dir with this name")
    parser.add_argument("--log-level", help="Override the configured log level")
    parser.add_argument(
        "--prefill",
        action="store_true",
        help="Include requested categories with no images as empty lists",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    settings = Settings()
    if args.log_level:
        settings.log_level = args.log_level
    if args.prefill:
        settings.prefill_requested_categories = True
    settings.ensure_directories()
    configure_logging(settings.log_level, settings.log_dir)

    request = validate_request(args.categories, args.room_id)
    if not request.ok:
        for error in request.errors:
            logger.error("%s (%s)", error.message, error.value)
        print(json.dumps({"errors": [error.to_dict() for error in request.errors]}, indent=2))
        return 2

    config = CategoryConfig.load(settings.category_config_path, settings.category_overrides_path)
    reconciler = AmenityImageReconciler.from_settings(settings, config)

    response = _load_response(args, settings)
    images = reconciler.reconcile(response, request.categories, request.room_id)

    if args.output:
        path = JsonStore(settings.output_dir).write(images, filename=args.output.name)
        logger.info("Wrote %d categories to %s", len(images), path)
    else:
        print(json.dumps(images_to_dict(images), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
