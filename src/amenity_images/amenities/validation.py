"""Request pre-checks that turn raw query strings into typed reconciler inputs.

These never raise: malformed input comes back as an :class:`InvalidInput`
classification which the calling layer maps to its own error response.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from amenity_images.content.models import AmenityCategory

INVALID_ROOM_ID = "roomId is not valid"
UNSUPPORTED_CATEGORY = "Lodging amenity query not supported."


class InvalidInputKind(str, Enum):
    INVALID_ROOM_ID = "INVALID_ROOM_ID"
    UNSUPPORTED_CATEGORY = "UNSUPPORTED_CATEGORY"


@dataclass(frozen=True, slots=True)
class InvalidInput:
    kind: InvalidInputKind
    message: str
    value: Optional[str] = None

    def to_dict(self) -> dict[str, object]:
        return {"kind": self.kind.value, "message": self.message, "value": self.value}


@dataclass(frozen=True, slots=True)
class RoomIdResult:
    room_id: Optional[int] = None
    error: Optional[InvalidInput] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class CategoryResult:
    categories: Tuple[AmenityCategory, ...] = ()
    errors: Tuple[InvalidInput, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass(frozen=True, slots=True)
class ValidatedRequest:
    """Outcome of validating a full amenity image request."""

    categories: Tuple[AmenityCategory, ...] = ()
    room_id: Optional[int] = None
    errors: Tuple[InvalidInput, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors


def parse_room_id(raw: Union[str, int, None]) -> RoomIdResult:
    """Parse a room identifier; ``None`` and blank strings mean "no room"."""
    if raw is None:
        return RoomIdResult()
    if isinstance(raw, bool):
        return RoomIdResult(error=InvalidInput(InvalidInputKind.INVALID_ROOM_ID, INVALID_ROOM_ID, str(raw)))
    if isinstance(raw, int):
        return RoomIdResult(room_id=raw)
    text = raw.strip()
    if not text:
        return RoomIdResult()
    try:
        return RoomIdResult(room_id=int(text))
    except ValueError:
        return RoomIdResult(error=InvalidInput(InvalidInputKind.INVALID_ROOM_ID, INVALID_ROOM_ID, raw))


def parse_category(raw: str) -> Optional[AmenityCategory]:
    name = raw.strip().upper()
    try:
        return AmenityCategory[name]
    except KeyError:
        return None


def parse_categories(raw: Iterable[str]) -> CategoryResult:
    """Map category names onto :class:`AmenityCategory`, dropping repeats."""
    categories: List[AmenityCategory] = []
    errors: List[InvalidInput] = []
    for value in raw:
        category = parse_category(value)
        if category is None:
            errors.append(InvalidInput(InvalidInputKind.UNSUPPORTED_CATEGORY, UNSUPPORTED_CATEGORY, value))
            continue
        if category not in categories:
            categories.append(category)
    return CategoryResult(categories=tuple(categories), errors=tuple(errors))


def validate_request(raw_categories: Iterable[str], raw_room_id: Union[str, int, None]) -> ValidatedRequest:
    category_result = parse_categories(raw_categories)
    room_result = parse_room_id(raw_room_id)
    errors = list(category_result.errors)
    if room_result.error is not None:
        errors.append(room_result.error)
    if errors:
        return ValidatedRequest(errors=tuple(errors))
    return ValidatedRequest(categories=category_result.categories, room_id=room_result.room_id)


__all__ = [
    "CategoryResult",
    "InvalidInput",
    "InvalidInputKind",
    "RoomIdResult",
    "ValidatedRequest",
    "parse_categories",
    "parse_category",
    "parse_room_id",
    "validate_request",
]
