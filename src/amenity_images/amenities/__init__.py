"""Amenity category reconciliation engine."""

from .category_index import CategoryIndex
from .merge import merge_reduce
from .reconciler import AmenityImageMap, AmenityImageReconciler
from .selector import MediaSelector
from .validation import InvalidInput, InvalidInputKind, ValidatedRequest, validate_request

__all__ = [
    "AmenityImageMap",
    "AmenityImageReconciler",
    "CategoryIndex",
    "InvalidInput",
    "InvalidInputKind",
    "MediaSelector",
    "ValidatedRequest",
    "merge_reduce",
    "validate_request",
]
