"""Amenity image reconciliation for lodging content."""

__version__ = "0.1.0"
