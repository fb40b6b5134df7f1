"""
Index record normalisation.
"""

from .normalize_item import (
    NormalizedListing,
    normalize_listing,
    normalize_listing_detailed,
    resolve_item_key,
)

__all__ = [
    "NormalizedListing",
    "normalize_listing",
    "normalize_listing_detailed",
    "resolve_item_key",
]
