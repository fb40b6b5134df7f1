"""
Exclusion filters applied before categorization.
"""

from .listing import is_tip_listing, is_custom_listing, exclusion_reason

__all__ = [
    "is_tip_listing",
    "is_custom_listing",
    "exclusion_reason",
]
