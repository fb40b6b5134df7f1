"""
Listing normalisation for the market index.

Turns one raw marketplace item into an index record carrying its category.
Manual overrides win over the categorization pipeline.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Union

from ..categorisation.engine import ListingCategorizer
from ..config.override_loader import OverrideEntry, get_override
from ..exclusions.listing import exclusion_reason

logger = logging.getLogger(__name__)

_DEFAULT_CATEGORIZER = None


@dataclass
class NormalizedListing:
    """Outcome of normalising one raw item."""
    key: Optional[str]
    record: Optional[Dict] = None
    excluded: Optional[str] = None  # "tip", "custom" or None
    overridden: bool = False


def resolve_item_key(item: Dict) -> Optional[str]:
    """Canonical key: refNum/refnum/ref when present, else id."""
    for field_name in ("refNum", "refnum", "ref"):
        value = item.get(field_name)
        if value is not None:
            return str(value)
    if item.get("id") is not None:
        return str(item["id"])
    return None


def _entry_id(item: Dict, canonical_key: str) -> Union[int, str]:
    num_id = item.get("id")
    if isinstance(num_id, int) and not isinstance(num_id, bool):
        return num_id
    if num_id is not None:
        num_key = str(num_id)
        return int(num_key) if num_key.isdigit() else num_key
    return canonical_key


def _get_default_categorizer() -> ListingCategorizer:
    global _DEFAULT_CATEGORIZER
    if _DEFAULT_CATEGORIZER is None:
        _DEFAULT_CATEGORIZER = ListingCategorizer()
    return _DEFAULT_CATEGORIZER


def normalize_listing_detailed(
    item: Dict,
    overrides: Optional[Dict[str, OverrideEntry]] = None,
    categorizer: Optional[ListingCategorizer] = None,
) -> NormalizedListing:
    """
    Normalise a raw item and report how its category was decided.

    Args:
        item: Raw marketplace item ("refNum"/"id", "name", "description", ...)
        overrides: Manual overrides keyed by item id
        categorizer: Categorizer to use; defaults to a shared instance

    Returns:
        NormalizedListing; record is None when the item has no key or is excluded
    """
    canonical_key = resolve_item_key(item)
    if canonical_key is None:
        return NormalizedListing(key=None)

    name = item.get("name") or ""
    description = item.get("description") or ""

    reason = exclusion_reason(name, description)
    if reason:
        logger.debug("Excluding %s listing %s: %r", reason, canonical_key, name)
        return NormalizedListing(key=canonical_key, excluded=reason)

    record = {"id": _entry_id(item, canonical_key), "refNum": canonical_key}
    if name:
        record["name"] = name
    if description:
        record["description"] = description
    seller = item.get("seller") or {}
    seller_name = seller.get("name") if isinstance(seller, dict) else None
    if seller_name:
        record["sellerName"] = seller_name

    overrides = overrides or {}
    num_key = str(item["id"]) if item.get("id") is not None else None
    override = get_override(canonical_key, overrides) or get_override(num_key, overrides)

    if override is not None:
        record["category"] = override.primary
        if override.subcategories:
            record["subcategories"] = list(override.subcategories)
        return NormalizedListing(key=canonical_key, record=record, overridden=True)

    if name or description:
        categorizer = categorizer or _get_default_categorizer()
        result = categorizer.categorize(name, description)
        if result.primary:
            record["category"] = result.primary
        if result.subcategories:
            record["subcategories"] = list(result.subcategories)

    return NormalizedListing(key=canonical_key, record=record)


def normalize_listing(
    item: Dict,
    overrides: Optional[Dict[str, OverrideEntry]] = None,
    categorizer: Optional[ListingCategorizer] = None,
) -> Optional[Dict]:
    """
    Normalise a raw item into an index record.

    Returns:
        The record with "category"/"subcategories", or None when the item has
        no key or is a tip/custom listing
    """
    return normalize_listing_detailed(item, overrides, categorizer).record
