"""
Manual category override loader.
Loads the JSON override document that supersedes computed categories.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from ..errors import InvalidOverrideError
from ..taxonomy.store import TaxonomyStore, get_taxonomy_store
from .categorisation_config import RESERVED_CATEGORIES

logger = logging.getLogger(__name__)

MAX_REASON_LENGTH = 500


@dataclass
class OverrideEntry:
    """A manually curated category for one listing."""
    id: str  # refNum preferred, else numeric id
    item_name: str
    primary: str
    subcategories: List[str] = field(default_factory=list)
    reason: Optional[str] = None
    seller_name: Optional[str] = None
    added_by: str = "admin"
    added_at: Optional[str] = None
    last_modified_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict) -> "OverrideEntry":
        return cls(
            id=str(data.get("id", "")).strip(),
            item_name=str(data.get("itemName", "") or "").strip(),
            primary=data.get("primary") or "",
            subcategories=list(data.get("subcategories") or []),
            reason=data.get("reason"),
            seller_name=data.get("sellerName"),
            added_by=data.get("addedBy", "admin"),
            added_at=data.get("addedAt"),
            last_modified_at=data.get("lastModifiedAt"),
        )


def validate_override(entry: OverrideEntry, store: Optional[TaxonomyStore] = None) -> None:
    """
    Validate an override entry against the taxonomy.

    Args:
        entry: Override entry to check
        store: Taxonomy store; defaults to the process-wide store

    Raises:
        InvalidOverrideError: If the entry cannot be applied
    """
    store = store or get_taxonomy_store()

    if not entry.id:
        raise InvalidOverrideError(entry.id, "missing or invalid id")
    if not entry.item_name:
        raise InvalidOverrideError(entry.id, "missing or invalid item name")
    if not entry.primary or not isinstance(entry.primary, str):
        raise InvalidOverrideError(entry.id, "missing or invalid primary category")
    if entry.primary not in store:
        raise InvalidOverrideError(entry.id, f"invalid primary category: {entry.primary}")
    if entry.primary in RESERVED_CATEGORIES:
        raise InvalidOverrideError(entry.id, f"cannot override to {entry.primary} category")

    for sub in entry.subcategories:
        if not store.is_subcategory(entry.primary, sub):
            raise InvalidOverrideError(
                entry.id, f'invalid subcategory "{sub}" for category "{entry.primary}"'
            )

    if entry.reason and len(entry.reason) > MAX_REASON_LENGTH:
        raise InvalidOverrideError(entry.id, f"reason too long (max {MAX_REASON_LENGTH} characters)")


def parse_overrides(document: Dict, store: Optional[TaxonomyStore] = None) -> Dict[str, OverrideEntry]:
    """
    Build the override mapping from a parsed override document.

    Invalid entries are skipped with a warning.

    Args:
        document: Parsed JSON ({"version", "updatedAt", "overrides": [...]})
        store: Taxonomy store used for validation

    Returns:
        Dictionary mapping override id to entry
    """
    if not isinstance(document, dict) or not isinstance(document.get("overrides", []), list):
        raise ValueError("Override document must be an object with an 'overrides' list")

    overrides = {}
    for raw in document.get("overrides", []):
        if not isinstance(raw, dict):
            logger.warning("Skipping non-object override entry: %r", raw)
            continue
        entry = OverrideEntry.from_dict(raw)
        try:
            validate_override(entry, store)
        except InvalidOverrideError as e:
            logger.warning("Skipping override: %s", e)
            continue
        overrides[entry.id] = entry

    return overrides


def load_override_json(json_path: str, store: Optional[TaxonomyStore] = None) -> Dict[str, OverrideEntry]:
    """
    Load manual overrides from a JSON file.

    Args:
        json_path: Path to the override document

    Returns:
        Dictionary mapping override id to entry

    Example JSON format:
        {"version": "1.0.0", "updatedAt": "2025-01-01T00:00:00Z",
         "overrides": [{"id": "ABC123", "itemName": "Mystery Box",
                        "primary": "Flower", "subcategories": ["Kush"]}]}
    """
    override_file = Path(json_path)
    if not override_file.exists():
        raise FileNotFoundError(f"Override file not found: {json_path}")

    with open(override_file, 'r', encoding='utf-8') as f:
        document = json.load(f)

    overrides = parse_overrides(document, store)
    logger.info("Loaded %d category overrides from %s", len(overrides), json_path)
    return overrides


def get_override(item_key: Optional[str], overrides: Dict[str, OverrideEntry]) -> Optional[OverrideEntry]:
    """Look up an override by item key."""
    if not item_key:
        return None
    return overrides.get(str(item_key))
