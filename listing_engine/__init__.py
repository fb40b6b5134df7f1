"""
Listing Engine - marketplace listing categorisation.

Assigns each free-text product listing exactly one primary category and a set
of subcategories from a fixed cannabis-marketplace taxonomy.

Main Components:
    - taxonomy: Category/subcategory keyword table and read-only store
    - config: Precedence, tuned constants and manual override loading
    - exclusions: Tip-jar and custom-order filters
    - categorisation: Scoring context, rule pipeline and categorizer
    - indexing: Index record normalisation
"""

from typing import Dict, Optional

# Core categorisation components
from .categorisation.engine import ListingCategorizer
from .categorisation.context import CategoryResult, ScoringContext
from .categorisation.pipeline import RULE_SEQUENCE, run_categorisation_pipeline

# Taxonomy
from .taxonomy import TAXONOMY, TaxonomyStore, get_taxonomy_store

# Configuration
from .config import (
    CATEGORISATION_CONFIG,
    PRECEDENCE,
    OverrideEntry,
    load_override_json,
)

# Exclusions and indexing
from .exclusions import is_tip_listing, is_custom_listing
from .indexing import normalize_listing

from .errors import ListingEngineError, PipelineTerminationError, InvalidOverrideError


__version__ = "1.0.0"
__all__ = [
    # Categorisation
    "ListingCategorizer",
    "CategoryResult",
    "ScoringContext",
    "RULE_SEQUENCE",
    "run_categorisation_pipeline",
    # Taxonomy
    "TAXONOMY",
    "TaxonomyStore",
    "get_taxonomy_store",
    # Configuration
    "CATEGORISATION_CONFIG",
    "PRECEDENCE",
    "OverrideEntry",
    "load_override_json",
    # Exclusions and indexing
    "is_tip_listing",
    "is_custom_listing",
    "normalize_listing",
    # Errors
    "ListingEngineError",
    "PipelineTerminationError",
    "InvalidOverrideError",
    # Main function
    "categorize_listing",
]

_CATEGORIZER = ListingCategorizer()


def categorize_listing(name: Optional[str], description: Optional[str] = None) -> Dict:
    """
    Main entry point for listing categorization.

    Runs the full rule pipeline once and never raises: a failure inside a
    rule is logged and skipped, and a failure outside the rules yields {}.

    Args:
        name: Listing title (None treated as empty)
        description: Listing description (None treated as empty)

    Returns:
        Dictionary containing:
            - primary: One top-level category (never "Tips")
            - subcategories: Subcategory names tagged under primary

    Example:
        >>> categorize_listing("Glass Bong", "")
        {'primary': 'Other', 'subcategories': ['Bongs']}
    """
    return _CATEGORIZER.categorize(name, description).to_dict()
