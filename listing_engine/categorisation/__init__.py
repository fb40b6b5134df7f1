"""
Categorisation Module for the Listing Engine.

Orchestrates listing categorization through:
- Preprocessing (normalized, boundary-padded listing text)
- The scoring context shared by every rule
- The ordered rule pipeline and its terminal precedence resolver
"""

from .engine import ListingCategorizer
from .context import CategoryResult, ScoreAdjustment, ScoringContext
from .pipeline import (
    RULE_SEQUENCE,
    TERMINAL_RULE,
    finalize_result,
    run_categorisation_pipeline,
    run_rules,
)
from .preprocess import normalize_text, build_listing_text
from .pattern_matching import match_keywords, match_regex_patterns, match_all

__all__ = [
    # Main categorizer
    "ListingCategorizer",
    "CategoryResult",
    "ScoreAdjustment",
    "ScoringContext",
    # Pipeline
    "RULE_SEQUENCE",
    "TERMINAL_RULE",
    "finalize_result",
    "run_categorisation_pipeline",
    "run_rules",
    # Preprocessing utilities
    "normalize_text",
    "build_listing_text",
    # Pattern matching utilities
    "match_keywords",
    "match_regex_patterns",
    "match_all",
]
