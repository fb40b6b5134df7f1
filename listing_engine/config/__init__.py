"""
Configuration module for the Listing Categorisation Engine.

This module contains categorisation constants and the manual override loader.
"""

from .categorisation_config import (
    CATEGORISATION_CONFIG,
    PRECEDENCE,
    RESERVED_CATEGORIES,
    DEFAULT_CATEGORY,
    BASE_KEYWORD_POINTS,
    SUBCATEGORY_KEYWORD_POINTS,
    ELIMINATE,
    precedence_rank,
)
from .override_loader import (
    OverrideEntry,
    validate_override,
    parse_overrides,
    load_override_json,
    get_override,
)

__all__ = [
    "CATEGORISATION_CONFIG",
    "PRECEDENCE",
    "RESERVED_CATEGORIES",
    "DEFAULT_CATEGORY",
    "BASE_KEYWORD_POINTS",
    "SUBCATEGORY_KEYWORD_POINTS",
    "ELIMINATE",
    "precedence_rank",
    "OverrideEntry",
    "validate_override",
    "parse_overrides",
    "load_override_json",
    "get_override",
]
