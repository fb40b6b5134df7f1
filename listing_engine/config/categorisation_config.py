"""
Categorisation configuration for listing classification.
Contains scoring weights, precedence order and reserved categories.
"""

# Tie-break order for the precedence resolver. Categories not listed sort last.
PRECEDENCE = (
    "Flower",
    "Hash",
    "PreRolls",
    "Edibles",
    "Concentrates",
    "Vapes",
    "Tincture",
    "Psychedelics",
    "Other",
)

# Present in the taxonomy but never returned as a primary
RESERVED_CATEGORIES = frozenset({"Tips"})

DEFAULT_CATEGORY = "Other"

# Base keyword rule weights
BASE_KEYWORD_POINTS = 2
SUBCATEGORY_KEYWORD_POINTS = 3

# Demotion large enough to remove any category
ELIMINATE = 999

CATEGORISATION_CONFIG = {
    "precedence": PRECEDENCE,
    "reserved_categories": RESERVED_CATEGORIES,
    "default_category": DEFAULT_CATEGORY,
    "weights": {
        "base_keyword": BASE_KEYWORD_POINTS,
        "subcategory_keyword": SUBCATEGORY_KEYWORD_POINTS,
    },
    "eliminate": ELIMINATE,
}


def precedence_rank(category: str) -> int:
    """Position of a category in PRECEDENCE; unknown categories rank last."""
    try:
        return PRECEDENCE.index(category)
    except ValueError:
        return len(PRECEDENCE)
