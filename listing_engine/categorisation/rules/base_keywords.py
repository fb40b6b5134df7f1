"""
Base keyword scoring: the broad recall pass every later rule refines.
"""

from ..context import ScoringContext
from ...config.categorisation_config import (
    BASE_KEYWORD_POINTS,
    RESERVED_CATEGORIES,
    SUBCATEGORY_KEYWORD_POINTS,
)
from ...taxonomy.store import get_taxonomy_store


def base_keywords_rule(ctx: ScoringContext) -> None:
    """
    Score every category from its taxonomy keywords.

    Each matched top-level keyword adds BASE_KEYWORD_POINTS to its category.
    Each subcategory with at least one matched keyword adds
    SUBCATEGORY_KEYWORD_POINTS to the parent once and tags the subcategory;
    synonyms in one subcategory list do not stack. Reserved categories are
    skipped for top-level keywords and discarded afterwards.
    """
    store = get_taxonomy_store()
    text = ctx.text

    for category in store.categories:
        if category not in RESERVED_CATEGORIES:
            for _, pattern in store.keyword_patterns(category):
                if pattern.search(text):
                    ctx.add(category, BASE_KEYWORD_POINTS)

        tagged = set()
        for subcategory, _, pattern in store.subcategory_patterns(category):
            if subcategory not in tagged and pattern.search(text):
                tagged.add(subcategory)
                ctx.add(category, SUBCATEGORY_KEYWORD_POINTS)
                ctx.sub(category, subcategory)

    for category in RESERVED_CATEGORIES:
        ctx.remove(category)
        ctx.drop_subcategories(category)
