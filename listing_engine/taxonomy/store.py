"""
Read-only taxonomy store.
Wraps the taxonomy table with immutable views and precompiled keyword patterns.
"""

import re
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Pattern, Tuple

from .base_taxonomy import TAXONOMY


def compile_keyword(keyword: str) -> Pattern:
    """
    Compile a taxonomy keyword into a whole-word, case-insensitive pattern.

    A word boundary is only enforced on a side where the keyword starts or
    ends with a letter or digit. Keywords padded with spaces (" og ", " hash ")
    already carry their own boundary.

    Args:
        keyword: Raw keyword phrase from the taxonomy

    Returns:
        Compiled regex pattern

    Example:
        >>> bool(compile_keyword("bud").search(" buds and bud "))
        True
        >>> bool(compile_keyword("bud").search(" budget "))
        False
    """
    phrase = keyword.lower()
    body = re.escape(phrase)
    if phrase[:1].isalnum():
        body = r"(?<![a-z0-9])" + body
    if phrase[-1:].isalnum():
        body = body + r"(?![a-z0-9])"
    return re.compile(body, re.IGNORECASE | re.ASCII)


class TaxonomyStore:
    """Immutable lookup over the category taxonomy."""

    def __init__(self, taxonomy: Optional[Dict] = None):
        """Build views and compile every keyword pattern once.

        Args:
            taxonomy: Taxonomy table; defaults to the bundled TAXONOMY
        """
        source = TAXONOMY if taxonomy is None else taxonomy

        categories = {}
        keyword_patterns = {}
        child_patterns = {}
        for category, record in source.items():
            keywords = tuple(k.lower() for k in record.get("keywords", []))
            children = MappingProxyType({
                child: tuple(k.lower() for k in child_keywords)
                for child, child_keywords in record.get("children", {}).items()
            })
            categories[category] = MappingProxyType({
                "keywords": keywords,
                "children": children,
            })
            keyword_patterns[category] = tuple(
                (keyword, compile_keyword(keyword)) for keyword in keywords
            )
            child_patterns[category] = tuple(
                (child, keyword, compile_keyword(keyword))
                for child, child_keywords in children.items()
                for keyword in child_keywords
            )

        self._categories = MappingProxyType(categories)
        self._keyword_patterns = MappingProxyType(keyword_patterns)
        self._child_patterns = MappingProxyType(child_patterns)

    @property
    def categories(self) -> Tuple[str, ...]:
        """Category names in taxonomy order."""
        return tuple(self._categories)

    def __contains__(self, category: str) -> bool:
        return category in self._categories

    def get(self, category: str) -> Optional[Mapping]:
        """Return the read-only record for a category, or None."""
        return self._categories.get(category)

    def keywords(self, category: str) -> Tuple[str, ...]:
        record = self._categories.get(category)
        return record["keywords"] if record else ()

    def subcategories(self, category: str) -> Mapping[str, Tuple[str, ...]]:
        """Return subcategory name -> keyword tuple for a category."""
        record = self._categories.get(category)
        return record["children"] if record else MappingProxyType({})

    def is_subcategory(self, category: str, subcategory: str) -> bool:
        return subcategory in self.subcategories(category)

    def keyword_patterns(self, category: str) -> Tuple[Tuple[str, Pattern], ...]:
        return self._keyword_patterns.get(category, ())

    def subcategory_patterns(self, category: str) -> Tuple[Tuple[str, str, Pattern], ...]:
        """Return (subcategory, keyword, pattern) triples for a category."""
        return self._child_patterns.get(category, ())

    def matched_keywords(self, category: str, text: str) -> List[str]:
        """
        List the category's top-level keywords found in text.

        Args:
            category: Category name
            text: Normalized listing text

        Returns:
            Matched keywords, in taxonomy order
        """
        return [kw for kw, pattern in self.keyword_patterns(category) if pattern.search(text)]


_STORE = TaxonomyStore()


def get_taxonomy_store() -> TaxonomyStore:
    """Return the process-wide taxonomy store."""
    return _STORE
