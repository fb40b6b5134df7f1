"""
Preprocessing utilities for listing categorization.
Handles text normalization and signal counting shared by the rules.
"""

from typing import Iterable, Optional, Pattern, Tuple


def normalize_text(text: Optional[str]) -> str:
    """
    Normalize text for matching.

    Args:
        text: Raw text to normalize

    Returns:
        Lowercased text, empty string for None
    """
    if not text:
        return ""
    return text.lower()


def build_listing_text(name: Optional[str], description: Optional[str]) -> Tuple[str, str]:
    """
    Combine listing name and description for categorization.

    Args:
        name: Listing title
        description: Listing description

    Returns:
        Tuple of (base, text): the lowercased "name description" string and the
        same string padded with one space on each side for boundary checks
    """
    base = f"{name or ''} {description or ''}".lower()
    return base, f" {base} "


def count_matches(pattern: Pattern, text: str) -> int:
    """Count non-overlapping occurrences of a compiled pattern."""
    return sum(1 for _ in pattern.finditer(text))


def count_tokens_present(tokens: Iterable[str], text: str) -> int:
    """Count how many of the given tokens occur in text as substrings."""
    return sum(1 for token in tokens if token in text)


def strip_phrases(pattern: Pattern, text: str) -> str:
    """Replace every occurrence of pattern with a single space."""
    return pattern.sub(" ", text)
