"""
Generic Pattern Matching for Listing Categorization.

Provides reusable keyword and regex matching used outside the rule bodies
(precedence resolution, exclusion filters).
"""

import re
from typing import Iterable, Optional, Pattern, Union


def match_keywords(text: str, keywords: Iterable[str]) -> Optional[str]:
    """
    Match text against a list of keywords by substring.

    Args:
        text: Normalized (lowercased) text to match
        keywords: Keyword strings

    Returns:
        The first keyword found in text, or None

    Example:
        >>> match_keywords(" mad honey from nepal ", ["modafinil", "mad honey"])
        'mad honey'
    """
    for keyword in keywords:
        if keyword and keyword.lower() in text:
            return keyword
    return None


def match_regex_patterns(text: str, patterns: Iterable[Union[str, Pattern]]) -> Optional[Pattern]:
    """
    Match text against a list of regex patterns.

    Args:
        text: Text to match
        patterns: Compiled patterns or pattern strings

    Returns:
        The first pattern that matches, or None
    """
    for pattern in patterns:
        compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, re.ASCII)
        if compiled.search(text):
            return compiled
    return None


def match_all(text: str, patterns: Iterable[Union[str, Pattern]]) -> bool:
    """True when every pattern matches text (co-occurrence check)."""
    for pattern in patterns:
        compiled = pattern if isinstance(pattern, re.Pattern) else re.compile(pattern, re.ASCII)
        if not compiled.search(text):
            return False
    return True
