"""
Listing exclusion filters.

Tip jars, shipping/postage utilities, marketplace promo packages and custom-order
placeholders are not products. The indexer drops them before categorization.
"""

import re
from typing import Optional

from ..categorisation.pattern_matching import match_all, match_regex_patterns

# Any single pattern excludes the listing
TIP_PATTERNS = [
    re.compile(r"\btip\s*jar\b", re.ASCII),
    re.compile(r"\btipjar\b", re.ASCII),
    re.compile(r"pay for (express )?shipping", re.ASCII),
    re.compile(r"(postage|shipping|delivery) upgrade", re.ASCII),
    re.compile(r"upgrade to (special|express) delivery", re.ASCII),
    re.compile(r"\bstar\s+maker\b", re.ASCII),
    re.compile(r"visibility\s+on\s+lb", re.ASCII),
]

# Every pattern in a group must match
_LB = r"(little\s*biggy|\blb\b)"
_PART_PAYMENT = r"(partial\s+payment|part\s+payment)"
TIP_COMBINATIONS = [
    (
        re.compile(r"\btips?\b", re.ASCII),
        re.compile(
            r"(underpaid|outstanding balance|express shipping|pay for shipping|short on|support"
            r"|generous|partial\s+payment|part\s+payment|shipping\s*cost|extra\s+shipping|postage)",
            re.ASCII,
        ),
    ),
    (re.compile(r"(^|\W)tips?(\W|$)", re.ASCII), re.compile(_PART_PAYMENT, re.ASCII)),
    (
        re.compile(_PART_PAYMENT, re.ASCII),
        re.compile(
            r"(tip|tips|shipping|postage|balance|underpaid|unpaid|shipping\s*cost|extra\s+shipping)",
            re.ASCII,
        ),
    ),
    (re.compile(r"\breferrer'?s?\b", re.ASCII), re.compile(r"\bretirement\s+plan\b", re.ASCII)),
    (re.compile(r"passive\s+income", re.ASCII), re.compile(_LB, re.ASCII)),
    (re.compile(r"engaging\s+posts", re.ASCII), re.compile(_LB, re.ASCII)),
]

CUSTOM_ORDER = re.compile(r"\bcustom\s*(international\s*)?orders?\b", re.ASCII)
CUSTOM_LISTING = re.compile(r"\bcustom\s*listing(s)?\b", re.ASCII)

CUSTOM_TITLE_PATTERNS = [
    CUSTOM_ORDER,
    CUSTOM_LISTING,
    re.compile(r"^custom\b", re.ASCII),
    re.compile(r"^custom\s*#", re.ASCII),
]
CUSTOM_TITLE_COMBINATIONS = [
    (re.compile(r"tips?", re.ASCII), re.compile(r"custom", re.ASCII)),
]
CUSTOM_TEXT_PATTERNS = [
    CUSTOM_ORDER,
    CUSTOM_LISTING,
    re.compile(r"please\s+only\s+purchase[^.]*custom\s+order", re.ASCII),
    re.compile(r"this\s+listing\s+is\s+for\s+custom\s+orders?", re.ASCII),
]


def _padded_text(name: Optional[str], description: Optional[str]) -> str:
    return f" {(name or '').lower()} {(description or '').lower()} "


def _any_combination(text: str, combinations) -> bool:
    return any(match_all(text, group) for group in combinations)


def is_tip_listing(name: Optional[str], description: Optional[str] = None) -> bool:
    """
    Check if a listing is a tip jar, shipping/balance utility or promo package.

    Args:
        name: Listing title
        description: Listing description

    Returns:
        True if the listing should be excluded from the index
    """
    text = _padded_text(name, description)
    if match_regex_patterns(text, TIP_PATTERNS):
        return True
    return _any_combination(text, TIP_COMBINATIONS)


def is_custom_listing(name: Optional[str], description: Optional[str] = None) -> bool:
    """
    Check if a listing is a custom-order placeholder.

    Args:
        name: Listing title
        description: Listing description

    Returns:
        True if the listing should be excluded from the index
    """
    title = (name or "").lower().strip()
    if match_regex_patterns(title, CUSTOM_TITLE_PATTERNS):
        return True
    if _any_combination(title, CUSTOM_TITLE_COMBINATIONS):
        return True
    return match_regex_patterns(_padded_text(name, description), CUSTOM_TEXT_PATTERNS) is not None


def exclusion_reason(name: Optional[str], description: Optional[str] = None) -> Optional[str]:
    """Return 'tip' or 'custom' for an excluded listing, None otherwise."""
    if is_tip_listing(name, description):
        return "tip"
    if is_custom_listing(name, description):
        return "custom"
    return None
