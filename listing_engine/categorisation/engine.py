"""
Listing Categorizer for marketplace indexing.
Assigns one primary category and its subcategories to free-text listings.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .context import CategoryResult, ScoringContext
from .pipeline import RULE_SEQUENCE, Rule, finalize_result, run_rules

logger = logging.getLogger(__name__)


class ListingCategorizer:
    """Categorizes product listings through the ordered rule pipeline."""

    def __init__(
        self,
        debug_mode: bool = False,
        strict: bool = False,
        rules: Sequence[Rule] = RULE_SEQUENCE,
    ):
        """Initialize the categorizer.

        Args:
            debug_mode: If True, attach the score adjustment trace as debug rationale
            strict: If True, rule failures and missing results raise instead of
                degrading to an empty result (for tests)
            rules: Ordered rule sequence; defaults to the production sequence
        """
        self.debug_mode = debug_mode
        self.strict = strict
        self.rules = tuple(rules)

    def categorize(self, name: Optional[str], description: Optional[str] = None) -> CategoryResult:
        """
        Categorize a single listing.

        Args:
            name: Listing title
            description: Listing description

        Returns:
            CategoryResult. If anything fails outside the per-rule boundary the
            result has no primary and serializes to {}.
        """
        try:
            ctx = ScoringContext(name, description, debug_mode=self.debug_mode)
            run_rules(ctx, self.rules, strict=self.strict)
            result = finalize_result(ctx, strict=self.strict)
            result.debug_rationale = self._build_debug_rationale(ctx)
            return result
        except Exception:
            if self.strict:
                raise
            logger.exception("Categorization failed for listing %r", name)
            return CategoryResult(None, [])

    def categorize_listings(self, listings: List[Dict]) -> List[Tuple[Dict, CategoryResult]]:
        """
        Categorize a list of listing records.

        Args:
            listings: Dictionaries carrying "name"/"n" and "description"/"d"

        Returns:
            List of tuples (listing, category_result)
        """
        results = []
        for listing in listings:
            name = listing.get("name") or listing.get("n") or ""
            description = listing.get("description") or listing.get("d") or ""
            results.append((listing, self.categorize(name, description)))
        return results

    def _build_debug_rationale(self, ctx: ScoringContext) -> Optional[str]:
        """Build debug rationale string if debug mode is enabled.

        Args:
            ctx: Context after the pipeline has run

        Returns:
            One "rule: action category delta -> total" line per adjustment,
            None when debug mode is off
        """
        if not self.debug_mode:
            return None

        lines = []
        for adj in ctx.trace:
            if adj.action == "sub":
                lines.append(f"{adj.rule}: sub {adj.category}/{adj.subcategory}")
            else:
                lines.append(f"{adj.rule}: {adj.action} {adj.category} {adj.delta:+d} -> {adj.total}")
        lines.append(f"final scores: {ctx.scores}")
        return "\n".join(lines)

    def get_category_summary(self, results: List[CategoryResult]) -> Dict:
        """
        Generate a summary of categorized listings.

        Returns:
            Dictionary of primary category -> {"count", "subcategories": {name: count}},
            ordered by descending count
        """
        summary = {}
        for result in results:
            if result is None or result.primary is None:
                continue
            entry = summary.setdefault(result.primary, {"count": 0, "subcategories": {}})
            entry["count"] += 1
            for sub in result.subcategories:
                entry["subcategories"][sub] = entry["subcategories"].get(sub, 0) + 1

        return dict(sorted(summary.items(), key=lambda kv: (-kv[1]["count"], kv[0])))

