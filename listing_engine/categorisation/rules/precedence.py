"""
Precedence resolution: the terminal rule.

Picks the highest-scoring category, breaking exact ties by PRECEDENCE order.
"Other" only wins on genuine signal (one of its keywords in the text, or a
subcategory tagged under it); a default/tie-break "Other" win hands the result
to the best positive runner-up instead.
"""

from typing import Iterable, Optional, Tuple

from ..context import CategoryResult, ScoringContext
from ..pattern_matching import match_keywords
from ...config.categorisation_config import (
    DEFAULT_CATEGORY,
    RESERVED_CATEGORIES,
    precedence_rank,
)
from ...taxonomy.store import get_taxonomy_store


def select_best(scores: dict, exclude: Iterable[str] = ()) -> Tuple[Optional[str], int]:
    """
    Return the highest-scoring category and its score.

    Args:
        scores: Category -> score mapping
        exclude: Categories to skip

    Returns:
        Tuple of (category, score); (None, 0) when nothing is eligible
    """
    excluded = set(exclude) | RESERVED_CATEGORIES
    best_category = None
    best_score = 0
    for category, score in scores.items():
        if category in excluded:
            continue
        if (
            best_category is None
            or score > best_score
            or (score == best_score and precedence_rank(category) < precedence_rank(best_category))
        ):
            best_category, best_score = category, score
    return best_category, best_score


def _matched_default_signal(ctx: ScoringContext) -> bool:
    keywords = get_taxonomy_store().keywords(DEFAULT_CATEGORY)
    if match_keywords(ctx.text, keywords):
        return True
    return bool(ctx.subcategories(DEFAULT_CATEGORY))


def precedence_resolution_rule(ctx: ScoringContext) -> None:
    primary, best = select_best(ctx.scores)

    if primary is None or best <= 0:
        ctx.result = CategoryResult(DEFAULT_CATEGORY, [])
        return

    if primary == DEFAULT_CATEGORY and not _matched_default_signal(ctx):
        runner_up, runner_up_score = select_best(ctx.scores, exclude=(DEFAULT_CATEGORY,))
        if runner_up is not None and runner_up_score > 0:
            ctx.result = CategoryResult(runner_up, ctx.subcategories(runner_up))
        else:
            ctx.result = CategoryResult(DEFAULT_CATEGORY, [])
        return

    ctx.result = CategoryResult(primary, ctx.subcategories(primary))
