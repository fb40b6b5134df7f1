"""
Rule pipeline runner.

RULE_SEQUENCE is hand-ordered: each refinement assumes the cumulative effect
of every rule before it. Never sort, parallelise or reorder it.
"""

import logging
from typing import Callable, Optional, Sequence

from ..config.categorisation_config import DEFAULT_CATEGORY
from ..errors import PipelineTerminationError
from .context import CategoryResult, ScoringContext
from .rules import (
    base_keywords_rule,
    fallback_boosts_rule,
    preroll_refinement_rule,
    psychedelic_overrides_rule,
    edibles_vs_flower_disambiguation_rule,
    hash_early_overrides_rule,
    medical_early_rule,
    concentrate_early_overrides_rule,
    antibiotic_lineage_rule,
    vape_overrides_rule,
    temple_balls_rule,
    concentrate_mid_overrides_rule,
    edible_sauce_refinement_rule,
    edibles_false_positive_demotion_rule,
    seeds_listings_rule,
    hash_precedence_rule,
    distillate_bulk_refinement_rule,
    concentrate_late_precedence_rule,
    tincture_brand_refinement_rule,
    other_paraphernalia_rule,
    precedence_resolution_rule,
)

logger = logging.getLogger(__name__)

Rule = Callable[[ScoringContext], None]

RULE_SEQUENCE = (
    base_keywords_rule,
    fallback_boosts_rule,
    preroll_refinement_rule,
    psychedelic_overrides_rule,
    edibles_vs_flower_disambiguation_rule,
    hash_early_overrides_rule,
    medical_early_rule,
    concentrate_early_overrides_rule,
    antibiotic_lineage_rule,
    vape_overrides_rule,
    temple_balls_rule,
    concentrate_mid_overrides_rule,
    edible_sauce_refinement_rule,
    edibles_false_positive_demotion_rule,
    seeds_listings_rule,
    hash_precedence_rule,
    distillate_bulk_refinement_rule,
    concentrate_late_precedence_rule,
    tincture_brand_refinement_rule,
    other_paraphernalia_rule,
    precedence_resolution_rule,
)

TERMINAL_RULE = precedence_resolution_rule


def run_rules(
    ctx: ScoringContext,
    rules: Sequence[Rule] = RULE_SEQUENCE,
    strict: bool = False,
) -> ScoringContext:
    """
    Execute rules in order against one context.

    A rule that raises is logged and skipped; the next rule sees whatever
    state existed at the point of failure. Iteration stops once the terminal
    rule has written a result.

    Args:
        ctx: Scoring context to mutate
        rules: Ordered rules to run
        strict: Re-raise rule failures instead of skipping them

    Returns:
        The same context, for chaining
    """
    for rule in rules:
        rule_name = getattr(rule, "__name__", repr(rule))
        ctx.current_rule = rule_name
        try:
            rule(ctx)
        except Exception:
            if strict:
                raise
            logger.warning(
                "Rule %s failed for listing %r; continuing", rule_name, ctx.name, exc_info=True
            )
        if rule is TERMINAL_RULE and ctx.result is not None:
            break
    ctx.current_rule = None
    return ctx


def finalize_result(ctx: ScoringContext, strict: bool = False) -> CategoryResult:
    """
    Read the result written by the terminal rule.

    Args:
        ctx: Context after run_rules
        strict: Raise instead of falling back when no result was written

    Returns:
        The terminal rule's result, or the default category with no tags

    Raises:
        PipelineTerminationError: In strict mode, when no result was written
    """
    if ctx.result is not None:
        return ctx.result
    if strict:
        raise PipelineTerminationError(
            f"Pipeline finished without a result for listing {ctx.name!r}"
        )
    logger.warning("No result written for listing %r; falling back to %s", ctx.name, DEFAULT_CATEGORY)
    return CategoryResult(DEFAULT_CATEGORY, [])


def run_categorisation_pipeline(
    name: Optional[str],
    description: Optional[str],
    strict: bool = False,
    debug_mode: bool = False,
    rules: Sequence[Rule] = RULE_SEQUENCE,
) -> CategoryResult:
    """
    Categorize one listing through the full rule sequence.

    Args:
        name: Listing title (None treated as empty)
        description: Listing description (None treated as empty)
        strict: Re-raise rule failures and raise if no result was written
        debug_mode: Record a ScoreAdjustment trace on the context
        rules: Ordered rules to run

    Returns:
        CategoryResult
    """
    ctx = ScoringContext(name, description, debug_mode=debug_mode)
    run_rules(ctx, rules, strict=strict)
    return finalize_result(ctx, strict=strict)
