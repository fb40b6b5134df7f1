"""
Non-product overrides: seed/clone listings and smoking paraphernalia.

Both redirect the primary to Other with a specific tag, overriding a
numerically higher strain-name score via set().
"""

import re

from ..context import ScoringContext

SEED_TITLE = re.compile(r"\bseeds?\b|seed\s*bank|\bclones?\b|\bcuttings?\b", re.ASCII)
SEED_CONTEXT = re.compile(
    r"(\bseed\s*packs?\b|\b\d+\s?(?:x\s?)?(?:fem(?:inised|inized)?\s+|auto(?:flower)?\s+)?seeds\b"
    r"|\brooted\s+clones?\b|\bcuttings\s+available\b)",
    re.ASCII,
)
SEED_NEGATIONS = re.compile(
    r"(seedless|no\s+seeds|seed[- ]free|without\s+seeds|hemp\s+seed\s+oil|sesame\s+seeds?)",
    re.ASCII,
)

PARAPHERNALIA_TITLE = re.compile(
    r"\b(bongs?|water\s*pipes?|bubblers?|dab\s*rigs?|percolators?|ash\s*catchers?|downstems?)\b",
    re.ASCII,
)


def _force_other(ctx: ScoringContext, margin: int) -> None:
    target = ctx.best_score(exclude=("Other",)) + margin
    ctx.set("Other", max(target, ctx.score("Other")))


def seeds_listings_rule(ctx: ScoringContext) -> None:
    text = ctx.text
    if SEED_NEGATIONS.search(text):
        return
    if SEED_TITLE.search(ctx.name_lower) or SEED_CONTEXT.search(text):
        ctx.sub("Other", "Genetics")
        _force_other(ctx, 10)


def other_paraphernalia_rule(ctx: ScoringContext) -> None:
    if PARAPHERNALIA_TITLE.search(ctx.name_lower):
        ctx.sub("Other", "Bongs")
        _force_other(ctx, 2)
