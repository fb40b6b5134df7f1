"""
Branded tincture refinement (Cannadrops, AccuDose).
"""

import re

from ..context import ScoringContext

TINCTURE_BRANDS = re.compile(r"(cannadrops|accudose)", re.ASCII)
STRONG_CONCENTRATE_DISTINCT = re.compile(
    r"(wax|shatter|crumble|badder|batter|rosin|rso|diamonds|thca|thc-a|piatella|cold cure|slab)",
    re.ASCII,
)
COMPETITORS = ("Flower", "Edibles", "Concentrates", "Vapes", "Hash")


def tincture_brand_refinement_rule(ctx: ScoringContext) -> None:
    text = ctx.text
    if not TINCTURE_BRANDS.search(text):
        return

    ctx.add("Tincture", 8)
    ctx.sub("Tincture", "Sublingual")

    # strain names in the product title
    ctx.demote("Flower", 6)
    # "drops" / "oil"
    ctx.demote("Edibles", 6)
    if not STRONG_CONCENTRATE_DISTINCT.search(text):
        ctx.demote("Concentrates", 5)

    max_other = max(ctx.score(c) for c in COMPETITORS)
    if ctx.score("Tincture") <= max_other:
        ctx.set("Tincture", max_other + 3)
