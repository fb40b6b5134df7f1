"""
Generic fallback boosts applied straight after base keyword scoring.

    usage context   "perfect for edibles, vapes..." on a shake/bud listing
    weight menu     "3.5g" style weights on a listing that only says weed/herb
    dab nudge       "dabs" with no vape hardware
"""

import re

from ..context import ScoringContext

USAGE_CONTEXT = re.compile(
    r"(perfect|great|ideal|good)\s+for\s+[^.!]*\b(edibles?|concentrates?|extract(?:s|ing|ion)?"
    r"|vap(?:e|es|ing)|cooking|baking|butter|oil)\b",
    re.ASCII,
)
FLOWER_PRODUCT_NOUNS = re.compile(
    r"\b(shake|trim|smalls|popcorn|bud|buds|nugs?|flower|weed|dust|sugar\s?leaf)\b",
    re.ASCII,
)
USAGE_DEMOTED = ("Edibles", "Concentrates", "Vapes")

NAME_WEIGHT = re.compile(r"\b\d+(?:\.\d+)?\s?(?:g|oz)\b", re.ASCII)
GENERIC_WEED = re.compile(r"\b(weed|ganja|herb)\b", re.ASCII)

DAB = re.compile(r"\bdabs?\b|\bdabbing\b", re.ASCII)
HARDWARE = re.compile(
    r"\b(vape|vapes|cart|carts|cartridge|cartridges|disposable|disposables|pen|pens|pod|pods"
    r"|battery|510)\b",
    re.ASCII,
)


def fallback_boosts_rule(ctx: ScoringContext) -> None:
    text = ctx.text
    name_lower = ctx.name_lower

    if USAGE_CONTEXT.search(text) and FLOWER_PRODUCT_NOUNS.search(name_lower):
        ctx.add("Flower", 6)
        for category in USAGE_DEMOTED:
            ctx.demote(category, 4)

    if not ctx.scores and NAME_WEIGHT.search(name_lower) and GENERIC_WEED.search(text):
        ctx.add("Flower", 2)

    if DAB.search(text) and not HARDWARE.search(text) and not ctx.has("Concentrates"):
        ctx.add("Concentrates", 2)
