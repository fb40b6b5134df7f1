"""
Hash overrides and hash-vs-flower precedence.
"""

import re

from ..context import ScoringContext

LANDED_SHERBET = re.compile(r"landed\s+some\s+(?:sunset\s+)?sherb(?:ert|et)?\b", re.ASCII)
HASH_WORD = re.compile(r"\bhash\b", re.ASCII)
HASH_INGESTION_FORMS = re.compile(
    r"(gummy|gummies|chocolate|brownie|cereal bar|nerd rope|rope|capsule|capsules|wonky bar"
    r"|delight|honey|nutella)",
    re.ASCII,
)
CANDYISH = re.compile(r"(candy|cubes|cube|sweet|sweets)", re.ASCII)
DRY_TEK = re.compile(r"\bdry\s?tek\b|\bdry\s?tech\b", re.ASCII)
TEMPLE_BALLS = re.compile(r"temple\s+ball|temple\s+balls", re.ASCII)

FULL_MELT = re.compile(r"\bfull\s*-?\s*melt\b", re.ASCII)
GOO = re.compile(r"\bgoo\b", re.ASCII)
GOO_EDIBLE_CONTEXT = re.compile(
    r"(gummy|gummies|chocolate|candy|edible|cake|cookie|brownie|chew|chews|sweet|sweets|drink"
    r"|syrup|capsule|capsules|tablet|tablets)",
    re.ASCII,
)
DIAMOND_FLOWER = re.compile(
    r"diamond\s+infused\s+flower|infused\s+flower.*diamond|diamond\s+flower",
    re.ASCII,
)
STRONG_HASH_SIGNALS = re.compile(
    r"(\bhash\b|hashish|dry sift|dry-sift|drysift|dry filtered|dry-filtered|static sift"
    r"|static hash|piatella|kief|pollen|moonrock|moon rock|temple ball|temple balls|mousse hash"
    r"|simpson kush|\b120u\b|120\s*(?:micron|microns|µ|μ)|\bfull\s*-?\s*melt\b|\bgoo\b)",
    re.ASCII,
)
PLAIN_WORDS_NAME = re.compile(r"^\s*[a-z][a-z\s]+$", re.ASCII)
SHERBET_NAME = re.compile(r"sherb|sherbet|sherbert", re.ASCII)
NON_HASH_FORMS = re.compile(r"gummy|vape|cart|bar|chocolate|capsule|tablet", re.ASCII)
TRUFFLE = re.compile(r"\btruffle(s)?\b", re.ASCII)
TRUFFLE_FLOWER_SIGNALS = re.compile(
    r"(\bflower\b|\bbud\b|\bbuds\b|\bstrain\b|\bstrains\b|indica|sativa|hybrid|terp|terps"
    r"|flavour|flavor|smoke|nug|nugs)",
    re.ASCII,
)


def hash_early_overrides_rule(ctx: ScoringContext) -> None:
    text = ctx.text

    if LANDED_SHERBET.search(text):
        ctx.add("Hash", 4)
        ctx.demote("Flower", 3)

    if "hash concentrate" in text:
        ctx.add("Hash", 5)
        ctx.demote("Edibles", 3)
        ctx.add("Concentrates", 2)

    if re.search(r"simpson\s+kush", text, re.ASCII):
        ctx.add("Hash", 8)
        ctx.demote("Flower", 6)

    if HASH_WORD.search(text):
        if "decarb" in text:
            ctx.add("Hash", 4)
        # hash "candy"/"cubes" wording with no real edible form
        if not HASH_INGESTION_FORMS.search(text) and CANDYISH.search(text) and ctx.has("Edibles"):
            ctx.demote("Edibles", 6)
            ctx.add("Hash", 2)

    if DRY_TEK.search(text):
        ctx.add("Hash", 6)
        ctx.demote("Concentrates", 4)


def temple_balls_rule(ctx: ScoringContext) -> None:
    if TEMPLE_BALLS.search(ctx.text):
        ctx.add("Hash", 6)
        ctx.demote("Concentrates", 5)


def hash_precedence_rule(ctx: ScoringContext) -> None:
    text = ctx.text
    name_lower = ctx.name_lower

    if FULL_MELT.search(text):
        ctx.add("Hash", 7)
        ctx.demote("Flower", 6)

    if (GOO.search(name_lower) or GOO.search(text)) and not GOO_EDIBLE_CONTEXT.search(text):
        ctx.add("Hash", 6)
        ctx.demote("Flower", 4)

    if DIAMOND_FLOWER.search(text):
        ctx.add("Hash", 6)
        ctx.demote("Flower", 6)
        ctx.sub("Hash", "Moonrocks")

    if ctx.has("Hash") and ctx.has("Flower"):
        if STRONG_HASH_SIGNALS.search(text):
            ctx.add("Hash", 5)
            ctx.demote("Flower", 5)
        if HASH_WORD.search(name_lower):
            ctx.add("Hash", 4)
            ctx.demote("Flower", 2)

    if (
        PLAIN_WORDS_NAME.search(name_lower)
        and SHERBET_NAME.search(name_lower)
        and not NON_HASH_FORMS.search(text)
    ):
        ctx.add("Hash", 2)

    # chocolate truffle is a strain name when the text talks about flower
    if TRUFFLE.search(text) and ctx.has("Hash"):
        if not STRONG_HASH_SIGNALS.search(text) and TRUFFLE_FLOWER_SIGNALS.search(text):
            ctx.demote("Hash", 6)
            ctx.add("Flower", 5)
