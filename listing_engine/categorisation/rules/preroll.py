"""
Pre-roll refinement.

PreRolls is scored as its own primary category (the taxonomy keeps it as a
Flower child for keyword tagging). An explicit pre-roll term in the listing
name creates and confirms the PreRolls score; loose shake/trim sold "for
joints" is pushed back to Flower.
"""

import re

from ..context import ScoringContext

PREROLL_QUALITY_NAME = re.compile(r"preroll\s*quality|pre[- ]?roll\s*quality", re.ASCII)
PREROLL_NAME_TERM = re.compile(r"pre[- ]?roll|preroll|joint|cone|blunt|doob", re.ASCII)

SHAKE_LIKE = re.compile(r"(shake|trim|dust|popcorn)", re.ASCII)
USAGE_PHRASE = re.compile(r"(perfect|great|ideal)\s+for\s+(blunts?|joints?|pre[- ]?rolls?|cones?)", re.ASCII)
PREROLL_QUALITY = re.compile(r"preroll\s+quality", re.ASCII)
THAI_STICK = re.compile(r"\bthai(?:[-\s]+)stick(s)?\b", re.ASCII)
SHAKE_QUALITY = re.compile(r"(ultimate|super|premium)\s+preroll\s+quality", re.ASCII)

PACK_INDICATORS = re.compile(r"(pack|box|tube|doob|doobie|multi|bundle)", re.ASCII)
EXPLICIT_COUNT = re.compile(r"\b\d+\s?(x\s?)?(pre[- ]?rolls?|joints?|blunts?|cones?)\b", re.ASCII)
PRE_ROLLED = re.compile(r"pre[- ]?rolled", re.ASCII)

INFUSED = re.compile(r"(infused|hash[- ]?infused|kief|dipped|moonrock|moon[- ]?rock)", re.ASCII)
MOONROCK = re.compile(r"moonrock|moon[- ]?rock", re.ASCII)
HASH_SIGNALS = re.compile(
    r"(\bhash\b|kief|pollen|dry sift|dry-filtered|static sift|piatella|temple ball)",
    re.ASCII,
)


def preroll_refinement_rule(ctx: ScoringContext) -> None:
    text = ctx.text
    name_lower = ctx.name_lower

    has_preroll = ctx.has("PreRolls")
    has_flower = ctx.has("Flower")

    # "preroll quality" describes shake, not a rolled product
    quality_descriptor = bool(PREROLL_QUALITY_NAME.search(name_lower))
    name_has_term = not quality_descriptor and bool(PREROLL_NAME_TERM.search(name_lower))

    if name_has_term and not has_preroll:
        ctx.add("PreRolls", 6)
        has_preroll = True

    if not has_preroll and not has_flower:
        return

    shake_like = bool(SHAKE_LIKE.search(text))
    usage = bool(USAGE_PHRASE.search(text))
    preroll_quality = bool(PREROLL_QUALITY.search(text))
    thai_stick = bool(THAI_STICK.search(text))
    shake_quality = bool(SHAKE_QUALITY.search(text)) and "shake" in text

    is_pack = bool(
        PACK_INDICATORS.search(text) or EXPLICIT_COUNT.search(text) or PRE_ROLLED.search(text)
    )
    is_infused = bool(INFUSED.search(text))

    if name_has_term and has_preroll:
        ctx.add("PreRolls", 10)
        ctx.demote("Flower", 8)
        if is_pack:
            ctx.sub("PreRolls", "Packs")
        if is_infused:
            ctx.sub("PreRolls", "Infused")
        return

    loose_flower = (
        (shake_like and not is_pack)
        or (preroll_quality and shake_like)
        or (usage and shake_like)
        or thai_stick
        or shake_quality
    )
    if loose_flower and has_preroll:
        ctx.demote("PreRolls", 8)
        ctx.add("Flower", 3)
        ctx.drop_subcategories("PreRolls")
        return

    if is_pack and has_preroll:
        ctx.sub("PreRolls", "Packs")
        if is_infused:
            ctx.sub("PreRolls", "Infused")
            ctx.add("PreRolls", 3)

    if MOONROCK.search(text) and has_preroll and not HASH_SIGNALS.search(text):
        ctx.sub("PreRolls", "Infused")
