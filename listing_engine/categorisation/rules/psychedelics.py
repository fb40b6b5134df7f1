"""
Psychedelic overrides: mushroom edibles, microdose, grow kits and LSD paper.
"""

import re

from ..context import ScoringContext

MUSHROOM = re.compile(
    r"(\bmushroom\b|\bmushrooms\b|\bshroom\b|\bshrooms\b|shroomy|\bmushies\b|mrmushies"
    r"|mr\s*mushies|fungi|mycelium|foraged|psilocy|cubensis|penis\s+envy|golden\s+teacher"
    r"|treasure\s+coast|albino|magic\s+mushroom)",
    re.ASCII,
)
EDIBLE_FORM = re.compile(
    r"(chocolate|choc|gummy|gummies|capsule|capsules|caps\b|bar\b|bars\b|brownie|cacao|cocoa)",
    re.ASCII,
)
GROW = re.compile(
    r"(grow kit|grow kits|grow your own|heat mat|heat mats|flow unit|flow units|spawn|substrate)",
    re.ASCII,
)
MICRODOSE = re.compile(r"(micro ?dose|microdose|microdoses|microdosing|micro-dosing|micro-doses)", re.ASCII)
LSD = re.compile(r"(\blsd\b|\bacid\b|\bblotter\b|\btab\b|\bpaper\b|\blucy\b|albert\s+h[oa]f+mann?)", re.ASCII)
# microgram dosing is blotter or liquid LSD, never cannabis
MICROGRAM_DOSE = re.compile(
    r"(\b\d+\s?(?:ug|mcg)\b|\d+\s?[\u00b5\u03bc]g\b|magic\s+gummies)",
    re.ASCII,
)

CANNABIS_EDIBLE = re.compile(r"(canna|cannabutter|cbd|thc)", re.ASCII)
CANNABIS_MICRODOSE = re.compile(
    r"(\bthc\b|\bcbd\b|cannabis|canna\b|cannabutter|wonky|gummy|gummies|chocolate|brownie|bar\b|bars\b)",
    re.ASCII,
)


def psychedelic_overrides_rule(ctx: ScoringContext) -> None:
    text = ctx.text
    has_mushroom = bool(MUSHROOM.search(text))
    has_edible_form = bool(EDIBLE_FORM.search(text))
    has_microdose = bool(MICRODOSE.search(text))

    if has_mushroom:
        ctx.sub("Psychedelics", "Mushrooms")
        ctx.add("Psychedelics", 4)

        if has_edible_form:
            ctx.add("Psychedelics", 12)
            ctx.sub("Psychedelics", "Edibles")
            if not CANNABIS_EDIBLE.search(text) and ctx.has("Edibles"):
                ctx.demote("Edibles", 10)

        if GROW.search(text):
            ctx.sub("Psychedelics", "Grow")
            ctx.add("Psychedelics", 4)

        if has_microdose:
            ctx.sub("Psychedelics", "Microdose")
            ctx.add("Psychedelics", 4)
    else:
        # "mush" shorthand only counts alongside an edible form
        if "mush" in text and has_edible_form:
            ctx.add("Psychedelics", 10)
            ctx.sub("Psychedelics", "Mushrooms")
            ctx.sub("Psychedelics", "Edibles")
            ctx.demote("Edibles", 8)

        if has_microdose and not CANNABIS_MICRODOSE.search(text):
            ctx.sub("Psychedelics", "Microdose")
            ctx.add("Psychedelics", 6)
            ctx.demote("Edibles", 6)

    if LSD.search(text) or MICROGRAM_DOSE.search(text):
        ctx.sub("Psychedelics", "Paper")
        ctx.add("Psychedelics", 10 if has_edible_form else 6)
        if has_edible_form:
            ctx.demote("Edibles", 9)
