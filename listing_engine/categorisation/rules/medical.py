"""
Medical and pharmaceutical overrides, plus strain-lineage flower cues.
"""

import re

from ..context import ScoringContext

ANTIBIOTIC = re.compile(r"\bantibiotic|doxycycline\b", re.ASCII)
STRONG_FLOWER = re.compile(
    r"(bud|buds|flower|kush|haze|diesel|nug|indica|sativa|hybrid|zkittlez| og |marijuana)",
    re.ASCII,
)
STRAIN_WORD = re.compile(r"\bstrain(s)?\b", re.ASCII)

MEDICAL_TERMS = re.compile(
    r"\bdoxycycline\b|\bantibiotic\b|\burinary\b|\binfections?\b|\bgastrointenstinal\b"
    r"|\bcigarettes\b|\bgastrointestinal\b",
    re.ASCII,
)
ED_MEDICATION = re.compile(
    r"(tadalafil|sildenafil|vardenafil|avanafil|dapoxetine|levitra|cialis|viagra"
    r"|erectile\s+dysfunction)",
    re.ASCII,
)
NOOTROPICS = re.compile(r"(modafinil|modvigil)\b", re.ASCII)
MAD_HONEY = re.compile(r"\bmad\s+honey\b", re.ASCII)
LINEAGE = re.compile(
    r"(\(|\b)(?:[^)]{0,40})\bx\s+[^)]{2,40}\)|\bbx[0-9]\b|\bf[0-9]\b|\blineage\b|\bgenetics\b",
    re.ASCII,
)
TRUE_INGESTION = re.compile(
    r"(gummy|gummies|chocolate|brownie|cereal bar|nerd rope|capsule|capsules|tablet|tablets"
    r"|wonky bar|infused|delight)",
    re.ASCII,
)


def medical_early_rule(ctx: ScoringContext) -> None:
    """Drop Flower from antibiotic listings whose only flower cue is 'strain' (bacterial strain)."""
    if not (ctx.has("Other") and ctx.has("Flower")):
        return
    text = ctx.text
    if ANTIBIOTIC.search(text):
        only_strain_word = bool(STRAIN_WORD.search(text)) and not STRONG_FLOWER.search(text)
        if only_strain_word:
            ctx.remove("Flower")


def antibiotic_lineage_rule(ctx: ScoringContext) -> None:
    text = ctx.text

    if MEDICAL_TERMS.search(text):
        ctx.add("Other", 6)
        ctx.demote("Edibles", 8)

    if ED_MEDICATION.search(text):
        ctx.add("Other", 10)
        ctx.demote("Edibles", 10)
        ctx.demote("Flower", 4)

    if NOOTROPICS.search(text):
        ctx.add("Other", 10)
        ctx.demote("Edibles", 8)
        ctx.demote("Flower", 2)

    # grayanotoxin honey, not a cannabis spread
    if MAD_HONEY.search(text):
        ctx.add("Other", 8)
        ctx.demote("Edibles", 8)

    # "(Gelato x Runtz)", BX1, F2, lineage/genetics talk
    if LINEAGE.search(text) and not TRUE_INGESTION.search(text):
        ctx.add("Flower", 4)
        ctx.demote("Edibles", 5)
