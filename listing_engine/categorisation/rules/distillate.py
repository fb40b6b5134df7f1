"""
Distillate bulk and oral-use refinement.

Runs just before the late concentrate rule so the earlier vape overrides have
already asserted. Covers three listing shapes:

    - oral / sublingual MCT oil preparations -> Tincture above every competitor
    - CBD oil dropper bottles                -> Tincture
    - bulk distillate (ml jars, litres, syringes, "fill your own vapes")
                                             -> Concentrates, Vapes eliminated
"""

import re

from ..context import ScoringContext
from ...config.categorisation_config import ELIMINATE

ORAL_CONTEXT = re.compile(
    r"(for oral application|for oral applications|oral application|oral only|for oral use"
    r"|oral use only|do not smoke|do not vape|sublingual|under the tongue|drops per"
    r"|approx\s+\d+\s+drops|ingest|ingestion)",
    re.ASCII,
)
MCT_OIL = re.compile(r"mct\s+oil|\bmct\b|coconut\s+oil|extra\s+virgin\s+coconut\s+oil", re.ASCII)
CANNABINOID_TOKENS = re.compile(r"(distillate|distilate|cbd|thc|cbg|cbn|full\s*spectrum)", re.ASCII)
EDIBLE_OIL_ADJUNCTS = re.compile(r"(lecithin|sunflower lecithin)", re.ASCII)
ADJUNCT_CONCENTRATES = re.compile(r"(shatter|rosin|rso)", re.ASCII)

HARDWARE_TOKENS = re.compile(
    r"(cart|carts|cartridge|cartridges|disposable|disposables|pod|pods|pen|pens|battery|ccell"
    r"|510\b|device)",
    re.ASCII,
)
VAPE_HARDWARE_TOKENS = re.compile(
    r"(\bvape|\bvapes|cart|carts|cartridge|cartridges|disposable|disposables|pod|pods|pen|pens"
    r"|battery|ccell|510\b|device)",
    re.ASCII,
)
NO_VAPE_DISCLAIMER = re.compile(r"(do not smoke|do not vape|not for vaping|not for smoking)", re.ASCII)
STRONG_CONCENTRATE_DISTINCT = re.compile(
    r"(wax|shatter|crumble|badder|batter|rosin|rso|diamonds|thca|thc-a|piatella|cold cure|slab"
    r"|extract)",
    re.ASCII,
)
DAB = re.compile(r"(dab|dabbing)", re.ASCII)

CBD_OIL = re.compile(r"(cbd\s+oil)\b", re.ASCII)
DROPPER_BOTTLE = re.compile(r"(\b\d{1,3}\s?ml\b|\b15\s?ml\b|\b30\s?ml\b)", re.ASCII)

DISTILLATE_TOKENS = re.compile(
    r"(distillate|distilate|delta 9|delta-9|delta9|d9|crystalline|thca|thc-a)",
    re.ASCII,
)
DISTILLATE_WORD = re.compile(r"(distillate|distilate)", re.ASCII)
D9_DISTILLATE = re.compile(r"(distillate|distilate|delta 9|delta-9|delta9|d9)", re.ASCII)
PURITY_CONTEXT = re.compile(
    r"(no pesticides|heavy metals|mycotoxin|mycotoxins|contaminant|contaminants|cat\s*3"
    r"|cleanest|highest quality|purest|lab tested|coa\b|coas\b|only the cleanest)",
    re.ASCII,
)

ML_VOLUME = re.compile(r"\b\d{1,4}(?:\.\d+)?\s?ml\b", re.ASCII)
LITRE_VOLUME = re.compile(r"\b\d(?:\.\d+)?\s?(?:l|litre|liter)\b", re.ASCII)
ML_RANGE = re.compile(r"\b\d{1,3}\s?ml\s?-\s?\d{1,3}\s?ml\b", re.ASCII)
SYRINGE = re.compile(r"syringe|syringes|applicator|applicators", re.ASCII)
BULK_WORDS = re.compile(r"\b(bulk|jar|jars)\b", re.ASCII)
FILL_PHRASES = re.compile(r"(fill (straight )?into|fill your (own )?vapes?|refill|top up)", re.ASCII)
ONE_LITRE = re.compile(r"\b1\s?l\b", re.ASCII)
LARGE_ML = re.compile(r"\b(5[0-9]|[6-9][0-9]|[1-9][0-9]{2,3})\s?ml\b", re.ASCII)
GENERIC_VAPE = re.compile(r"\bvapes?\b", re.ASCII)
SPECIFIC_HARDWARE = re.compile(
    r"(cart|carts|cartridge|cartridges|disposable|disposables|pod|pods|pen|pens|battery|ccell|510)",
    re.ASCII,
)


def _apply_oral_tincture(ctx: ScoringContext) -> None:
    text = ctx.text
    ctx.add("Tincture", 10)

    has_hardware = bool(HARDWARE_TOKENS.search(text))
    if NO_VAPE_DISCLAIMER.search(text) and not has_hardware:
        ctx.demote("Vapes", ELIMINATE)

    dab_only = bool(DAB.search(text)) and not has_hardware
    if not dab_only:
        ctx.demote("Concentrates", 6 if STRONG_CONCENTRATE_DISTINCT.search(text) else 5)
    ctx.demote("Edibles", 9)

    for competitor in ("Concentrates", "Vapes", "Edibles"):
        if ctx.has(competitor) and ctx.score("Tincture") <= ctx.score(competitor):
            ctx.set("Tincture", ctx.score(competitor) + 2)


def distillate_bulk_refinement_rule(ctx: ScoringContext) -> None:
    text = ctx.text

    has_mct = bool(MCT_OIL.search(text))
    oral_tincture = (
        bool(ORAL_CONTEXT.search(text) or "for oral" in text)
        and has_mct
        and bool(CANNABINOID_TOKENS.search(text))
    )
    oil_with_adjunct = (
        has_mct and bool(EDIBLE_OIL_ADJUNCTS.search(text)) and bool(ADJUNCT_CONCENTRATES.search(text))
    )
    if oral_tincture or oil_with_adjunct:
        _apply_oral_tincture(ctx)

    if CBD_OIL.search(text) and DROPPER_BOTTLE.search(text) and not HARDWARE_TOKENS.search(text):
        ctx.add("Tincture", 8)
        ctx.demote("Vapes", 6)
        ctx.demote("Concentrates", 4)

    if not DISTILLATE_TOKENS.search(text):
        return

    has_hardware = bool(VAPE_HARDWARE_TOKENS.search(text))
    if not has_hardware and PURITY_CONTEXT.search(text):
        ctx.add("Concentrates", 6)
        ctx.demote("Vapes", 5)
        if DISTILLATE_WORD.search(text):
            ctx.sub("Concentrates", "Distillates")

    has_syringe = bool(SYRINGE.search(text))
    has_fill = bool(FILL_PHRASES.search(text))
    is_bulk = bool(
        ML_VOLUME.search(text) or LITRE_VOLUME.search(text) or ML_RANGE.search(text)
        or has_syringe or BULK_WORDS.search(text)
    )
    if not is_bulk:
        return
    large_bulk = bool(LITRE_VOLUME.search(text) or ONE_LITRE.search(text) or LARGE_ML.search(text))

    if not has_hardware or has_syringe or has_fill or large_bulk:
        ctx.add("Concentrates", 7 if large_bulk else 5)
        if D9_DISTILLATE.search(text):
            ctx.sub("Concentrates", "Distillates")
        ctx.demote("Edibles", 6)
        hardware_only_sale = has_hardware and not has_syringe and not has_fill and not large_bulk
        if ctx.has("Vapes") and not hardware_only_sale:
            ctx.demote("Vapes", ELIMINATE if large_bulk else 4)

    if has_syringe and has_fill:
        ctx.add("Concentrates", 6)
        ctx.demote("Vapes", ELIMINATE)

    generic_vape_only = bool(GENERIC_VAPE.search(text)) and not SPECIFIC_HARDWARE.search(text)
    if large_bulk and generic_vape_only:
        ctx.add("Concentrates", 5)
        ctx.demote("Vapes", ELIMINATE)
