"""
Vape hardware detection.

"Do not vape" style disclaimers are stripped before hardware vocabulary is
matched, and "great for ... vape" usage phrases on flower listings are ignored.
Multi-cartridge packs listing several strains get a boost that grows with the
number of strain names.
"""

import re

from ..context import ScoringContext
from ..preprocess import count_matches, strip_phrases

USAGE_CONTEXT = re.compile(r"(perfect|great|ideal|good)\s+for\s+[^.]*\bvape", re.IGNORECASE | re.ASCII)
DISCLAIMER = re.compile(
    r"(do not (?:smoke|vape)(?: or (?:smoke|vape))?|not for (?:vaping|smoking)(?: or (?:vaping|smoking))?)",
    re.ASCII,
)
VAPE_DELIVERY = re.compile(
    r"(\b(vape|vapes|cart|carts|cartridge|cartridges|disposable|disposables|ccell|kera|vision box"
    r"|510\s*thread|510\b|preheat|voltage|extract vape cart|vape cart|pen|pens|pod|pods|device"
    r"|battery|batteries|buttonless|hands?-?free|palm pro|pure one)\b)",
    re.ASCII,
)
CART_TOKEN = re.compile(r"(cart|carts|cartridge|cartridges|510)", re.ASCII)
RESIN_OR_DISTILLATE = re.compile(
    r"(live resin|distillate|distilate|delta 9|delta-9|delta9|d9|htfse|liquid\s+diamonds?)",
    re.ASCII,
)
DAB_TOKENS = re.compile(r"(dab|dabbing|shatter|rosin|bho|slab)", re.ASCII)
DISPOSABLE = re.compile(r"disposable|disposables", re.ASCII)
BATTERY = re.compile(r"\b(buttonless|battery|batteries|hands?-?free|palm pro|pure one)\b", re.ASCII)
LIVE_RESIN = re.compile(r"live resin|htfse", re.ASCII)
DISTILLATE = re.compile(r"distillate|distilate|delta 9|delta-9|delta9|d9", re.ASCII)
HIGH_MG = re.compile(r"\b\d{3,4}\s?mg\b", re.ASCII)
VAPE_TOKENS = re.compile(
    r"vape|cart|carts|cartridge|cartridges|disposable|disposables|ccell|pen|pens|pod|pods|device"
    r"|battery|buttonless|hands?-?free|palm pro|pure one",
    re.IGNORECASE | re.ASCII,
)
VAPE_STRAIN_NAMES = re.compile(
    r"haze|kush|zkittlez|sherb|sherbet|sherbert|runtz|cookies|gelato|glue|punch|sherb",
    re.IGNORECASE | re.ASCII,
)

MULTI_CART = re.compile(
    r"(\b\d{1,3}\s?x\s?(0?\.5|0?\.50|1|2|3)(?:\s?ml|\s?g)?\b)|(\b(0?\.5|1)\s?ml\s?(?:cartridges?|carts?)\b)",
    re.IGNORECASE | re.ASCII,
)
FLAVOUR_OR_STRAIN = re.compile(
    r"(gelato|zkitt?les?|kush|mimosa|grape|cake|nerdz|sherb|sherbet|runtz|ape|limeade|lime|haze"
    r"|og\b|diesel|gorilla|cookie|cookies)",
    re.IGNORECASE | re.ASCII,
)
CARTRIDGES_IN_STOCK = re.compile(r"cartridges?\s+in\s+stock", re.IGNORECASE | re.ASCII)
PACK_STRAIN_NAMES = re.compile(
    r"gelato|zkitt?les?|kush|mimosa|grape|cake|nerdz|sherb|sherbet|runtz|ape|limeade|lime|haze"
    r"|diesel|cookie|cookies",
    re.IGNORECASE | re.ASCII,
)
LIST_STYLE = re.compile(r"(\*\*\*|\u2022|\n|\u2014|-\s|\u25cf)", re.ASCII)

HTFSE = re.compile(r"(htfse|liquid\s+diamonds?)", re.ASCII)
SMALL_ML = re.compile(r"\b(0\.5|1|2|2\.0|2\.2|2\.5|3)\s?ml\b|\bml\b", re.ASCII)
CRYO_DIAMONDS = re.compile(r"cryo\s+cured\s+diamonds", re.ASCII)


def _apply_hardware(ctx: ScoringContext, sanitized: str) -> None:
    ctx.add("Vapes", 6)

    if CART_TOKEN.search(sanitized) and RESIN_OR_DISTILLATE.search(sanitized):
        ctx.add("Vapes", 4)
        ctx.demote("Flower", 2)
        ctx.demote("Concentrates", 2)

    if not DAB_TOKENS.search(sanitized):
        ctx.demote("Concentrates", 4)

    if CART_TOKEN.search(sanitized):
        ctx.sub("Vapes", "Cartridge")
    if DISPOSABLE.search(sanitized):
        ctx.sub("Vapes", "Disposable")
    if BATTERY.search(sanitized):
        ctx.sub("Vapes", "Battery")
    if LIVE_RESIN.search(sanitized):
        ctx.sub("Vapes", "LiveResin")
    if DISTILLATE.search(sanitized):
        ctx.sub("Vapes", "Distillate")

    if HIGH_MG.search(sanitized) and count_matches(VAPE_TOKENS, sanitized) >= 2:
        ctx.add("Vapes", 6)
        ctx.demote("Flower", 4)
        ctx.demote("Concentrates", 2)
        if count_matches(VAPE_STRAIN_NAMES, sanitized) >= 2:
            ctx.add("Vapes", 4)
            ctx.demote("Flower", 4)


def _apply_multi_cart(ctx: ScoringContext) -> None:
    text = ctx.text
    combined = f"{ctx.name} {text}" if ctx.name else text
    if not MULTI_CART.search(combined):
        return
    if not (FLAVOUR_OR_STRAIN.search(text) or CARTRIDGES_IN_STOCK.search(text)):
        return

    ctx.add("Vapes", 10)
    strain_matches = count_matches(PACK_STRAIN_NAMES, text)
    if strain_matches >= 4:
        ctx.add("Vapes", 6)
    elif strain_matches >= 2:
        ctx.add("Vapes", 3)
    ctx.demote("Flower", 8 + min(4, strain_matches))
    ctx.demote("Concentrates", 5)
    ctx.sub("Vapes", "Cartridge")

    if LIST_STYLE.search(text):
        ctx.add("Vapes", 2)
        ctx.demote("Flower", 2)


def vape_overrides_rule(ctx: ScoringContext) -> None:
    text = ctx.text
    is_usage_context = bool(USAGE_CONTEXT.search(text))
    sanitized = strip_phrases(DISCLAIMER, text)

    if VAPE_DELIVERY.search(sanitized) and not is_usage_context:
        _apply_hardware(ctx, sanitized)

    _apply_multi_cart(ctx)

    if HTFSE.search(text):
        small_ml = bool(SMALL_ML.search(text))
        ctx.add("Vapes", 9 if small_ml else 7)
        ctx.sub("Vapes", "LiveResin")
        ctx.demote("Flower", 7 if small_ml else 5)
        ctx.demote("Concentrates", 6 if small_ml else 3)

    if CRYO_DIAMONDS.search(text):
        ctx.add("Vapes", 4)
        ctx.demote("Concentrates", 3)
