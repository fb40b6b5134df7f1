"""
Concentrate overrides.

The early and mid rules pull confections infused with a concentrate back to
Edibles; the late rule settles concentrate-vs-flower once every other
refinement has run.
"""

import re

from ..context import ScoringContext
from ..preprocess import count_matches, count_tokens_present

MG_POTENCY = re.compile(r"\b\d{2,4}\s?mg\b", re.ASCII)
HARDWARE_TOKENS = re.compile(
    r"(cart|carts|cartridge|cartridges|disposable|disposables|pod|pods|pen|pens|battery|ccell"
    r"|510\b|device)",
    re.ASCII,
)


# --- early ---------------------------------------------------------------

CRUMBLE = re.compile(r"\bcrumble\b", re.ASCII)
CRUMBLE_CONCENTRATE_SIGNALS = re.compile(
    r"(extract|dab|shatter|rosin|wax|sauce|distillate|live resin|bho)",
    re.ASCII,
)
CRUMBLE_FLOWER_SIGNALS = re.compile(r"(flower|bud|buds|budds|nug|nuggs|strain)", re.ASCII)


def concentrate_early_overrides_rule(ctx: ScoringContext) -> None:
    if not (ctx.has("Concentrates") and ctx.has("Flower")):
        return
    text = ctx.text
    # "crumbles nicely" on a flower listing
    if CRUMBLE.search(text):
        if not CRUMBLE_CONCENTRATE_SIGNALS.search(text) and CRUMBLE_FLOWER_SIGNALS.search(text):
            ctx.demote("Concentrates", 5)


# --- mid -----------------------------------------------------------------

CHOCOLATE_OR_BAR = re.compile(r"(chocolate|bar)", re.ASCII)
DISTILLATE_D9 = re.compile(r"distillate|distilate|delta 9|delta-9|delta9", re.ASCII)
EDIBLE_PIECES = re.compile(r"(edible|gummy|gummies|bar|chocolate|piece|pieces)", re.ASCII)
GUMMY = re.compile(r"(gummie|gummy|gummies)", re.ASCII)
GUMMY_INFUSION = re.compile(r"(delta 9|delta-9|delta9|d9|distillate|distilate|rso)", re.ASCII)
EDIBLE_CONE = re.compile(r"(baked\s+cones|chocolate\s+cone(s)?)", re.ASCII)
CONE_PACKAGING = re.compile(r"(\b\d{2,4}\s?mg\b|\bpack(s)?\b|\b\d+\s?x\b)", re.ASCII)
CANDY_SHAPES = re.compile(r"(candy|sweet|sweets|drops|pieces|gummy|gummies|cone|cones)", re.ASCII)
EXTRACTION_TOKENS = re.compile(
    r"(shatter|wax|rosin|crumble|badder|batter|diamonds|distillate|distilate|live resin|rso"
    r"|thca|thc-a|extract)",
    re.ASCII,
)
TABLET_FORMS = re.compile(r"(tablet|tablets|capsule|capsules|rosintab)", re.ASCII)
TABLET_INFUSION = re.compile(r"(rosin|shatter|distillate|distilate|live resin|rso)", re.ASCII)


def concentrate_mid_overrides_rule(ctx: ScoringContext) -> None:
    text = ctx.text

    if CHOCOLATE_OR_BAR.search(text) and DISTILLATE_D9.search(text) and EDIBLE_PIECES.search(text):
        ctx.add("Edibles", 6)
        ctx.demote("Concentrates", 5)
        ctx.demote("Vapes", 2)
        if MG_POTENCY.search(text):
            ctx.add("Edibles", 4)
            ctx.demote("Concentrates", 3)

    if GUMMY.search(text) and (GUMMY_INFUSION.search(text) or MG_POTENCY.search(text)):
        ctx.add("Edibles", 8)
        ctx.demote("Concentrates", 7)

    if EDIBLE_CONE.search(text) and CONE_PACKAGING.search(text):
        ctx.add("Edibles", 7)
        ctx.demote("Flower", 5)

    if CANDY_SHAPES.search(text) and EXTRACTION_TOKENS.search(text):
        ctx.add("Edibles", 7)
        ctx.demote("Concentrates", 6)
        if MG_POTENCY.search(text):
            ctx.add("Edibles", 2)

    if TABLET_FORMS.search(text) and TABLET_INFUSION.search(text):
        ctx.add("Edibles", 8)
        ctx.demote("Concentrates", 7)


# --- late ----------------------------------------------------------------

LIMONCELLO = re.compile(r"(lem(?:on)?c?h?ill?o|limon?c?h?ell?o)", re.ASCII)
LIQUEUR_STRENGTH = re.compile(r"(40%\s*alcohol|\b\d{2,4}\s?mg\b)", re.ASCII)
NUG_RUN = re.compile(r"\bnug\s*run\b", re.ASCII)
TINCTURE_WORD = re.compile(r"\btincture(s)?\b", re.ASCII)
OTHER_STRONG_CONCENTRATE = re.compile(
    r"(wax|shatter|crumble|badder|batter|rosin|rso|diamonds|distillate|distilate|thca|thc-a"
    r"|piatella|cold cure|slab|extract)",
    re.ASCII,
)
NAME_CONCENTRATE_SIGNALS = re.compile(
    r"concentrate|wax|rosin|sauce|sugar|diamonds|crumble|badder|batter|thca|thc-a|distillate"
    r"|live resin|shatter|rso|piatella|cold cure|extract",
    re.IGNORECASE | re.ASCII,
)
SUGAR = re.compile(r"\bsugar\b", re.ASCII)
SUGAR_COATED = re.compile(r"sugar-?coated", re.ASCII)
CRYSTAL = re.compile(r"\bcrystalline\b|\bcrystal\b", re.ASCII)
CRYSTAL_CO_SIGNALS = re.compile(
    r"(thca|thc-a|diamonds?|extract|concentrate|shatter|rosin|live resin|distillate|rso|sauce"
    r"|terp sauce|terpene sauce)",
    re.ASCII,
)
CONCENTRATE_FORM_NAME = re.compile(r"(shatter|wax|rosin|badder|batter|crumble|sauce|terp\s*sauce)", re.ASCII)
SUGAR_CO_SIGNALS = re.compile(
    r"(wax|shatter|rosin|sauce|live resin|rso|diamonds|distillate|distilate|thca|thc-a|extract)",
    re.ASCII,
)
THC_SYRUP = re.compile(r"thc\s*syrup", re.ASCII)
SYRINGE = re.compile(r"(syringe|applicator)\b", re.ASCII)
ONE_GRAM = re.compile(r"\b1\s?g\b|\b1\.0\s?g\b", re.ASCII)

SUGAR_LIKE = re.compile(r"(\bsugar\b|\bcrystal(?:line)?\b)", re.ASCII)
STRONG_CONCENTRATE_DISTINCT = re.compile(
    r"(wax|shatter|crumble|badder|batter|rosin|live resin|rso|thca|thc-a|diamonds|distillate"
    r"|distilate|sauce|terp sauce|terpene sauce|piatella|cold cure|slab|extract)",
    re.ASCII,
)
SUGAR_FLOWER_CONTEXT = re.compile(
    r"(\bflower\b|\bbud|\bbuds|\bstrain\b|\bstrains\b|hybrid|indica|sativa|runtz|sherb|sherbet"
    r"|zkittlez|diesel|tops|blueberry|cake|frost|frosty|indoor|outdoor|greenhouse|seeds?|shake"
    r"|trim|pop\s?corn|sugar\s?leaf)",
    re.ASCII,
)
CONCENTRATE_SIGNALS = re.compile(
    r"(rosin|wax|shatter|crumble|badder|batter|sauce|terp sauce|terpene sauce|live resin|rso"
    r"|diamond|diamonds|crystalline|crystal|thca|thc-a|distillate|distilate|piatella|cold cure"
    r"|cold-cure|6\*|6 star|6star|six star|wpff|slab|extract|concentrate|concentrates"
    r"|resale pots|static sift|sugar)",
    re.ASCII,
)
INGESTION_EDIBLE = re.compile(
    r"(gummy|gummies|chocolate|brownie|cereal bar|nerd rope|capsule|capsules|tablet|tablets"
    r"|wonky bar|nutella|honey|cannabutter|canna butter|coconut oil)",
    re.ASCII,
)
TABLET_OR_CAPSULE = re.compile(r"(tablet|tablets|capsule|capsules)", re.ASCII)

STRONG_CONCENTRATE_TOKENS = (
    "concentrate", "concentrates", "wax", "shatter", "rosin", "crumble", "badder", "batter",
    "sugar", "diamonds", "rso", "distillate", "distilate", "live resin", "thca", "thc-a",
)


def concentrate_late_precedence_rule(ctx: ScoringContext) -> None:
    text = ctx.text
    name_lower = ctx.name_lower

    # infused limoncello liqueur
    if LIMONCELLO.search(text) and LIQUEUR_STRENGTH.search(text):
        ctx.add("Other", 12)
        ctx.demote("Concentrates", 10)
        ctx.demote("Edibles", 6)

    if NUG_RUN.search(text):
        ctx.add("Concentrates", 6)
        ctx.demote("Flower", 5)

    if TINCTURE_WORD.search(text) and "live resin" in text:
        if not OTHER_STRONG_CONCENTRATE.search(text):
            ctx.add("Tincture", 6)
            ctx.demote("Concentrates", 6)

    if "concentrate" in name_lower:
        signal_matches = count_matches(NAME_CONCENTRATE_SIGNALS, text)
        ctx.add("Concentrates", 6 + min(8, signal_matches * 2))
        if ctx.has("Flower") and ctx.score("Concentrates") >= ctx.score("Flower"):
            ctx.demote("Flower", 4)

    if SUGAR.search(name_lower) and not SUGAR_COATED.search(name_lower):
        ctx.add("Concentrates", 6)
        ctx.demote("Flower", 4)

    if CRYSTAL.search(text) and CRYSTAL_CO_SIGNALS.search(text):
        ctx.add("Concentrates", 5)
        ctx.demote("Flower", 3)

    if CRYSTAL.search(name_lower):
        ctx.add("Concentrates", 8)
        ctx.demote("Flower", 6)

    if CONCENTRATE_FORM_NAME.search(name_lower):
        ctx.add("Concentrates", 7)
        ctx.demote("Flower", 6)

    if SUGAR.search(text) and SUGAR_CO_SIGNALS.search(text):
        ctx.add("Concentrates", 4)
        ctx.demote("Flower", 2)

    if THC_SYRUP.search(text) and not HARDWARE_TOKENS.search(text):
        ctx.add("Concentrates", 7)
        ctx.demote("Flower", 5)
        ctx.demote("Vapes", 3)

    if SYRINGE.search(text) and ONE_GRAM.search(text):
        ctx.add("Concentrates", 6)
        ctx.demote("Flower", 4)

    # "sugar"/"crystal" describing frosty flower
    if ctx.has("Concentrates"):
        only_sugar_like = bool(SUGAR_LIKE.search(text)) and not STRONG_CONCENTRATE_DISTINCT.search(text)
        if only_sugar_like and SUGAR_FLOWER_CONTEXT.search(text):
            ctx.demote("Concentrates", 6)
            ctx.add("Flower", 4)

    if not (ctx.has("Concentrates") and ctx.has("Flower")):
        return

    has_tincture = bool(TINCTURE_WORD.search(text))
    strong_distinct = bool(STRONG_CONCENTRATE_DISTINCT.search(text))
    allow_boost = not (has_tincture and not strong_distinct)
    edible_skip = bool(INGESTION_EDIBLE.search(text)) and not strong_distinct
    tablet_caps = bool(TABLET_OR_CAPSULE.search(text))

    if tablet_caps:
        ctx.demote("Concentrates", 7 if strong_distinct else 5)

    if CONCENTRATE_SIGNALS.search(text) and allow_boost and not edible_skip and not tablet_caps:
        ctx.add("Concentrates", 5)
        ctx.demote("Flower", 5)
    elif edible_skip and ctx.has("Concentrates"):
        ctx.demote("Concentrates", 3)
    elif has_tincture and ctx.has("Concentrates") and not strong_distinct:
        ctx.demote("Concentrates", 4)

    if ctx.has("Concentrates") and ctx.has("Flower"):
        present = count_tokens_present(STRONG_CONCENTRATE_TOKENS, text)
        if present >= 2 and ctx.score("Flower") > ctx.score("Concentrates"):
            ctx.add("Concentrates", present * 2)
            ctx.demote("Flower", 2)
