"""
Edible refinements.

Three rules sharing one concern: dessert-named flower strains and confection
"sauce" must not be confused with Edibles or Concentrates respectively.

    edibles_vs_flower_disambiguation_rule   dessert strain names with flower context
    edible_sauce_refinement_rule            chocolate/candy "sauce" vs terp sauce
    edibles_false_positive_demotion_rule    generic sweets, add-ons, mints, spreads
"""

import re

from ..context import ScoringContext
from ..preprocess import count_matches

MG_POTENCY = re.compile(r"\b\d{2,4}\s?mg\b", re.ASCII)

# --- edibles vs flower ---------------------------------------------------

INGESTION_TOKENS = re.compile(
    r"(gummy|gummies|choco|chocolate|brownie|capsule|capsules|cannabutter|canna butter"
    r"|coconut oil|cannabis oil|cereal bar|bars?\b|nerd rope|nerd ropes|rope|ropes|candy drops"
    r"|edible|edibles|butter|caps\b|brownies|cookies?\b|honey|nutella)",
    re.ASCII,
)
STRONG_FLOWER_SIGNALS = re.compile(
    r"(\bflower\b|\bbud|\bbuds|\bstrain\b|\bstrains\b|\bhybrid\b|indica|sativa|terp|terps|genetics"
    r"|lineage|phenotype|pheno|frosty|trichome|trichomes|grams?\b|\d+\s*g\b|thc\s*%"
    r"|thc\s*\d{1,2}%|effects?:|genetics?:|cross(ed)?\s+with|made\s+by\s+crossing)",
    re.ASCII,
)
EDIBLE_CONE = re.compile(r"(baked\s+cones|chocolate\s+cone(s)?)", re.ASCII)
CONE_PACKAGING = re.compile(r"(\b\d{2,4}\s?mg\b|\bpack(s)?\b|\b\d+\s?x\b)", re.ASCII)
DESSERT_STRAIN_TOKENS = re.compile(
    r"(cookies|cake|runtz|sherb|sherbert|sherbet|rainbow\s+sherbert|candy\b|blueberry\b|cheese\b"
    r"|mochi|gumball|limoncello|gelato|zk?ittlez|gushers|sundae|sorbet|pancake|waffle|donut"
    r"|doughnut|muffin|pie|tart)",
    re.ASCII,
)
GRAM_MENU = re.compile(r"(\b1\s*g\b|\b3\.5\s*g\b|\b7\s*g\b|\b14\s*g\b|\b28\s*g\b)", re.ASCII)


def edibles_vs_flower_disambiguation_rule(ctx: ScoringContext) -> None:
    if not ctx.has("Edibles"):
        return
    text = ctx.text

    if EDIBLE_CONE.search(text) and CONE_PACKAGING.search(text):
        ctx.add("Edibles", 6)
        ctx.demote("Flower", 4)

    has_ingestion = bool(INGESTION_TOKENS.search(text))
    has_flower_context = bool(STRONG_FLOWER_SIGNALS.search(text))
    only_dessert = bool(DESSERT_STRAIN_TOKENS.search(text)) and not has_ingestion
    gram_matches = count_matches(GRAM_MENU, text)

    if not has_ingestion and has_flower_context and (only_dessert or gram_matches >= 2):
        ctx.demote("Edibles", 6)
        ctx.add("Flower", 3)


# --- confection sauce ----------------------------------------------------

STRONG_CONCENTRATE_SIGNALS = re.compile(
    r"(terp|terpene|live resin|rosin|shatter|wax|crumble|badder|batter|diamonds|thca|thc-a"
    r"|distillate|distilate|rso)",
    re.ASCII,
)
TERP_SAUCE_CONTEXT = re.compile(r"(terp|terpene|live resin)", re.ASCII)
CONFECTION_TOKENS = re.compile(
    r"(choc|chocolate|bar|cookie|cookies|honeycomb|caramel|smarties|pieces|piece|oompa|loompa"
    r"|wonky|wonka|candy|sweet|gourmet)",
    re.ASCII,
)
WONKY_CONTEXT = re.compile(r"(wonky|oompa|loompa|oompa\s+loompa|wonka)", re.ASCII)


def edible_sauce_refinement_rule(ctx: ScoringContext) -> None:
    text = ctx.text
    strong_concentrate = bool(STRONG_CONCENTRATE_SIGNALS.search(text))

    if re.search(r"\bedibles\b", ctx.name_lower, re.ASCII):
        ctx.add("Edibles", 8)
        if not strong_concentrate:
            ctx.demote("Concentrates", 5)

    if not re.search(r"\bsauce\b", text, re.ASCII):
        return
    # terp / live resin sauce stays a concentrate
    if TERP_SAUCE_CONTEXT.search(text):
        return

    looks_confection = bool(CONFECTION_TOKENS.search(text)) and bool(
        WONKY_CONTEXT.search(text) or MG_POTENCY.search(text)
    )
    if looks_confection:
        ctx.add("Edibles", 7)
        if not strong_concentrate:
            ctx.demote("Concentrates", 6)


# --- false positives -----------------------------------------------------

TRUE_EDIBLE_FORMS = re.compile(
    r"(gummy|gummies|gummie|gummies? bears?|mints?|mint|chew|chews|choco|chocolate|brownie"
    r"|capsule|capsules|tablet|tablets|cannabutter|canna butter|coconut oil|cannabis oil"
    r"|cereal bar|nerd rope|rope|ropes|bar\b|bars\b|wonky bar|infused|delight|cone|cones"
    r"|chocolate cone|chocolate cones|candy drops|drops)",
    re.ASCII,
)
GENERIC_SWEET = re.compile(r"(sweet|candy)", re.ASCII)
STRONG_FLOWER_CONTEXT = re.compile(
    r"(\bstrain\b|\bstrains\b|\bhybrid\b|indica|sativa|\bcali\b|exotic|exotics|\bflower\b|bud|buds)",
    re.ASCII,
)
ADDON_ONLY = re.compile(r"(add-?on|add on)\s+\d{2,4}\s?mg\s+edibles?", re.ASCII)
EDIBLE_FORM_PRESENT = re.compile(
    r"(gumm?y|gumm?ies|gummy bears?|mints?|mint|chocolate|brownie|candy|cones?)",
    re.ASCII,
)
POTENCY_OR_SERVING = re.compile(r"(\b\d{2,4}\s?mg\b|\bservings?\b|\bpack of\b|\b\d+\s?x\b)", re.ASCII)
CONE_EDIBLES = re.compile(r"(chocolate\s+cone(s)?|cone\s+edibles|baked\s+cones)", re.ASCII)
PETRA_OR_INFUSED = re.compile(r"(petra|cannabis[- ]?infused)", re.ASCII)
CANNABIS_SPREAD = re.compile(r"cannabis\s+(nutella|honey|coconut oil)|canna\s+(nutella|honey)", re.ASCII)


def edibles_false_positive_demotion_rule(ctx: ScoringContext) -> None:
    text = ctx.text
    addon_only = bool(ADDON_ONLY.search(text))

    if (
        ctx.has("Edibles")
        and not TRUE_EDIBLE_FORMS.search(text)
        and GENERIC_SWEET.search(text)
        and STRONG_FLOWER_CONTEXT.search(text)
        and not addon_only
    ):
        ctx.demote("Edibles", 6)
        ctx.add("Flower", 3)

    # "add on 100mg edibles" upsell on a flower listing
    if addon_only and ctx.has("Edibles"):
        ctx.demote("Edibles", 8)
        ctx.add("Flower", 4)

    if EDIBLE_FORM_PRESENT.search(text) and POTENCY_OR_SERVING.search(text) and not addon_only:
        ctx.add("Edibles", 6)
        ctx.demote("Flower", 4)

    if CONE_EDIBLES.search(text):
        ctx.add("Edibles", 8)
        ctx.demote("Flower", 6)
        ctx.demote("PreRolls", 8)

    has_mints = bool(re.search(r"\bmints?\b", text, re.ASCII))
    kush_mints = bool(re.search(r"\bkush\s+mints?\b", text, re.ASCII))
    thc_with_mg = bool(re.search(r"\bthc\b", text, re.ASCII)) and bool(MG_POTENCY.search(text))
    if has_mints and not kush_mints and (PETRA_OR_INFUSED.search(text) or thc_with_mg):
        ctx.add("Edibles", 12)
        ctx.demote("Flower", 8)
        ctx.demote("Other", 10)
        ctx.demote("Hash", 8)

    if CANNABIS_SPREAD.search(text):
        ctx.add("Edibles", 9)
        ctx.demote("Flower", 7)

    if re.search(r"cannabis\s+coconut oil", text, re.ASCII):
        ctx.add("Edibles", 14)
        ctx.demote("Flower", 11)
