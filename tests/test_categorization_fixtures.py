"""
Table-driven categorization fixtures.

Every case is a literal marketplace listing (name, description) with the
primary category it must resolve to. Tag expectations come in two flavours:
MARKETPLACE_CASES name one tag that must be present, UNIFIED_CASES name the
exact tag set (compared sorted).
"""

import importlib
import re
import unittest
from listing_engine.categorisation.context import ScoringContext
from listing_engine.categorisation.engine import ListingCategorizer
from listing_engine.categorisation.rules import base_keywords_rule
from listing_engine.config.categorisation_config import (
    BASE_KEYWORD_POINTS,
    SUBCATEGORY_KEYWORD_POINTS,
)

# (name, description, expected primary, required tag or None)
FLOWER_REFINEMENT = [
    ("Rosin Huevos Fried Egg",
     "Rosin The latest creation from the kitchen of Hassans, flavour bomb Huevos. "
     "This creates a beautiful 'fried egg' using 2 rosin strains.",
     "Concentrates", None),
    ("PJ1 Static Sift",
     "PJ#1 Payton x Jealousy #1 offers a unique blend of genetics static sift dry sift",
     "Hash", None),
    ("Cartier Hash",
     "Cartier Hash cross between a Master Kush selected for vigor and resistance",
     "Hash", None),
    ("Hassans 6* Cold Cure",
     "Hassans 6* cold cure wpff. Pretty much piatella fresh batch new strains classic rosin",
     "Concentrates", None),
    ("Bear Dance Hash", "Bear Dance Hash sativa-dominant hybrid", "Hash", None),
    ("Shatter Cali Import",
     "Premium Shatter import from California Kush Mintz hybrid strain",
     "Concentrates", None),
    ("Cosmic Gelato Piatella Hash",
     "Cosmic Gelato - Piatella Hash equal indica sativa hybrid piatella",
     "Hash", None),
    ("Titanic Hash", "Titanic Hash indica dominant hybrid white fire x tres stardawg", "Hash", None),
    ("Z3 Dry Filtered", "Z3 Hybrid - Dry filtered dry-filtered", "Hash", None),
    ("Simpson Kush Hash",
     "Simpson Kush indica strain genetics SFV OG F.O.G lineage",
     "Hash", None),
    ("Banana OG Kush Hash",
     "Banana OG Kush Hash distinctive pine citrus aroma OG KUSH HASH",
     "Hash", None),
    ("Eddys RSO", "Eddys Rso batch limited stock rso", "Concentrates", None),
    ("Fresh RSO Gelato Haze", "Fresh RSO (GELATO x HAZE) potent rso", "Concentrates", None),
    ("Orange Diesel Terp Sauce",
     "Orange Diesel Terp Sauce agent orange sour diesel terp sauce live resin",
     "Concentrates", None),
    ("Lemon Zkittlez Crystalline",
     "Lemon Zkittlez Crystalline hybrid crystalline diamonds thca",
     "Concentrates", None),
    ("Cereal Gas Sugar",
     "Cereal Gas Sugar evenly balanced hybrid strain sugar diamonds",
     "Concentrates", None),
    ("Lemon Haze Hash", "Lemon Haze Hash sativa dominant hybrid hash", "Hash", None),
    ("Gelat.OG Hash", "Gelat.OG Hash indica dominant hybrid hash", "Hash", None),
    ("1G Resale Pots", "1G labeled resale pots for resale resale pots", "Concentrates", None),
    ("Gelato 41 Wax Crumble", "Gelato 41 Wax Crumble 90% THC wax crumble", "Concentrates", None),
    ("Zkittlez Concentrate", "Zkittlez Concentrate 90% THC concentrate", "Concentrates", None),
    ("Purple Punch Concentrate",
     "Purple Punch Concentrate 90% THC concentrate",
     "Concentrates", None),
    ("Biscotti Wax Resin Concentrate",
     "Biscotti Wax Resin Concentrate wax rosin concentrate",
     "Concentrates", None),
    ("Honey Comb Badder",
     "Honey Comb Badder hybrid badder batter concentrate",
     "Concentrates", None),
]

PREROLL_REFINEMENT = [
    ("Mac Melon Shake üçà ‚ùÑÔ∏è",
     "**out of stock so we will ship the ultimate Preroll quality shake** "
     "ALIEN OG SUPER FIRE POTENT SHAKE",
     "Flower", None),
    ("*THAI WEED* THAI-STICK 20% EXTRA - FREE SHIPPING",
     "Thai Weed, Also Known As Thai Stick, compressed block distinctive smell energetic",
     "Flower", None),
    ("Mixed small bud/dust/shake",
     "Includes small pea size nuts perfect for blunts, edibles, concentrates,dry vape "
     "or even mixed with tobacco to smoke a joint!",
     "Flower", None),
    ("HIGH THC TRIM X SHAKE *FREE SHIPPING*",
     "This is perfect for extracting, cooking or topping up your joint. Best value for money",
     "Flower", None),
    ("Ultimate Preroll Quality Shake - Kushmints",
     "Absolutely dank shake Perfect for smoking Perfect shake in house UK grown Kushmints",
     "Flower", None),
    ("Thai Stick Natural Mellow Weed",
     "Great bit of Thai weed Sungrown Organic nice mellow puff",
     "Flower", None),
    ("5 Pack Premium Pre-Rolls",
     "Five pre-rolled joints in a sealed pack hand rolled cones",
     "PreRolls", "Packs"),
]

EDIBLE_SAUCE = [
    ("Wonky sauce 1000mg ‚ö†Ô∏è",
     "**NEW** Extremely potent gourmet sauce!! Oompa Loompas biggest secret wonky sauce "
     "chocolate candy gourmet 1000mg",
     "Edibles", None),
    ("Eddys Edibles",
     "True dose edibles from my original shop now all in one place. "
     "Hand made edibles made not sprayed in house.",
     "Edibles", None),
    ("Orange Diesel Terp Sauce",
     "Orange Diesel Terp Sauce live resin terp sauce diamonds potent extract",
     "Concentrates", None),
]

DISTILLATE_REFINEMENT = [
    ("[UK-UK/NI] D9 Distillate - 98%+ 10ml-100ml",
     "Welcome to our listing for D9 Distillate bulk jars",
     "Concentrates", None),
    ("distillate d9",
     "high quality distillate d9 maybe little less then 10ml",
     "Concentrates", None),
    ("Top Tier Cat 3 D9 Distillate - No pesticides/heavy meta",
     "Best ticket Highest quality Distillate 50ml syringe",
     "Concentrates", None),
    ("D9+Terpenes", "D9 + Terp Syringes Pre Mixed fill your own vapes", "Concentrates", None),
    ("1L of 96%THC D9 Distillate",
     "Same distillate that goes into our vapes and edis spare jars",
     "Concentrates", None),
    ("5ml Delta 9 syringes with 10% Botanical Terps",
     "Delta 9 botanical terps 5ML Syringes",
     "Concentrates", None),
    ("D9 Distillate", "D9 Distillate from California bulk", "Concentrates", None),
    ("Lemonchillo 800mg -40% alcohol - 400ml",
     "800mg D9 - 40% alcohol lemoncello style liquor not for vaping",
     "Other", None),
    ("Pumpjack wellness oil: TCH & CBD",
     "FOR ORAL APPLICATIONS ONLY DO NOT SMOKE OR VAPE MCT Oil drops",
     "Tincture", None),
    ("Premium Distillate D9 Cartridges ***510 thread",
     "Premium Delta 9 Distillate 95%+ THC blended terpenes 510 thread cartridges",
     "Vapes", None),
]

MIXED_REGRESSIONS = [
    ("Flavour Packs - Raw Cones/Pre rolls",
     "try my strains Moonrocks joints rolled with pure weed",
     "PreRolls", None),
    ("Mad Honey", "Mad honey directly from Nepal potent harvest", "Other", None),
    ("THC Chocolate Bars \U0001f33f 420mg",
     "In-house Made Chocolate Bars 420mg total pieces Delta 9 THC Distillate",
     "Edibles", None),
    ('Glass Bong 12"', "borosilicate bong for smoking", "Other", "Bongs"),
    ("GELATO 41 FIRE TRIM", "FULL OF POP CORN AND SUGAR LEAF", "Flower", "Shake"),
]

VAPE_OVERRIDES = [
    ("Premium Distillate D9 Cartridges ***510 thread",
     "Premium Delta 9 Distillate cartridges 510 thread",
     "Vapes", None),
    ("Extract Vape Cart 1ml (510 Thread)",
     "extract vape cart sugar wax 1ml 510 thread",
     "Vapes", None),
]

USER_REPORTED = [
    ("Premium Drysift", "triple filtered premium dry zkittlez cake drysift", "Hash", None),
    ("Buttonless Battery", "PALM PRO hands-free Battery quantities listed", "Vapes", "Battery"),
    ("24x0.5ml cartridges",
     "cartridges in stock GELATO KUSH ZKITTLES MIMOSA GRAPE APE",
     "Vapes", "Cartridge"),
]

CANNABIS_SPREADS = [
    ("Canna Honey", "Cannabis Honey made from small buds mixed strains infused", "Edibles", None),
    ("Cannabis Nutella", "Cannabis Nutella made from mixed buds infused", "Edibles", None),
    ("Cannabis coconut oil", "Super strong Cannabis coconut oil mixed strains", "Edibles", None),
]

BRANDED_TINCTURES = [
    ("Kush 'n' Cookies CBD 1:1 Cannadrops",
     "A truly balanced medicinal strain with an impressive lineage, OG Kush x Girl Scout "
     "Cookies genetics resulted in a 50/50 indica / sativa strain with an almost equal amount "
     "of THC & CBD averaging 16% ‚Äì 21% of each.",
     "Tincture", "Sublingual"),
    ("FECO blend 1:1 ratio Cannadrops",
     "More potent than the whole plant infusions, these drops are made from full extract "
     "cannabis oil (FECO) with added peppermint oil. Infused with equal amounts of THC & CBD, "
     "these 1:1 ratio drops provide strong pain relief",
     "Tincture", "Sublingual"),
    ("FECO blend 10:1 ratio Cannadrops",
     "More potent than the whole plant infusions, these drops are made from full extract "
     "cannabis oil (FECO) with added peppermint oil. Infused at a ratio of 10:1 THC:CBD, "
     "these drops offer strong neurological pain relief",
     "Tincture", "Sublingual"),
    ("Night Nurse Cannadrops",
     "My own blend of the potent Sleepy Joe that was harvested to produce extra sedative CBN "
     "cannabinoids. Infused with Bubba Kush CBD, a relaxing, pain-relieving high CBD indica "
     "with around 16% CBD and less than 1% THC",
     "Tincture", "Sublingual"),
    ("Kush Mintz Cannadrops",
     "Animal Mintz x Bubba Kush x Original Sensible Seeds Secret Hybrid. A mouth-watering "
     "cookie mint flavour strain which is 80% indica & 20% sativa averaging 20 ‚Äì "
     "25% THC. This strain is all about the body stone & clear-headed effects.",
     "Tincture", "Sublingual"),
    ("Day Nurse Cannadrops",
     "My own blend of 3 different types of cannabis ‚Äì 50% of Lemon CBD 1:1 "
     "(~17% THC, ~17% CBD), 25% of Pineapple Cookie Dough CBD (~13% CBD, <1% THC) and 25% "
     "of Amnesia haze (~20% THC). The strains have been chosen due to their uplifting "
     "terp‚Ä¶",
     "Tincture", "Sublingual"),
    ("AccuDose¬© 5000mg Live Resin Tincture - Gold Standard",
     "Hello it's Mary We decided to put more focus on our 5000mg droppers They provide 10x "
     "the potency and duration of use in comparison to the 500mg counterpart 370 drops on "
     "the bottle means each drop will have a very healthy dose",
     "Tincture", "Sublingual"),
    ("AccuDose¬© Live Fast Acting Sublingual Tincture 500MG",
     "AccuDose¬© A Brand By Hemp Lady Focussing on accurate THC dosing for medical "
     "patients and using best ingredients for greater bioavailability and absorption. "
     "2 Options Available 500mg Tincture Dropper or 1000mg",
     "Tincture", "Sublingual"),
]

PSYCHEDELIC_GUMMIES = [
    ("Magic Gummies",
     "Hello, fellow adventure seekers ;) We bring you our new Magic Gummies, each of them "
     "contains 100ug. Packs of 5. Please exercise caution and harm reduction practices when "
     "taking these! - CityCartel City products.",
     "Psychedelics", "Paper"),
    ("THC Gummies 500mg",
     "Delicious cannabis infused gummy bears, 500mg THC total, 10 pieces per pack",
     "Edibles", None),
]

MARKETPLACE_CASES = (
    FLOWER_REFINEMENT
    + PREROLL_REFINEMENT
    + EDIBLE_SAUCE
    + DISTILLATE_REFINEMENT
    + MIXED_REGRESSIONS
    + VAPE_OVERRIDES
    + USER_REPORTED
    + CANNABIS_SPREADS
    + BRANDED_TINCTURES
    + PSYCHEDELIC_GUMMIES
)

# (name, description, expected primary, exact tag list or None)
UNIFIED_CASES = [
    ("OG Kush 3.5g", "Top shelf indica flower, dense buds.", "Flower", None),
    ("Wedding Cake Pre-Roll 1g", "slow burn preroll joint", "PreRolls", None),
    ("5 Pack Premium Pre-Rolls",
     "Five pre-rolled joints in a sealed pack hand rolled cones",
     "PreRolls", None),
    ("Infused Pre-Roll Hash", "hash infused preroll kief dipped cone", "PreRolls", ["Infused"]),
    ("Psilocybin Chocolate Bar 3g",
     "microdose psychedelic shroom chocolate",
     "Psychedelics", None),
    ("USB Rechargeable Battery", "charger and battery for vape carts", "Vapes", None),
    ("Live Resin Shatter 1g", "golden concentrate live resin", "Concentrates", None),
    ("Temple Ball Hash 2g", "authentic pressed hash temple balls", "Hash", None),
    ("Bulk Distillate Liter", "wholesale bulk distillate oil", "Concentrates", None),
    ("Gummy Bears 600mg", "edible thc infused gummy candy", "Edibles", None),
    ("Lemon Haze Vape Cart 1ml", "510 thread cart", "Vapes", None),
    ("Gelato Kush 3.5g", "premium hybrid strain dense buds", "Flower", None),
    ('Glass Bong 12"', "borosilicate bong for smoking", "Other", None),
]


class TestMarketplaceFixtures(unittest.TestCase):
    """Test cases for the aggregated marketplace listing fixtures."""

    def setUp(self):
        """Set up test fixtures."""
        self.categorizer = ListingCategorizer()

    def test_fixture_count(self):
        """Test that the fixture tables keep every listing."""
        self.assertEqual(len(MARKETPLACE_CASES), 67)
        self.assertEqual(len(UNIFIED_CASES), 13)

    def test_primary_categories(self):
        """Test that every marketplace fixture resolves to its expected primary."""
        for name, description, expected, _ in MARKETPLACE_CASES:
            result = self.categorizer.categorize(name, description)
            self.assertEqual(
                result.primary, expected,
                msg=f"{name!r}: subs={result.subcategories}",
            )

    def test_required_tags_present(self):
        """Test that fixtures naming a tag carry it among their subcategories."""
        for name, description, _, tag in MARKETPLACE_CASES:
            if tag is None:
                continue
            result = self.categorizer.categorize(name, description)
            self.assertIn(tag, result.subcategories, msg=f"{name!r}")


class TestUnifiedFixtures(unittest.TestCase):
    """Test cases for the unified regression fixtures with exact tag sets."""

    def setUp(self):
        """Set up test fixtures."""
        self.categorizer = ListingCategorizer()

    def test_primary_categories(self):
        """Test that every unified fixture resolves to its expected primary."""
        for name, description, expected, _ in UNIFIED_CASES:
            result = self.categorizer.categorize(name, description)
            self.assertEqual(
                result.primary, expected,
                msg=f"{name!r}: subs={result.subcategories}",
            )

    def test_exact_tag_sets(self):
        """Test that fixtures naming tags get exactly those tags."""
        for name, description, _, tags in UNIFIED_CASES:
            if not tags:
                continue
            result = self.categorizer.categorize(name, description)
            got = sorted(tag for tag in result.subcategories if tag)
            self.assertEqual(got, sorted(tags), msg=f"{name!r}")


class TestFixtureRegressions(unittest.TestCase):
    """Test cases for listings that used to land in the wrong category."""

    def setUp(self):
        """Set up test fixtures."""
        self.categorizer = ListingCategorizer()

    def test_infused_preroll_has_only_infused_tag(self):
        """Test that a hash-infused pre-roll stays PreRolls tagged only Infused."""
        result = self.categorizer.categorize(
            "Infused Pre-Roll Hash", "hash infused preroll kief dipped cone"
        )

        self.assertEqual(result.primary, "PreRolls")
        self.assertEqual(result.subcategories, ["Infused"])

    def test_mad_honey_is_other(self):
        """Test that mad honey is not scored as a cannabis spread."""
        result = self.categorizer.categorize(
            "Mad Honey", "Mad honey directly from Nepal potent harvest"
        )

        self.assertEqual(result.primary, "Other")
        self.assertNotIn("Spreads", result.subcategories)

    def test_cannabis_honey_stays_edible(self):
        """Test that the mad honey override leaves cannabis honey alone."""
        result = self.categorizer.categorize(
            "Canna Honey", "Cannabis Honey made from small buds mixed strains infused"
        )

        self.assertEqual(result.primary, "Edibles")

    def test_microgram_gummies_are_paper(self):
        """Test that gummies dosed in micrograms are LSD edibles, not cannabis gummies."""
        result = self.categorizer.categorize(
            "Magic Gummies",
            "Our new Magic Gummies, each of them contains 100ug. Packs of 5.",
        )

        self.assertEqual(result.primary, "Psychedelics")
        self.assertIn("Paper", result.subcategories)

    def test_microgram_sign_is_paper(self):
        """Test that a micro sign dose also reads as LSD."""
        result = self.categorizer.categorize("Fruit Gummies", "each one is 150µg, 10 per bag")

        self.assertEqual(result.primary, "Psychedelics")
        self.assertIn("Paper", result.subcategories)

    def test_milligram_gummies_stay_edible(self):
        """Test that milligram THC gummies are untouched by the microgram cue."""
        result = self.categorizer.categorize(
            "THC Gummies 500mg",
            "Delicious cannabis infused gummy bears, 500mg THC total, 10 pieces per pack",
        )

        self.assertEqual(result.primary, "Edibles")
        self.assertNotIn("Paper", result.subcategories)


class TestBaseKeywordScoring(unittest.TestCase):
    """Test cases for the base keyword pass in isolation."""

    def test_subcategory_counts_once(self):
        """Test that synonyms of one subcategory add the subcategory points only once."""
        single = ScoringContext("Trim", "")
        base_keywords_rule(single)
        synonyms = ScoringContext("Trim", "sugar leaf, sugarleaf")
        base_keywords_rule(synonyms)

        self.assertEqual(single.score("Flower"), BASE_KEYWORD_POINTS + SUBCATEGORY_KEYWORD_POINTS)
        self.assertEqual(synonyms.score("Flower"), single.score("Flower"))
        self.assertEqual(synonyms.subcategories("Flower"), ["Shake"])

    def test_each_subcategory_tagged_once(self):
        """Test that every matched subcategory is tagged exactly once."""
        ctx = ScoringContext("OG Kush", "OG kush, og kush", debug_mode=True)
        base_keywords_rule(ctx)

        tag_entries = [
            (adj.category, adj.subcategory) for adj in ctx.trace if adj.action == "sub"
        ]
        self.assertEqual(len(tag_entries), len(set(tag_entries)))
        self.assertIn(("Flower", "Kush"), tag_entries)

    def test_reserved_removal_not_traced_when_absent(self):
        """Test that discarding an unscored reserved category leaves no trace entry."""
        ctx = ScoringContext("OG Kush", "", debug_mode=True)
        base_keywords_rule(ctx)

        self.assertFalse(any(adj.action == "remove" for adj in ctx.trace))


class TestRegexSemantics(unittest.TestCase):
    """Test cases for ASCII word and digit classes in rule patterns."""

    RULE_MODULES = [
        "fallback_boosts", "preroll", "psychedelics", "edibles", "hash", "medical",
        "concentrates", "vapes", "non_product", "distillate", "tincture",
    ]

    def test_every_rule_pattern_is_ascii(self):
        """Test that every module-level rule pattern is compiled with re.ASCII."""
        modules = [
            importlib.import_module(f"listing_engine.categorisation.rules.{name}")
            for name in self.RULE_MODULES
        ]
        modules.append(importlib.import_module("listing_engine.exclusions.listing"))
        for module in modules:
            for attr, value in vars(module).items():
                if isinstance(value, re.Pattern):
                    self.assertTrue(value.flags & re.ASCII, msg=f"{module.__name__}.{attr}")

    def test_accented_letter_is_a_word_boundary(self):
        """Test that a non-ASCII letter next to a word still leaves a boundary."""
        from listing_engine.categorisation.rules.hash import HASH_WORD

        self.assertIsNotNone(HASH_WORD.search(" hash\u00e9 "))
        self.assertIsNotNone(HASH_WORD.search(" \u00e9hash "))

    def test_non_ascii_digits_are_not_doses(self):
        """Test that only ASCII digits form a microgram dose."""
        from listing_engine.categorisation.rules.psychedelics import MICROGRAM_DOSE

        self.assertIsNotNone(MICROGRAM_DOSE.search(" contains 100ug "))
        self.assertIsNone(MICROGRAM_DOSE.search(" contains \u0661\u0660\u0660ug "))


if __name__ == "__main__":
    unittest.main()
