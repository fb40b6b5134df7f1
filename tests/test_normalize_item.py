"""
Test suite for index record normalisation.

Covers key resolution, exclusions, manual overrides and the single call into
the categorizer.
"""

import unittest
from listing_engine.categorisation.context import CategoryResult
from listing_engine.categorisation.engine import ListingCategorizer
from listing_engine.config.override_loader import OverrideEntry
from listing_engine.indexing import normalize_listing, normalize_listing_detailed, resolve_item_key


class RecordingCategorizer:
    """Categorizer stand-in that records its calls."""

    def __init__(self, result):
        self.result = result
        self.calls = []

    def categorize(self, name, description=None):
        self.calls.append((name, description))
        return self.result


class TestResolveItemKey(unittest.TestCase):
    """Test cases for canonical key resolution."""

    def test_ref_preferred_over_id(self):
        """Test that refNum/refnum/ref win over the numeric id."""
        self.assertEqual(resolve_item_key({"refNum": "R1", "id": 5}), "R1")
        self.assertEqual(resolve_item_key({"refnum": "R2", "id": 5}), "R2")
        self.assertEqual(resolve_item_key({"ref": 77, "id": 5}), "77")

    def test_id_fallback(self):
        """Test that the id is used when no ref is present."""
        self.assertEqual(resolve_item_key({"id": 5}), "5")

    def test_no_key(self):
        """Test that an item with neither ref nor id has no key."""
        self.assertIsNone(resolve_item_key({"name": "OG Kush"}))


class TestNormalizeListing(unittest.TestCase):
    """Test cases for normalize_listing."""

    def setUp(self):
        """Set up test fixtures."""
        self.categorizer = ListingCategorizer()
        self.overrides = {
            "ABC": OverrideEntry(id="ABC", item_name="Glass Bong", primary="Flower", subcategories=["Kush"]),
            "12": OverrideEntry(id="12", item_name="Mystery", primary="Hash", subcategories=[]),
        }

    def test_no_key_is_dropped(self):
        """Test that items without an identifier are skipped."""
        self.assertIsNone(normalize_listing({"name": "Glass Bong"}, {}, self.categorizer))

    def test_tip_listing_is_dropped(self):
        """Test that tip jars never reach the index."""
        outcome = normalize_listing_detailed({"id": 1, "name": "Tip Jar"}, {}, self.categorizer)

        self.assertIsNone(outcome.record)
        self.assertEqual(outcome.excluded, "tip")

    def test_custom_listing_is_dropped(self):
        """Test that custom-order placeholders never reach the index."""
        outcome = normalize_listing_detailed({"id": 2, "name": "Custom Order"}, {}, self.categorizer)

        self.assertIsNone(outcome.record)
        self.assertEqual(outcome.excluded, "custom")

    def test_pipeline_category(self):
        """Test that the categorizer result is written to the record."""
        record = normalize_listing({"id": "7", "name": "Glass Bong"}, {}, self.categorizer)

        self.assertEqual(record["id"], 7)
        self.assertEqual(record["refNum"], "7")
        self.assertEqual(record["category"], "Other")
        self.assertEqual(record["subcategories"], ["Bongs"])

    def test_override_by_canonical_key(self):
        """Test that an override on refNum replaces the computed category verbatim."""
        outcome = normalize_listing_detailed(
            {"refNum": "ABC", "id": 99, "name": "Glass Bong"}, self.overrides, self.categorizer
        )

        self.assertTrue(outcome.overridden)
        self.assertEqual(outcome.record["category"], "Flower")
        self.assertEqual(outcome.record["subcategories"], ["Kush"])
        self.assertEqual(outcome.record["id"], 99)

    def test_override_by_numeric_id(self):
        """Test that the numeric id is checked when the canonical key has no override."""
        record = normalize_listing({"refNum": "ZZZ", "id": 12, "name": "Glass Bong"}, self.overrides,
                                   self.categorizer)

        self.assertEqual(record["category"], "Hash")
        self.assertNotIn("subcategories", record)

    def test_override_skips_categorizer(self):
        """Test that the categorizer is not called when an override exists."""
        categorizer = RecordingCategorizer(CategoryResult("Vapes", []))
        normalize_listing({"refNum": "ABC", "name": "Glass Bong"}, self.overrides, categorizer)

        self.assertEqual(categorizer.calls, [])

    def test_categorizer_called_once(self):
        """Test that the categorizer runs exactly once with name and description."""
        categorizer = RecordingCategorizer(CategoryResult("Hash", []))
        record = normalize_listing(
            {"id": 3, "name": "Temple Ball", "description": "Soft"}, {}, categorizer
        )

        self.assertEqual(categorizer.calls, [("Temple Ball", "Soft")])
        self.assertEqual(record["category"], "Hash")
        self.assertNotIn("subcategories", record)

    def test_empty_text_is_not_categorized(self):
        """Test that an item with no name or description gets no category."""
        categorizer = RecordingCategorizer(CategoryResult("Hash", []))
        record = normalize_listing({"id": 4}, {}, categorizer)

        self.assertEqual(categorizer.calls, [])
        self.assertNotIn("category", record)

    def test_failed_categorization_leaves_no_category(self):
        """Test that an empty categorizer result writes no category fields."""
        categorizer = RecordingCategorizer(CategoryResult(None, []))
        record = normalize_listing({"id": 5, "name": "Anything"}, {}, categorizer)

        self.assertNotIn("category", record)
        self.assertNotIn("subcategories", record)

    def test_seller_name(self):
        """Test that the seller name is carried onto the record."""
        record = normalize_listing(
            {"id": 6, "name": "Glass Bong", "seller": {"id": 1, "name": "Shop"}}, {}, self.categorizer
        )
        self.assertEqual(record["sellerName"], "Shop")


if __name__ == "__main__":
    unittest.main()
