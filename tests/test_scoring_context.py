"""
Test suite for the scoring context mutators and read helpers.
"""

import unittest
from listing_engine.categorisation.context import CategoryResult, ScoringContext


class TestScoringContextMutators(unittest.TestCase):
    """Test cases for add/demote/set/remove/sub."""

    def setUp(self):
        """Set up test fixtures."""
        self.ctx = ScoringContext("OG Kush", "Classic indoor buds")

    def test_text_is_lowercased_and_padded(self):
        """Test that the normalized text joins name and description with boundary spaces."""
        self.assertEqual(self.ctx.text, " og kush classic indoor buds ")
        self.assertEqual(self.ctx.name_lower, "og kush")

    def test_none_inputs_are_empty(self):
        """Test that missing name and description are treated as empty strings."""
        ctx = ScoringContext(None, None)
        self.assertEqual(ctx.name, "")
        self.assertEqual(ctx.description, "")

    def test_add_creates_entry(self):
        """Test that add creates an absent category from zero."""
        self.ctx.add("Flower", 2)
        self.ctx.add("Flower", 3)
        self.assertEqual(self.ctx.score("Flower"), 5)

    def test_demote_absent_is_noop(self):
        """Test that demote never creates a category."""
        self.ctx.demote("Vapes", 4)
        self.assertFalse(self.ctx.has("Vapes"))
        self.assertNotIn("Vapes", self.ctx.scores)

    def test_demote_to_zero_deletes(self):
        """Test that a score reaching zero or below is removed."""
        self.ctx.add("Concentrates", 5)
        self.ctx.demote("Concentrates", 5)
        self.assertFalse(self.ctx.has("Concentrates"))

        self.ctx.add("Vapes", 10)
        self.ctx.demote("Vapes", 999)
        self.assertFalse(self.ctx.has("Vapes"))

    def test_demote_partial(self):
        """Test that a demotion leaving a positive score keeps the entry."""
        self.ctx.add("Flower", 9)
        self.ctx.demote("Flower", 8)
        self.assertEqual(self.ctx.score("Flower"), 1)

    def test_set_overwrites(self):
        """Test that set replaces the score and deletes at zero."""
        self.ctx.add("Other", 3)
        self.ctx.set("Other", 12)
        self.assertEqual(self.ctx.score("Other"), 12)

        self.ctx.set("Other", 0)
        self.assertFalse(self.ctx.has("Other"))

    def test_remove(self):
        """Test that remove deletes unconditionally and tolerates absence."""
        self.ctx.add("Flower", 20)
        self.ctx.remove("Flower")
        self.ctx.remove("Flower")
        self.assertFalse(self.ctx.has("Flower"))

    def test_sub_ignores_empty_names(self):
        """Test that an empty subcategory name is not recorded."""
        self.ctx.sub("Flower", "")
        self.ctx.sub("Flower", None)
        self.assertEqual(self.ctx.subcategories("Flower"), [])

    def test_sub_keeps_insertion_order_without_duplicates(self):
        """Test that subcategory tags are a set in insertion order."""
        self.ctx.sub("Flower", "OG")
        self.ctx.sub("Flower", "Kush")
        self.ctx.sub("Flower", "OG")
        self.assertEqual(self.ctx.subcategories("Flower"), ["OG", "Kush"])

    def test_sub_does_not_create_score(self):
        """Test that tagging a subcategory leaves scores untouched."""
        self.ctx.sub("Other", "Bongs")
        self.assertFalse(self.ctx.has("Other"))

    def test_best_score_excludes(self):
        """Test best_score with and without exclusions."""
        self.assertEqual(self.ctx.best_score(), 0)
        self.ctx.add("Flower", 4)
        self.ctx.add("Other", 9)
        self.assertEqual(self.ctx.best_score(), 9)
        self.assertEqual(self.ctx.best_score(exclude=("Other",)), 4)


class TestScoringContextTrace(unittest.TestCase):
    """Test cases for the debug adjustment trace."""

    def test_trace_off_by_default(self):
        """Test that no trace is recorded outside debug mode."""
        ctx = ScoringContext("Glass Bong", "")
        ctx.add("Other", 2)
        self.assertEqual(ctx.trace, [])

    def test_trace_records_rule_and_totals(self):
        """Test that every mutation is recorded with the current rule name."""
        ctx = ScoringContext("Glass Bong", "", debug_mode=True)
        ctx.current_rule = "example_rule"
        ctx.add("Flower", 6)
        ctx.demote("Flower", 8)
        ctx.sub("Other", "Bongs")

        self.assertEqual(len(ctx.trace), 3)
        add, demote, sub = ctx.trace
        self.assertEqual((add.rule, add.action, add.delta, add.total), ("example_rule", "add", 6, 6))
        self.assertEqual((demote.action, demote.delta, demote.total), ("demote", -8, 0))
        self.assertEqual((sub.action, sub.category, sub.subcategory), ("sub", "Other", "Bongs"))

    def test_remove_absent_category_is_not_traced(self):
        """Test that removing a category that never scored records nothing."""
        ctx = ScoringContext("OG Kush", "", debug_mode=True)
        ctx.current_rule = "example_rule"
        ctx.remove("Tips")
        self.assertEqual(ctx.trace, [])

        ctx.add("Tips", 2)
        ctx.remove("Tips")
        removal = ctx.trace[-1]
        self.assertEqual((removal.action, removal.delta, removal.total), ("remove", -2, 0))


class TestCategoryResult(unittest.TestCase):
    """Test cases for result serialization."""

    def test_to_dict(self):
        """Test that a resolved result serializes to primary and subcategories."""
        result = CategoryResult("Hash", ["TempleBall"])
        self.assertEqual(result.to_dict(), {"primary": "Hash", "subcategories": ["TempleBall"]})

    def test_unresolved_to_dict_is_empty(self):
        """Test that a result without a primary serializes to an empty dict."""
        self.assertEqual(CategoryResult(None, []).to_dict(), {})


if __name__ == "__main__":
    unittest.main()
