"""
Categorisation rules, one module per rule family.

Every rule is a plain function taking a ScoringContext and mutating it in
place. Execution order is fixed by pipeline.RULE_SEQUENCE, not by this module.
"""

from .base_keywords import base_keywords_rule
from .fallback_boosts import fallback_boosts_rule
from .preroll import preroll_refinement_rule
from .psychedelics import psychedelic_overrides_rule
from .edibles import (
    edibles_vs_flower_disambiguation_rule,
    edible_sauce_refinement_rule,
    edibles_false_positive_demotion_rule,
)
from .hash import hash_early_overrides_rule, temple_balls_rule, hash_precedence_rule
from .medical import medical_early_rule, antibiotic_lineage_rule
from .concentrates import (
    concentrate_early_overrides_rule,
    concentrate_mid_overrides_rule,
    concentrate_late_precedence_rule,
)
from .vapes import vape_overrides_rule
from .distillate import distillate_bulk_refinement_rule
from .tincture import tincture_brand_refinement_rule
from .non_product import seeds_listings_rule, other_paraphernalia_rule
from .precedence import precedence_resolution_rule, select_best

__all__ = [
    "base_keywords_rule",
    "fallback_boosts_rule",
    "preroll_refinement_rule",
    "psychedelic_overrides_rule",
    "edibles_vs_flower_disambiguation_rule",
    "edible_sauce_refinement_rule",
    "edibles_false_positive_demotion_rule",
    "hash_early_overrides_rule",
    "temple_balls_rule",
    "hash_precedence_rule",
    "medical_early_rule",
    "antibiotic_lineage_rule",
    "concentrate_early_overrides_rule",
    "concentrate_mid_overrides_rule",
    "concentrate_late_precedence_rule",
    "vape_overrides_rule",
    "distillate_bulk_refinement_rule",
    "tincture_brand_refinement_rule",
    "seeds_listings_rule",
    "other_paraphernalia_rule",
    "precedence_resolution_rule",
    "select_best",
]
