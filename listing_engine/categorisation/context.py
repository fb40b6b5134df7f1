"""
Scoring context for listing categorization.

One ScoringContext is built per categorization call and threaded through every
rule in the pipeline. Rules communicate only through its five mutators:

    add(category, delta)      increase a score, creating it at zero if absent
    demote(category, delta)   decrease an existing score, deleting it at <= 0
    set(category, value)      overwrite a score (deleting it at <= 0)
    remove(category)          delete a score unconditionally
    sub(category, name)       tag a subcategory under a category

A category with no entry in ``scores`` is treated as never having scored, so
later rules test presence with ``has()`` rather than comparing against zero.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .preprocess import build_listing_text


@dataclass
class CategoryResult:
    """Result of listing categorization."""
    primary: Optional[str]
    subcategories: List[str] = field(default_factory=list)
    debug_rationale: Optional[str] = None  # Optional debug information

    def to_dict(self) -> Dict:
        """Serialize for the indexer; an unresolved result serializes as {}."""
        if self.primary is None:
            return {}
        return {"primary": self.primary, "subcategories": list(self.subcategories)}


@dataclass
class ScoreAdjustment:
    """One recorded score mutation, kept only in debug mode."""
    rule: Optional[str]
    category: str
    delta: int
    total: int  # score after the mutation, 0 when the entry was deleted
    action: str  # 'add', 'demote', 'set', 'remove', 'sub'
    subcategory: Optional[str] = None


class ScoringContext:
    """Mutable per-listing scoring state."""

    def __init__(self, name: Optional[str], description: Optional[str], debug_mode: bool = False):
        self.name = name or ""
        self.description = description or ""
        self.name_lower = self.name.lower()
        self.base, self.text = build_listing_text(self.name, self.description)

        self.scores: Dict[str, int] = {}
        # dict keys keep tag insertion order
        self.subs_by_cat: Dict[str, Dict[str, None]] = {}
        self.result: Optional[CategoryResult] = None

        self.debug_mode = debug_mode
        self.current_rule: Optional[str] = None
        self.trace: List[ScoreAdjustment] = []

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add(self, category: str, delta: int) -> None:
        total = self.scores.get(category, 0) + (delta or 0)
        self._store(category, total)
        self._record(category, delta or 0, "add")

    def demote(self, category: str, delta: int) -> None:
        if category not in self.scores:
            return
        self._store(category, self.scores[category] - (delta or 0))
        self._record(category, -(delta or 0), "demote")

    def set(self, category: str, value: int) -> None:
        previous = self.scores.get(category, 0)
        self._store(category, value)
        self._record(category, value - previous, "set")

    def remove(self, category: str) -> None:
        if category not in self.scores:
            return
        previous = self.scores.pop(category)
        self._record(category, -previous, "remove")

    def sub(self, category: str, subcategory: Optional[str]) -> None:
        if not subcategory:
            return
        self.subs_by_cat.setdefault(category, {})[subcategory] = None
        self._record(category, 0, "sub", subcategory)

    # ------------------------------------------------------------------
    # Read helpers
    # ------------------------------------------------------------------

    def score(self, category: str) -> int:
        return self.scores.get(category, 0)

    def has(self, category: str) -> bool:
        return category in self.scores

    def best_score(self, exclude: Iterable[str] = ()) -> int:
        """Highest current score among categories not in ``exclude`` (0 if none)."""
        excluded = set(exclude)
        return max((s for c, s in self.scores.items() if c not in excluded), default=0)

    def subcategories(self, category: str) -> List[str]:
        return list(self.subs_by_cat.get(category, {}))

    def drop_subcategories(self, category: str) -> None:
        self.subs_by_cat.pop(category, None)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _store(self, category: str, value: int) -> None:
        if value <= 0:
            self.scores.pop(category, None)
        else:
            self.scores[category] = value

    def _record(self, category: str, delta: int, action: str, subcategory: Optional[str] = None) -> None:
        if not self.debug_mode:
            return
        self.trace.append(ScoreAdjustment(
            rule=self.current_rule,
            category=category,
            delta=delta,
            total=self.scores.get(category, 0),
            action=action,
            subcategory=subcategory,
        ))

    def __repr__(self) -> str:
        return f"ScoringContext(name={self.name!r}, scores={self.scores!r})"
