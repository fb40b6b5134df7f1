"""
Taxonomy Module for the Listing Categorisation Engine.

Contains the category/subcategory keyword table and its read-only store.
"""

from .base_taxonomy import TAXONOMY
from .store import TaxonomyStore, compile_keyword, get_taxonomy_store

__all__ = [
    "TAXONOMY",
    "TaxonomyStore",
    "compile_keyword",
    "get_taxonomy_store",
]
