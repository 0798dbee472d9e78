"""Transaction categorization utilities.

This module provides deterministic, local categorization of transactions based on
their descriptions. It is intentionally rule-based (no network calls) so the
same description always lands in the same category.
"""

from .rules import (
    CATEGORIES,
    FALLBACK_CATEGORY,
    CategoryDefinition,
    all_category_names,
    categorize,
    color_of,
    get_category,
    icon_of,
)

__all__ = [
    "CATEGORIES",
    "FALLBACK_CATEGORY",
    "CategoryDefinition",
    "all_category_names",
    "categorize",
    "color_of",
    "get_category",
    "icon_of",
]
