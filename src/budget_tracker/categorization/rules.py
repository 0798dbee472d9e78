"""Deterministic keyword categorization.

Every transaction description is mapped to one of a fixed, ordered set of
spending categories. A category matches when any of its keywords occurs as a
substring of the lower-cased, trimmed description.

This is intentionally rule-based so it's:
- fast (no external calls)
- explainable (auditable)
- stable across re-runs (recategorization is idempotent)

Keyword sets overlap in places (e.g. "ev" is a substring of many words).
Overlaps are resolved by declaration order: the earliest category wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CategoryDefinition:
    """A named category with its display attributes and match keywords."""

    name: str
    color: str
    icon: str
    keywords: tuple[str, ...] = field(default_factory=tuple)

    def matches(self, text: str) -> bool:
        return any(keyword.lower() in text for keyword in self.keywords)


FALLBACK_CATEGORY = "Diğer"

# Ordering matters: earlier matches win.
CATEGORIES: list[CategoryDefinition] = [
    CategoryDefinition(
        name="Gıda & Market",
        color="#10B981",
        icon="🛒",
        keywords=(
            "market", "gıda", "yemek", "süpermarket", "manav", "kasap", "fırın",
            "bakkal", "migros", "carrefour", "bim", "şok", "a101",
        ),
    ),
    CategoryDefinition(
        name="Ev & Faturalar",
        color="#F59E0B",
        icon="🏠",
        keywords=(
            "kira", "ev", "elektrik", "su", "doğalgaz", "fatura", "aidat",
            "temizlik", "mobilya", "tadilat",
        ),
    ),
    CategoryDefinition(
        name="İletişim",
        color="#3B82F6",
        icon="📱",
        keywords=(
            "internet", "telefon", "telekom", "turkcell", "vodafone",
            "türk telekom", "avea", "gsm",
        ),
    ),
    CategoryDefinition(
        name="Ulaşım",
        color="#8B5CF6",
        icon="🚗",
        keywords=(
            "ulaşım", "benzin", "otobüs", "metro", "taksi", "uber", "bitaksi",
            "park", "köprü", "servis",
        ),
    ),
    CategoryDefinition(
        name="Eğlence",
        color="#EC4899",
        icon="🎉",
        keywords=(
            "eğlence", "sinema", "restoran", "kafe", "bar", "konser", "tiyatro",
            "oyun", "spor", "fitness",
        ),
    ),
    CategoryDefinition(
        name="Sağlık",
        color="#EF4444",
        icon="🏥",
        keywords=(
            "doktor", "eczane", "hastane", "sağlık", "ilaç", "muayene", "diş",
            "göz", "check-up",
        ),
    ),
    CategoryDefinition(
        name="Eğitim",
        color="#06B6D4",
        icon="📚",
        keywords=(
            "okul", "üniversite", "kurs", "kitap", "eǧitim", "öğrenim", "ders",
            "sınav",
        ),
    ),
    CategoryDefinition(
        name="Giyim",
        color="#84CC16",
        icon="👕",
        keywords=(
            "giyim", "ayakkabı", "kıyafet", "mağaza", "alışveriş", "mont",
            "pantolon", "gömlek",
        ),
    ),
    CategoryDefinition(name=FALLBACK_CATEGORY, color="#6B7280", icon="📋"),
]

_BY_NAME: dict[str, CategoryDefinition] = {c.name: c for c in CATEGORIES}


def _norm(text: str | None) -> str:
    return (text or "").lower().strip()


def categorize(description: str | None) -> str:
    """Infer a category name from a transaction description.

    Args:
        description: Free-text description as entered by the user.

    Returns:
        A name from ``CATEGORIES``; the fallback when nothing matches.
    """
    text = _norm(description)
    if not text:
        return FALLBACK_CATEGORY

    for category in CATEGORIES:
        # The fallback is always evaluated last, wherever it is declared.
        if category.name == FALLBACK_CATEGORY:
            continue
        if category.matches(text):
            return category.name

    return FALLBACK_CATEGORY


def get_category(name: str | None) -> CategoryDefinition | None:
    """Look up a category definition by exact name."""
    if name is None:
        return None
    return _BY_NAME.get(name)


def color_of(name: str | None) -> str:
    category = get_category(name) or _BY_NAME[FALLBACK_CATEGORY]
    return category.color


def icon_of(name: str | None) -> str:
    category = get_category(name) or _BY_NAME[FALLBACK_CATEGORY]
    return category.icon


def all_category_names() -> list[str]:
    """All category names in declaration order, fallback included."""
    return [c.name for c in CATEGORIES]
