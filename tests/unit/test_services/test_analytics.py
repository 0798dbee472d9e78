"""Unit tests for cross-month analytics."""

import pytest

from budget_tracker.services.analytics import (
    category_breakdown,
    monthly_series,
    overall_stats,
)


def _seed(store, make_draft):
    store.add_transaction(make_draft(type="income", amount=5000, description="Maaş",
                                     category=None, date="2025-01-01T00:00:00Z"))
    store.add_transaction(make_draft(amount=1200, category="Gıda & Market",
                                     date="2025-01-03T00:00:00Z"))
    store.add_transaction(make_draft(amount=300, category="Ulaşım",
                                     date="2025-02-03T00:00:00Z"))
    store.add_transaction(make_draft(amount=400, category="Gıda & Market",
                                     date="2025-02-04T00:00:00Z"))
    store.add_transaction(make_draft(amount=999, category=None,
                                     date="2025-02-05T00:00:00Z"))


def test_overall_stats(store, make_draft):
    _seed(store, make_draft)

    stats = overall_stats(store)

    assert stats.total_income == 5000
    assert stats.total_expenses == 2899
    assert stats.balance == 5000 - 2899
    assert stats.total_months == 2
    assert stats.total_transactions == 5


def test_overall_stats_empty(store):
    stats = overall_stats(store)
    assert stats.total_months == 0
    assert stats.balance == 0


def test_monthly_series_ascending(store, make_draft):
    _seed(store, make_draft)

    series = monthly_series(store)

    assert [p.month for p in series] == ["2025-01", "2025-02"]
    assert series[0].balance == 3800
    assert series[1].total_expenses == 1699


def test_category_breakdown_sorted_and_decorated(store, make_draft):
    _seed(store, make_draft)

    breakdown = category_breakdown(store.monthly_transactions)

    assert [(c.category, c.amount) for c in breakdown] == [
        ("Gıda & Market", 1600),
        ("Ulaşım", 300),
    ]
    assert breakdown[0].color == "#10B981"
    assert breakdown[1].icon == "🚗"


def test_category_breakdown_ignores_income(store, make_draft):
    store.add_transaction(make_draft(type="income", amount=10, category="Eğlence"))
    assert category_breakdown(store.monthly_transactions) == []


def test_category_breakdown_share_of_all_expenses(store, make_draft):
    store.add_transaction(make_draft(amount=600, category="Gıda & Market"))
    store.add_transaction(make_draft(amount=200, category="Ulaşım"))
    store.add_transaction(make_draft(amount=200, category=None))

    breakdown = category_breakdown(store.monthly_transactions)

    assert [c.share for c in breakdown] == [pytest.approx(60), pytest.approx(20)]


def test_category_breakdown_empty():
    assert category_breakdown({}) == []
