"""Cross-month aggregations for the analytics view.

Everything here is derived from the store's public queries; nothing is
cached or persisted.
"""

from collections.abc import Mapping, Sequence

from pydantic import BaseModel, Field

from budget_tracker.categorization import color_of, icon_of
from budget_tracker.schemas.transaction import Transaction, TransactionType
from budget_tracker.services.store import TransactionStore


class OverallStats(BaseModel):
    total_income: float = 0.0
    total_expenses: float = 0.0
    balance: float = 0.0
    total_months: int = 0
    total_transactions: int = 0


class MonthlySeriesPoint(BaseModel):
    month: str
    total_income: float
    total_expenses: float
    balance: float


class CategoryTotal(BaseModel):
    category: str
    amount: float
    share: float = Field(0.0, description="Percent of all expenses")
    color: str
    icon: str


def overall_stats(store: TransactionStore) -> OverallStats:
    """Sum the monthly statistics of every month in the store."""
    months = store.get_all_months()
    total_income = 0.0
    total_expenses = 0.0
    total_transactions = 0
    for month in months:
        stats = store.get_monthly_stats(month)
        total_income += stats.total_income
        total_expenses += stats.total_expenses
        total_transactions += stats.transaction_count

    return OverallStats(
        total_income=total_income,
        total_expenses=total_expenses,
        balance=total_income - total_expenses,
        total_months=len(months),
        total_transactions=total_transactions,
    )


def monthly_series(store: TransactionStore) -> list[MonthlySeriesPoint]:
    """Income, expenses and balance per month, oldest first (chart order)."""
    points = []
    for month in sorted(store.get_all_months()):
        stats = store.get_monthly_stats(month)
        points.append(
            MonthlySeriesPoint(
                month=month,
                total_income=stats.total_income,
                total_expenses=stats.total_expenses,
                balance=stats.balance,
            )
        )
    return points


def category_breakdown(
    monthly: Mapping[str, Sequence[Transaction]],
) -> list[CategoryTotal]:
    """Expense totals per category across all months, largest first.

    Transactions without a category (records older than categorization) are
    left out rather than counted under the fallback, but still count towards
    the total each ``share`` is a percentage of.
    """
    totals: dict[str, float] = {}
    total_expenses = 0.0
    for transactions in monthly.values():
        for transaction in transactions:
            if transaction.type != TransactionType.EXPENSE:
                continue
            total_expenses += transaction.amount
            if transaction.category:
                totals[transaction.category] = (
                    totals.get(transaction.category, 0.0) + transaction.amount
                )

    # Stable sort keeps first-seen order between equal totals.
    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryTotal(
            category=name,
            amount=amount,
            share=amount * 100 / total_expenses if total_expenses > 0 else 0.0,
            color=color_of(name),
            icon=icon_of(name),
        )
        for name, amount in ordered
    ]
