"""Transaction schemas shared by the store and its callers.

Field names are snake_case in Python and camelCase when serialized, so the
persisted payload keeps the ``isPaid`` spelling of existing data.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


def month_key(date: str) -> str:
    """Bucket key (YYYY-MM) of an ISO-8601 date string."""
    return date[:7]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TransactionDraft(_CamelModel):
    """A transaction before it has been given an id.

    The store accepts any draft of this shape as-is; amount and description
    checks belong to the caller (see ``services.drafts``).
    """

    model_config = ConfigDict(frozen=True)

    type: TransactionType = Field(..., description="'income' or 'expense'")
    amount: float = Field(..., description="Amount in currency units")
    description: str = Field(..., description="Free-text description")
    date: str = Field(..., description="ISO-8601 timestamp; drives month bucketing")
    category: str | None = Field(None, description="Category name, absent on old records")
    is_paid: bool = Field(
        default=True, description="False marks an expense as outstanding debt"
    )

    @field_validator("is_paid", mode="before")
    @classmethod
    def missing_is_paid_means_paid(cls, v):
        return True if v is None else v

    @property
    def month(self) -> str:
        return month_key(self.date)


class Transaction(TransactionDraft):
    """A stored transaction. Immutable; updates produce a new instance."""

    id: str = Field(..., description="Unique id assigned by the store")

    def to_storage(self) -> dict:
        """Serialize to the persisted JSON object shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class MonthlyStats(_CamelModel):
    """Aggregates for one month bucket. All zero for an empty month."""

    total_income: float = 0.0
    total_expenses: float = 0.0
    remaining_debt: float = 0.0
    balance: float = 0.0
    spending_ratio: float = 0.0
    transaction_count: int = 0
