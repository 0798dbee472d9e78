"""Validation of user-entered transactions before they reach the store.

The store trusts its callers. This is the check the entry form runs: both
fields filled in, the amount a positive number, the description trimmed and
categorized.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ValidationError, field_validator

from budget_tracker.categorization import categorize
from budget_tracker.core.exceptions import InvalidDraftError
from budget_tracker.schemas.transaction import TransactionDraft, TransactionType


class TransactionForm(BaseModel):
    """Raw form input. ``amount`` may arrive as text."""

    type: TransactionType = TransactionType.EXPENSE
    amount: float
    description: str
    is_paid: bool = True

    @field_validator("description")
    @classmethod
    def description_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Description cannot be empty")
        return v.strip()

    @field_validator("amount")
    @classmethod
    def amount_positive(cls, v: float) -> float:
        if not v > 0:
            raise ValueError("Amount must be greater than zero")
        return v


def _error_code(exc: ValidationError) -> str:
    for error in exc.errors():
        field = error["loc"][0] if error["loc"] else None
        if field == "type":
            return "VAL_003"
        if field == "description" or error["type"] == "missing":
            return "VAL_001"
    return "VAL_002"


def build_draft(
    type: TransactionType | str,
    amount: float | str | None,
    description: str | None,
    *,
    is_paid: bool = True,
    now: datetime | None = None,
) -> TransactionDraft:
    """Validate form input and turn it into a draft ready for the store.

    Raises:
        InvalidDraftError: ``VAL_001`` when amount or description is missing,
            ``VAL_002`` when the amount is not a positive number,
            ``VAL_003`` when the type is neither income nor expense.
    """
    if amount is None or (isinstance(amount, str) and not amount.strip()):
        raise InvalidDraftError("VAL_001", {"field": "amount"})

    try:
        form = TransactionForm(
            type=type, amount=amount, description=description or "", is_paid=is_paid
        )
    except ValidationError as exc:
        raise InvalidDraftError(_error_code(exc), {"errors": exc.errors()}) from exc

    stamp = (now or datetime.now(timezone.utc)).astimezone(timezone.utc).isoformat()
    return TransactionDraft(
        type=form.type,
        amount=form.amount,
        description=form.description,
        date=stamp,
        category=categorize(form.description),
        is_paid=form.is_paid,
    )
