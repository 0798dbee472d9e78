"""Unit tests for transaction schemas and stored-record conversion."""

import pytest
from pydantic import ValidationError

from budget_tracker.schemas.stored import CurrentPayload, CurrentRecord, LegacyRecord
from budget_tracker.schemas.transaction import (
    MonthlyStats,
    Transaction,
    TransactionDraft,
    TransactionType,
    month_key,
)


class TestTransactionDraft:
    """Test suite for TransactionDraft."""

    def test_defaults(self):
        draft = TransactionDraft(type="expense", amount=5, description="su", date="2025-04-01")

        assert draft.type == TransactionType.EXPENSE
        assert draft.is_paid is True
        assert draft.category is None
        assert draft.month == "2025-04"

    def test_accepts_camel_case(self):
        draft = TransactionDraft.model_validate(
            {"type": "income", "amount": 1, "description": "x", "date": "2025-04-01", "isPaid": False}
        )
        assert draft.is_paid is False

    def test_null_is_paid_means_paid(self):
        draft = TransactionDraft.model_validate(
            {"type": "expense", "amount": 1, "description": "x", "date": "2025-04-01", "isPaid": None}
        )
        assert draft.is_paid is True

    def test_rejects_unknown_type(self):
        with pytest.raises(ValidationError):
            TransactionDraft(type="transfer", amount=1, description="x", date="2025-04-01")


class TestTransaction:
    """Test suite for Transaction."""

    def test_to_storage_uses_camel_case_and_drops_none(self):
        transaction = Transaction(
            id="1", type="expense", amount=10, description="x", date="2025-04-01", is_paid=False
        )

        assert transaction.to_storage() == {
            "id": "1",
            "type": "expense",
            "amount": 10.0,
            "description": "x",
            "date": "2025-04-01",
            "isPaid": False,
        }

    def test_frozen(self):
        transaction = Transaction(id="1", type="income", amount=1, description="x", date="2025-04-01")
        with pytest.raises(ValidationError):
            transaction.is_paid = False

    def test_model_copy_update(self):
        transaction = Transaction(id="1", type="expense", amount=1, description="x", date="2025-04-01")
        updated = transaction.model_copy(update={"is_paid": False})

        assert transaction.is_paid is True
        assert updated.is_paid is False
        assert updated.id == "1"


def test_month_key():
    assert month_key("2025-11-30T23:59:59.999Z") == "2025-11"


def test_monthly_stats_defaults_zero():
    stats = MonthlyStats()
    assert stats.total_income == 0
    assert stats.transaction_count == 0
    assert stats.model_dump(by_alias=True)["spendingRatio"] == 0


class TestStoredRecords:
    """Test the legacy / current record conversion."""

    RAW = {"id": "a", "type": "expense", "amount": 3, "description": "x", "date": "2025-01-01"}

    def test_current_record_without_is_paid_needs_backfill(self):
        record = CurrentRecord.model_validate(self.RAW)

        assert record.needs_backfill is True
        assert record.to_transaction().is_paid is True

    def test_current_record_keeps_explicit_false(self):
        record = CurrentRecord.model_validate({**self.RAW, "isPaid": False})

        assert record.needs_backfill is False
        assert record.to_transaction().is_paid is False

    def test_legacy_record_always_paid(self):
        transaction = LegacyRecord.model_validate(self.RAW).to_transaction()

        assert isinstance(transaction, Transaction)
        assert transaction.is_paid is True

    def test_current_payload_shape(self):
        payload = CurrentPayload.model_validate({"2025-01": [self.RAW]})
        assert list(payload.root) == ["2025-01"]

    def test_current_payload_rejects_list(self):
        with pytest.raises(ValidationError):
            CurrentPayload.model_validate([self.RAW])
