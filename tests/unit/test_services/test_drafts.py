"""Unit tests for form validation and draft building."""

from datetime import datetime, timedelta, timezone

import pytest

from budget_tracker.core.exceptions import InvalidDraftError
from budget_tracker.schemas.transaction import TransactionType
from budget_tracker.services.drafts import build_draft

NOW = datetime(2025, 6, 1, 9, 15, tzinfo=timezone.utc)


class TestBuildDraft:
    """Test suite for build_draft."""

    def test_builds_categorized_draft(self):
        draft = build_draft("expense", "1200", "  market  ", now=NOW)

        assert draft.type == TransactionType.EXPENSE
        assert draft.amount == 1200.0
        assert draft.description == "market"
        assert draft.category == "Gıda & Market"
        assert draft.date == "2025-06-01T09:15:00+00:00"
        assert draft.month == "2025-06"
        assert draft.is_paid is True

    def test_income_with_numeric_amount(self):
        draft = build_draft(TransactionType.INCOME, 5000, "Maaş", now=NOW)

        assert draft.type == TransactionType.INCOME
        assert draft.category == "Diğer"

    def test_unpaid_expense(self):
        draft = build_draft("expense", 80, "doktor", is_paid=False, now=NOW)
        assert draft.is_paid is False

    def test_timestamp_converted_to_utc(self):
        istanbul = timezone(timedelta(hours=3))
        draft = build_draft("expense", 10, "market", now=datetime(2025, 4, 1, 1, 0, tzinfo=istanbul))

        assert draft.date == "2025-03-31T22:00:00+00:00"
        assert draft.month == "2025-03"

    def test_default_timestamp_is_now(self):
        draft = build_draft("expense", 1, "bakkal")
        assert draft.date.startswith(str(datetime.now(timezone.utc).year))

    @pytest.mark.parametrize("amount", [None, "", "   "])
    def test_missing_amount(self, amount):
        with pytest.raises(InvalidDraftError) as exc_info:
            build_draft("expense", amount, "market")
        assert exc_info.value.error_code == "VAL_001"

    @pytest.mark.parametrize("description", [None, "", "   "])
    def test_missing_description(self, description):
        with pytest.raises(InvalidDraftError) as exc_info:
            build_draft("expense", 10, description)
        assert exc_info.value.error_code == "VAL_001"
        assert exc_info.value.user_message == "Lütfen tüm alanları doldurun"

    @pytest.mark.parametrize("amount", [0, -5, "abc", "-1"])
    def test_invalid_amount(self, amount):
        with pytest.raises(InvalidDraftError) as exc_info:
            build_draft("expense", amount, "market")
        assert exc_info.value.error_code == "VAL_002"
        assert exc_info.value.user_message == "Lütfen geçerli bir tutar girin"

    def test_unknown_type(self):
        with pytest.raises(InvalidDraftError) as exc_info:
            build_draft("transfer", 10, "market")
        assert exc_info.value.error_code == "VAL_003"
        assert exc_info.value.user_message == "Lütfen geçerli bir işlem türü seçin"

    def test_draft_goes_into_store(self, store):
        draft = build_draft("expense", "49.90", "Migros", now=datetime(2025, 3, 5, tzinfo=timezone.utc))

        added = store.add_transaction(draft)

        assert store.get_month_data("2025-03") == [added]
        assert added.category == "Gıda & Market"
