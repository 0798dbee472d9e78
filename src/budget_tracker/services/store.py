"""Monthly transaction store.

This module owns the month -> transactions mapping:
1. Hydrate once from storage (migrating older payload formats)
2. Apply add / delete / payment-status / recategorize mutations
3. Persist the whole mapping after every mutation
4. Derive per-month statistics on demand

The store is single-threaded. Wrap it in a lock before sharing it across
threads.
"""

import logging
import secrets
import string
import time
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError

from budget_tracker.categorization import categorize
from budget_tracker.config import Settings, get_settings
from budget_tracker.core.exceptions import StorageError, StorageWriteError
from budget_tracker.schemas.transaction import (
    MonthlyStats,
    Transaction,
    TransactionDraft,
    TransactionType,
)
from budget_tracker.services.migration import (
    MonthlyTransactions,
    dump_payload,
    load_current,
    load_legacy,
)
from budget_tracker.storage import KeyValueStorage, get_storage
from budget_tracker.utils.logger import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "monthlyBudgetData"
DEFAULT_LEGACY_KEY = "transactions"

_ID_ALPHABET = string.digits + string.ascii_lowercase
_ID_SUFFIX_LENGTH = 9


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_id() -> str:
    """Millisecond timestamp followed by a random base-36 suffix."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(_ID_SUFFIX_LENGTH))
    return f"{int(time.time() * 1000)}{suffix}"


class TransactionStore:
    """Authoritative in-memory store of transactions bucketed by month.

    Invariants:
    - a month key is present only while its list is non-empty
    - transactions keep insertion order within their month
    - every mutation re-serializes the entire mapping to storage
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        legacy_key: str = DEFAULT_LEGACY_KEY,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """Create the store and hydrate it from storage.

        Args:
            storage: Key-value backend holding the persisted payload
            storage_key: Key of the current month-bucketed payload
            legacy_key: Key of the flat pre-bucketing payload
            clock: Source of "now"; legacy records are filed under its month
        """
        self.storage = storage
        self.storage_key = storage_key
        self.legacy_key = legacy_key
        self._clock = clock
        self._monthly: MonthlyTransactions = {}
        self._hydrate()

    # ------------------------------------------------------------------
    # Hydration / persistence
    # ------------------------------------------------------------------

    def _hydrate(self) -> None:
        extra = {"storage_key": self.storage_key}
        try:
            raw = self.storage.get(self.storage_key)
            if raw is not None:
                self._monthly, backfilled = load_current(raw)
                logger.info(
                    f"Loaded {self._count()} transactions in {len(self._monthly)} months",
                    extra=extra,
                )
                if backfilled:
                    logger.info(
                        f"Backfilled payment status on {backfilled} transactions",
                        extra={**extra, "changed": backfilled},
                    )
                    self._persist()
                return

            legacy_raw = self.storage.get(self.legacy_key)
        except StorageError as exc:
            logger.error(
                f"Could not read stored transactions: {exc.details}",
                extra={**extra, "error_code": exc.error_code},
            )
            self._monthly = {}
            return
        except ValidationError as exc:
            logger.error(
                f"Stored transactions are corrupt, starting empty: {exc.error_count()} errors",
                extra={**extra, "error_code": "STORE_001"},
            )
            self._monthly = {}
            return

        if legacy_raw is None:
            logger.info("No stored transactions found, starting empty", extra=extra)
            return

        self._migrate_legacy(legacy_raw)

    def _migrate_legacy(self, legacy_raw: str) -> None:
        extra = {"storage_key": self.legacy_key}
        month = self._clock().astimezone(timezone.utc).strftime("%Y-%m")
        try:
            self._monthly = load_legacy(legacy_raw, month)
        except ValidationError as exc:
            logger.error(
                f"Legacy transactions are corrupt, starting empty: {exc.error_count()} errors",
                extra={**extra, "error_code": "STORE_001"},
            )
            self._monthly = {}
            return

        logger.info(
            f"Migrating {self._count()} legacy transactions into {month}",
            extra={**extra, "month": month},
        )
        # Keep the legacy copy until the migrated payload is safely written.
        if not self._persist():
            return
        try:
            self.storage.remove(self.legacy_key)
        except StorageError as exc:
            logger.error(
                f"Could not remove legacy transactions: {exc.details}",
                extra={**extra, "error_code": exc.error_code},
            )

    def _persist(self) -> bool:
        """Write the whole mapping. Failures are logged, memory is kept as-is."""
        try:
            self.storage.set(self.storage_key, dump_payload(self._monthly))
        except StorageWriteError as exc:
            logger.error(
                f"Saving transactions failed: {exc.details}",
                extra={"storage_key": self.storage_key, "error_code": exc.error_code},
            )
            return False
        return True

    def _count(self) -> int:
        return sum(len(transactions) for transactions in self._monthly.values())

    def _contains_id(self, transaction_id: str) -> bool:
        return any(
            t.id == transaction_id
            for transactions in self._monthly.values()
            for t in transactions
        )

    def _new_id(self) -> str:
        transaction_id = generate_id()
        while self._contains_id(transaction_id):
            transaction_id = generate_id()
        return transaction_id

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_transaction(self, draft: TransactionDraft | Mapping[str, Any]) -> Transaction:
        """Store a new transaction under the month of its date.

        No business validation happens here; callers check amount and
        description before calling.

        Returns:
            The stored transaction including its generated id.
        """
        if not isinstance(draft, TransactionDraft):
            draft = TransactionDraft.model_validate(draft)

        transaction = Transaction(**draft.model_dump(exclude={"id"}), id=self._new_id())
        month = transaction.month
        self._monthly.setdefault(month, []).append(transaction)
        logger.debug(
            f"Added {transaction.type.value} {transaction.amount}",
            extra={"month": month, "transaction_id": transaction.id},
        )
        self._persist()
        return transaction

    def delete_transaction(self, transaction_id: str) -> bool:
        """Remove the transaction with this id. Unknown ids are a no-op.

        Returns:
            True if something was removed.
        """
        removed = 0
        for month in list(self._monthly):
            kept = [t for t in self._monthly[month] if t.id != transaction_id]
            removed += len(self._monthly[month]) - len(kept)
            if kept:
                self._monthly[month] = kept
            else:
                del self._monthly[month]

        if not removed:
            return False

        logger.debug("Deleted transaction", extra={"transaction_id": transaction_id})
        self._persist()
        return True

    def update_payment_status(self, transaction_id: str, is_paid: bool) -> bool:
        """Set ``is_paid`` on the transaction with this id. Unknown ids are a no-op."""
        found = False
        for transactions in self._monthly.values():
            for index, transaction in enumerate(transactions):
                if transaction.id == transaction_id:
                    transactions[index] = transaction.model_copy(update={"is_paid": is_paid})
                    found = True

        if found:
            self._persist()
        return found

    def recategorize_all(self) -> int:
        """Re-run categorization on every description.

        Only transactions whose category actually changes are replaced, and
        storage is written once at the end if anything changed.

        Returns:
            Number of transactions whose category changed.
        """
        changed = 0
        for transactions in self._monthly.values():
            for index, transaction in enumerate(transactions):
                category = categorize(transaction.description)
                if category != transaction.category:
                    transactions[index] = transaction.model_copy(update={"category": category})
                    changed += 1

        if changed:
            logger.info(f"Recategorized {changed} transactions", extra={"changed": changed})
            self._persist()
        return changed

    def mark_all_as_pending(self) -> int:
        """Mark every expense not already unpaid as unpaid.

        Returns:
            Number of transactions that changed.
        """
        changed = 0
        for transactions in self._monthly.values():
            for index, transaction in enumerate(transactions):
                if transaction.type == TransactionType.EXPENSE and transaction.is_paid is not False:
                    transactions[index] = transaction.model_copy(update={"is_paid": False})
                    changed += 1

        if changed:
            logger.info(f"Marked {changed} expenses as pending", extra={"changed": changed})
            self._persist()
        return changed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_month_data(self, month: str) -> list[Transaction]:
        """Transactions of one month in insertion order; empty if absent.

        The list is a fresh copy and its items are immutable.
        """
        return list(self._monthly.get(month, ()))

    def get_all_months(self) -> list[str]:
        """Month keys present, most recent first."""
        return sorted(self._monthly, reverse=True)

    def get_monthly_stats(self, month: str) -> MonthlyStats:
        transactions = self._monthly.get(month, [])

        total_income = sum(t.amount for t in transactions if t.type == TransactionType.INCOME)
        expenses = [t for t in transactions if t.type == TransactionType.EXPENSE]
        total_expenses = sum(t.amount for t in expenses)
        remaining_debt = sum(t.amount for t in expenses if t.is_paid is False)

        spending_ratio = total_expenses * 100 / total_income if total_income > 0 else 0

        return MonthlyStats(
            total_income=total_income,
            total_expenses=total_expenses,
            remaining_debt=remaining_debt,
            balance=total_income - total_expenses,
            spending_ratio=spending_ratio,
            transaction_count=len(transactions),
        )

    @property
    def monthly_transactions(self) -> MonthlyTransactions:
        """Read-only snapshot of the whole mapping."""
        return {month: list(transactions) for month, transactions in self._monthly.items()}

    def __len__(self) -> int:
        return self._count()

    def __repr__(self) -> str:
        return f"<TransactionStore months={len(self._monthly)} transactions={self._count()}>"


def create_store(
    settings: Settings | None = None, *, configure_logging: bool = False
) -> TransactionStore:
    """Build a store on the storage backend selected by settings.

    With ``configure_logging`` the root logger is set up from the same
    settings first, so hydration messages are visible.
    """
    settings = settings or get_settings()
    if configure_logging:
        setup_logging(settings.log_level, settings.log_file, json_format=settings.log_json)
    return TransactionStore(
        get_storage(settings),
        storage_key=settings.storage_key,
        legacy_key=settings.legacy_storage_key,
    )
