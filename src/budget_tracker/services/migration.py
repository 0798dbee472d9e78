"""Parsing and migration of persisted budget payloads.

The functions here are pure: they turn a raw stored string into the
month -> transactions mapping and report what had to be migrated. Reading
and writing the storage itself is the store's job.
"""

import json

from budget_tracker.schemas.stored import CurrentPayload, LegacyPayload
from budget_tracker.schemas.transaction import Transaction

MonthlyTransactions = dict[str, list[Transaction]]


def load_current(raw: str) -> tuple[MonthlyTransactions, int]:
    """Parse a month-bucketed payload and backfill missing payment status.

    Records without ``isPaid`` are treated as settled.

    Returns:
        The mapping and the number of records that were backfilled.

    Raises:
        pydantic.ValidationError: If the payload is not valid JSON or does not
            have the month -> list-of-records shape.
    """
    payload = CurrentPayload.model_validate_json(raw)

    monthly: MonthlyTransactions = {}
    backfilled = 0
    for month, records in payload.root.items():
        if not records:
            continue
        backfilled += sum(1 for record in records if record.needs_backfill)
        monthly[month] = [record.to_transaction() for record in records]

    return monthly, backfilled


def load_legacy(raw: str, month: str) -> MonthlyTransactions:
    """Parse a flat pre-bucketing payload into a single month bucket.

    Legacy records carry no payment status and no bucket of their own, so all
    of them are marked paid and filed under ``month``.
    """
    payload = LegacyPayload.model_validate_json(raw)
    transactions = [record.to_transaction() for record in payload.root]
    if not transactions:
        return {}
    return {month: transactions}


def dump_payload(monthly: MonthlyTransactions) -> str:
    """Serialize the whole mapping into the current persisted format."""
    data = {
        month: [transaction.to_storage() for transaction in transactions]
        for month, transactions in monthly.items()
    }
    return json.dumps(data, ensure_ascii=False)
