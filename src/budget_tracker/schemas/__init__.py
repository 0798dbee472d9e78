from .stored import CurrentPayload, CurrentRecord, LegacyPayload, LegacyRecord
from .transaction import (
    MonthlyStats,
    Transaction,
    TransactionDraft,
    TransactionType,
    month_key,
)

__all__ = [
    "CurrentPayload",
    "CurrentRecord",
    "LegacyPayload",
    "LegacyRecord",
    "MonthlyStats",
    "Transaction",
    "TransactionDraft",
    "TransactionType",
    "month_key",
]
