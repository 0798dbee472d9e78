from .analytics import category_breakdown, monthly_series, overall_stats
from .drafts import TransactionForm, build_draft
from .store import TransactionStore, create_store, generate_id

__all__ = [
    "TransactionForm",
    "TransactionStore",
    "build_draft",
    "category_breakdown",
    "create_store",
    "generate_id",
    "monthly_series",
    "overall_stats",
]
