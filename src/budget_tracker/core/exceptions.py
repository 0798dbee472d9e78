"""Custom exception classes for the budget tracker.

Each exception carries an error_code that maps to the catalog in errors.py.
"""

from typing import Any

from budget_tracker.core.errors import get_error


class BudgetTrackerError(Exception):
    """Base exception for all budget tracker errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "STORE_001")
        details: Additional context about the error (for logging)
    """

    def __init__(self, error_code: str, details: dict[str, Any] | None = None):
        self.error_code = error_code
        self.details = details or {}
        super().__init__(error_code)

    @property
    def user_message(self) -> str:
        return get_error(self.error_code)["user_message"]

    def __str__(self) -> str:
        return f"{self.error_code}: {get_error(self.error_code)['message']}"


class StorageError(BudgetTrackerError):
    """Raised when the key-value storage backend fails."""

    pass


class StorageReadError(StorageError):
    """Raised when a stored value cannot be read (STORE_003)."""

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("STORE_003", details)


class StorageWriteError(StorageError):
    """Raised when a value cannot be written or removed (STORE_002).

    Common causes:
    - Disk full / quota exceeded
    - Read-only data directory
    - Database unavailable
    """

    def __init__(self, details: dict[str, Any] | None = None):
        super().__init__("STORE_002", details)


class InvalidDraftError(BudgetTrackerError):
    """Raised when a transaction form fails validation.

    This never reaches the store: the caller rejects the draft and shows
    ``user_message`` instead.
    """

    pass
