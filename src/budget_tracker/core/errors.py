"""Error codes and user-friendly messages.

This module defines the error catalog for the budget tracker.
Each error has:
- code: Unique identifier
- message: Technical description (for logs)
- user_message: User-friendly explanation
- suggestion: Actionable guidance for the user
- retry_allowed: Whether the error is retryable
"""

from dataclasses import dataclass


@dataclass
class ErrorDefinition:
    """Definition of a single error type."""

    code: str
    message: str
    user_message: str
    suggestion: str
    retry_allowed: bool


ERROR_CATALOG: dict[str, dict] = {
    "STORE_001": {
        "code": "STORE_001",
        "message": "Persisted budget payload could not be parsed",
        "user_message": "Your saved data could not be read and was reset.",
        "suggestion": "Previously saved transactions may need to be entered again.",
        "retry_allowed": False,
    },
    "STORE_002": {
        "code": "STORE_002",
        "message": "Writing budget payload to storage failed",
        "user_message": "Your latest change could not be saved.",
        "suggestion": "Free up storage space; the change is kept until the app closes.",
        "retry_allowed": True,
    },
    "STORE_003": {
        "code": "STORE_003",
        "message": "Storage backend unavailable while reading",
        "user_message": "Your saved data is currently unavailable.",
        "suggestion": "Check that the data directory or database is reachable.",
        "retry_allowed": True,
    },
    "VAL_001": {
        "code": "VAL_001",
        "message": "Transaction draft is missing a required field",
        "user_message": "Lütfen tüm alanları doldurun",
        "suggestion": "Enter both an amount and a description.",
        "retry_allowed": True,
    },
    "VAL_002": {
        "code": "VAL_002",
        "message": "Transaction amount is not a positive number",
        "user_message": "Lütfen geçerli bir tutar girin",
        "suggestion": "Enter an amount greater than zero.",
        "retry_allowed": True,
    },
    "VAL_003": {
        "code": "VAL_003",
        "message": "Transaction type is not income or expense",
        "user_message": "Lütfen geçerli bir işlem türü seçin",
        "suggestion": "Choose either income or expense.",
        "retry_allowed": True,
    },
}


def get_error(error_code: str) -> dict:
    """Get error definition by code.

    Args:
        error_code: Error code from the catalog

    Returns:
        Dict with error details; a generic entry for unknown codes
    """
    if error_code not in ERROR_CATALOG:
        return {
            "code": "UNKNOWN",
            "message": f"Unknown error code: {error_code}",
            "user_message": "An unexpected error occurred.",
            "suggestion": "Please try again.",
            "retry_allowed": True,
        }
    return ERROR_CATALOG[error_code]


def get_definition(error_code: str) -> ErrorDefinition:
    return ErrorDefinition(**get_error(error_code))


def get_user_message(error_code: str) -> str:
    """Get user-friendly message for an error code."""
    return get_error(error_code)["user_message"]


def get_suggestion(error_code: str) -> str:
    """Get actionable suggestion for an error code."""
    return get_error(error_code)["suggestion"]


def is_retryable(error_code: str) -> bool:
    """Check if an error is retryable."""
    return get_error(error_code)["retry_allowed"]
