import json
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).parents[1] / "src"))

from budget_tracker.services.store import TransactionStore
from budget_tracker.storage import InMemoryStorage

FIXED_NOW = datetime(2025, 3, 14, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2025-03-14 so legacy migration lands in 2025-03."""
    return lambda: FIXED_NOW


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def store(storage, fixed_clock):
    """Empty store on in-memory storage."""
    return TransactionStore(storage, clock=fixed_clock)


@pytest.fixture
def make_draft():
    """Build a draft dict with sensible defaults for the store."""

    def _make(**overrides):
        draft = {
            "type": "expense",
            "amount": 100.0,
            "description": "market alışverişi",
            "date": "2025-03-10T09:30:00.000Z",
            "category": "Gıda & Market",
        }
        draft.update(overrides)
        return draft

    return _make


@pytest.fixture
def read_payload(storage):
    """Decode what the store last persisted under the current key."""

    def _read(key: str = "monthlyBudgetData"):
        raw = storage.get(key)
        return None if raw is None else json.loads(raw)

    return _read
