"""Schemas for payloads read back from storage.

Two persisted shapes exist:

- current: ``{"YYYY-MM": [record, ...]}`` where records written before
  payment tracking lack ``isPaid``
- legacy: a flat ``[record, ...]`` list from before monthly bucketing

Both are parsed into explicit record types and converted once into the
canonical :class:`Transaction`, so ``is_paid`` is never missing downstream.
"""

from pydantic import ConfigDict, Field, RootModel

from budget_tracker.schemas.transaction import Transaction, TransactionType, _CamelModel


class _RecordBase(_CamelModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    type: TransactionType
    amount: float
    description: str
    date: str
    category: str | None = None


class CurrentRecord(_RecordBase):
    """Record from the month-bucketed payload; ``isPaid`` may be absent."""

    is_paid: bool | None = Field(default=None)

    @property
    def needs_backfill(self) -> bool:
        return self.is_paid is None

    def to_transaction(self) -> Transaction:
        is_paid = True if self.is_paid is None else self.is_paid
        return Transaction(**self.model_dump(exclude={"is_paid"}), is_paid=is_paid)


class LegacyRecord(_RecordBase):
    """Record from the flat pre-bucketing payload. Always settled on migration."""

    def to_transaction(self) -> Transaction:
        return Transaction(**self.model_dump(), is_paid=True)


class CurrentPayload(RootModel[dict[str, list[CurrentRecord]]]):
    pass


class LegacyPayload(RootModel[list[LegacyRecord]]):
    pass
