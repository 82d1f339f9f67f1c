"""Abstract record store — generic CRUD over the store's three collections.

The backend (Airtable in production) offers no transactions. Flows built
on top of this interface must stay safe when they stop part-way through.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Collection(Enum):
    PRODUCTS = "products"
    HOLDS = "holds"
    SALES = "sales"


@dataclass(frozen=True)
class Record:
    """A stored row: opaque id plus a flat mapping of field values."""

    id: str
    fields: dict[str, Any] = field(default_factory=dict)
    created_time: str | None = None


class RecordStore(ABC):
    """Every method may raise BackendUnavailableError; lookups by id may
    raise EntityNotFoundError."""

    @abstractmethod
    def list(self, collection: Collection) -> list[Record]:
        """Return every record in the collection."""

    @abstractmethod
    def get(self, collection: Collection, record_id: str) -> Record:
        """Return one record or raise EntityNotFoundError."""

    @abstractmethod
    def create(self, collection: Collection, fields: dict[str, Any]) -> Record:
        """Insert a record; the store assigns its id."""

    @abstractmethod
    def update(
        self, collection: Collection, record_id: str, fields: dict[str, Any]
    ) -> Record:
        """Overwrite only the given fields and return the full record."""

    @abstractmethod
    def delete(self, collection: Collection, record_id: str) -> None:
        """Remove a record or raise EntityNotFoundError."""
