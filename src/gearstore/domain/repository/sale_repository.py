"""Abstract repository for Sale records (append-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from gearstore.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    def find_by_hold_id(self, hold_id: str) -> Sale | None:
        """Return the sale created from a hold, or None."""

    @abstractmethod
    def add(self, sale: Sale) -> Sale:
        """Persist a new sale and return it with its assigned ID."""
