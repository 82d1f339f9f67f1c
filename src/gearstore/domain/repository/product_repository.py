"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. The record-store-backed implementation lives in the
infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from gearstore.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def add(self, product: Product) -> Product:
        """Persist a new product and return it with its assigned ID."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist changes to an existing product."""

    @abstractmethod
    def set_inventory(self, product_id: str, inventory: int) -> Product:
        """Write only the inventory field of a product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product from the catalog."""
