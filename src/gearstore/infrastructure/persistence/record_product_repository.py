"""RecordStore-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from gearstore.domain.exceptions import EntityNotFoundError
from gearstore.domain.model.product import MAX_IMAGES, OPTIONAL_TEXT_FIELDS, Product
from gearstore.domain.model.value_objects import Money
from gearstore.domain.repository.product_repository import ProductRepository
from gearstore.domain.repository.record_store import Collection, Record, RecordStore

IMAGE_FIELDS = ("image_url",) + tuple(f"image_url_{n}" for n in range(2, MAX_IMAGES + 1))


class RecordProductRepository(ProductRepository):

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        try:
            record = self._store.get(Collection.PRODUCTS, product_id)
        except EntityNotFoundError:
            return None
        return self._to_domain(record)

    def list_all(self) -> list[Product]:
        return [self._to_domain(r) for r in self._store.list(Collection.PRODUCTS)]

    def add(self, product: Product) -> Product:
        fields = {k: v for k, v in self._to_fields(product).items() if v is not None}
        return self._to_domain(self._store.create(Collection.PRODUCTS, fields))

    def save(self, product: Product) -> Product:
        record = self._store.update(Collection.PRODUCTS, product.id, self._to_fields(product))
        return self._to_domain(record)

    def set_inventory(self, product_id: str, inventory: int) -> Product:
        record = self._store.update(Collection.PRODUCTS, product_id, {"inventory": inventory})
        return self._to_domain(record)

    def delete(self, product_id: str) -> None:
        self._store.delete(Collection.PRODUCTS, product_id)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_fields(product: Product) -> dict[str, Any]:
        fields: dict[str, Any] = {
            "name": product.name,
            "description": product.description,
            "price": product.price.to_number(),
            "inventory": product.inventory,
            "category": product.category,
            "quality": product.quality,
        }
        for key in OPTIONAL_TEXT_FIELDS:
            fields[key] = getattr(product, key)
        # Unused image slots are written as None so an edit can clear them.
        for i, key in enumerate(IMAGE_FIELDS):
            fields[key] = product.image_urls[i] if i < len(product.image_urls) else None
        if product.status is not None:
            fields["status"] = product.status
        return fields

    @staticmethod
    def _to_domain(record: Record) -> Product:
        f = record.fields
        return Product(
            id=record.id,
            name=_text(f.get("name")),
            description=_text(f.get("description")),
            price=_money(f.get("price")),
            inventory=_int(f.get("inventory")),
            category=_text(f.get("category")),
            quality=_text(f.get("quality")),
            brand=_text(f.get("brand")) or None,
            size=_text(f.get("size")) or None,
            weight=_text(f.get("weight")) or None,
            color=_text(f.get("color")) or None,
            image_urls=[
                url.strip()
                for url in (f.get(k) for k in IMAGE_FIELDS)
                if isinstance(url, str) and url.strip()
            ],
            status=_text(f.get("status")) or None,
        )


def _text(value: Any) -> str:
    return str(value) if value is not None else ""


def _int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _money(value: Any) -> Money:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Money.zero()
    if not amount.is_finite() or amount < 0:
        return Money.zero()
    return Money(amount)
