"""RecordStore-backed implementation of SaleRepository.

Duplicate sales are detected through the `hold_id` field, so the Airtable
Sales table must have a single line text field of that name.
"""

from __future__ import annotations

from decimal import Decimal

from gearstore.domain.clock import utc_now
from gearstore.domain.model.sale import Sale
from gearstore.domain.model.value_objects import Money
from gearstore.domain.repository.record_store import Collection, Record, RecordStore
from gearstore.domain.repository.sale_repository import SaleRepository
from gearstore.domain.service.pickup_schedule import parse_datetime, to_iso


class RecordSaleRepository(SaleRepository):

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    def find_by_hold_id(self, hold_id: str) -> Sale | None:
        # The store has no server-side filter here; sales are few.
        for record in self._store.list(Collection.SALES):
            if record.fields.get("hold_id") == hold_id:
                return self._to_domain(record)
        return None

    def add(self, sale: Sale) -> Sale:
        fields = {
            "Products": list(sale.product_ids),
            "hold_id": sale.hold_id,
            "customer_name": sale.customer_name,
            "customer_email": sale.customer_email,
            "customer_phone": sale.customer_phone,
            "sale_date": to_iso(sale.sale_date),
            "payment_method": sale.payment_method,
            "transaction_id": sale.transaction_id,
            "final_price": sale.final_price.to_number(),
            "admin_notes": sale.admin_notes,
        }
        record = self._store.create(Collection.SALES, fields)
        return sale.with_id(record.id)

    @staticmethod
    def _to_domain(record: Record) -> Sale:
        f = record.fields
        return Sale(
            id=record.id,
            hold_id=f.get("hold_id") or "",
            product_ids=tuple(str(p) for p in f.get("Products") or []),
            customer_name=f.get("customer_name") or "",
            customer_email=f.get("customer_email") or "",
            customer_phone=f.get("customer_phone") or "",
            sale_date=parse_datetime(f.get("sale_date") or record.created_time) or utc_now(),
            final_price=Money(Decimal(str(f.get("final_price") or 0))),
            payment_method=f.get("payment_method") or "",
            transaction_id=f.get("transaction_id") or "",
            admin_notes=f.get("admin_notes") or "",
        )
