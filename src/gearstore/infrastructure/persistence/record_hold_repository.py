"""RecordStore-backed implementation of HoldRepository."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from gearstore.domain.exceptions import EntityNotFoundError
from gearstore.domain.model.hold import Hold
from gearstore.domain.repository.hold_repository import HoldRepository
from gearstore.domain.repository.record_store import Collection, Record, RecordStore
from gearstore.domain.service.pickup_schedule import parse_datetime, to_iso


class RecordHoldRepository(HoldRepository):

    def __init__(self, store: RecordStore) -> None:
        self._store = store

    # --- HoldRepository interface ---------------------------------------------

    def get_by_id(self, hold_id: str) -> Hold | None:
        try:
            record = self._store.get(Collection.HOLDS, hold_id)
        except EntityNotFoundError:
            return None
        return self._to_domain(record)

    def list_all(self) -> list[Hold]:
        return [self._to_domain(r) for r in self._store.list(Collection.HOLDS)]

    def add(self, hold: Hold) -> Hold:
        fields = {
            "Products": list(hold.product_ids),
            "customer_name": hold.customer_name,
            "customer_email": hold.customer_email,
            "customer_phone": hold.customer_phone,
            "hold_status": hold.hold_status,
            "hold_created_at": _iso_or_none(hold.created_at),
            "hold_expires_at": _iso_or_none(hold.expires_at),
            "pickup_day": hold.pickup_day,
            "pickup_custom": hold.pickup_custom,
            "notes": hold.notes,
        }
        return self._to_domain(self._store.create(Collection.HOLDS, fields))

    def save_lifecycle(self, hold: Hold) -> Hold:
        record = self._store.update(
            Collection.HOLDS,
            hold.id,
            {
                "hold_status": hold.hold_status,
                "hold_expires_at": _iso_or_none(hold.expires_at),
            },
        )
        return self._to_domain(record)

    def save_details(self, hold: Hold) -> Hold:
        record = self._store.update(
            Collection.HOLDS,
            hold.id,
            {
                "pickup_day": hold.pickup_day,
                "pickup_custom": hold.pickup_custom,
                "notes": hold.notes,
            },
        )
        return self._to_domain(record)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(record: Record) -> Hold:
        f = record.fields
        products = f.get("Products") or []
        return Hold(
            id=record.id,
            product_ids=[str(p) for p in products] if isinstance(products, list) else [str(products)],
            customer_name=f.get("customer_name") or "",
            customer_email=f.get("customer_email") or "",
            customer_phone=f.get("customer_phone") or "",
            hold_status=f.get("hold_status") or "",
            created_at=parse_datetime(f.get("hold_created_at") or record.created_time),
            expires_at=parse_datetime(f.get("hold_expires_at")),
            pickup_day=f.get("pickup_day") or "",
            pickup_custom=f.get("pickup_custom") or "",
            notes=f.get("notes") or "",
        )


def _iso_or_none(value: datetime | None) -> Any:
    return to_iso(value) if value is not None else None
