"""Sale — the permanent record of a completed hold.

Sales are only ever produced by converting a hold and are never
modified afterwards, hence the frozen dataclass.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from gearstore.domain.model.hold import Hold
from gearstore.domain.model.value_objects import Money


@dataclass(frozen=True)
class Sale:

    id: str
    hold_id: str
    product_ids: tuple[str, ...]
    customer_name: str
    customer_email: str
    customer_phone: str
    sale_date: datetime
    final_price: Money
    payment_method: str = ""
    transaction_id: str = ""
    admin_notes: str = ""

    @staticmethod
    def from_hold(
        hold: Hold,
        sale_date: datetime,
        final_price: Money,
        payment_method: str = "",
        transaction_id: str = "",
        admin_notes: str = "",
    ) -> Sale:
        """Capture the hold's customer and products at conversion time."""
        return Sale(
            id="",
            hold_id=hold.id,
            product_ids=tuple(hold.product_ids),
            customer_name=hold.customer_name,
            customer_email=hold.customer_email,
            customer_phone=hold.customer_phone,
            sale_date=sale_date,
            final_price=final_price,
            payment_method=payment_method.strip(),
            transaction_id=transaction_id.strip(),
            admin_notes=admin_notes.strip(),
        )

    def with_id(self, sale_id: str) -> Sale:
        return replace(self, id=sale_id)
