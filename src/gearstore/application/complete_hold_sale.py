"""Application service: Complete Hold Sale use case.

Converts a hold into a Sale once the admin has been paid out-of-band.
Safe to retry: a second call for the same hold reuses the Sale written
by the first and re-applies the inventory and status updates.
"""

from __future__ import annotations

from datetime import timezone, tzinfo

from gearstore.application.dto import ConversionDTO
from gearstore.application.mapping import hold_to_dto, product_to_dto, sale_to_dto
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import ValidationError
from gearstore.domain.model.value_objects import Money
from gearstore.domain.service.hold_lifecycle_service import (
    HoldLifecycleService,
    SaleDetails,
)


class CompleteHoldSaleHandler:

    def __init__(
        self,
        lifecycle: HoldLifecycleService,
        clock: Clock = utc_now,
        display_tz: tzinfo = timezone.utc,
    ) -> None:
        self._lifecycle = lifecycle
        self._clock = clock
        self._display_tz = display_tz

    def handle(
        self,
        hold_id: str,
        payment_method: str | None = None,
        transaction_id: str | None = None,
        final_price: str | float | int | None = None,
        admin_notes: str | None = None,
    ) -> ConversionDTO:
        if not hold_id:
            raise ValidationError("Hold ID is required")

        price = None
        if final_price is not None and str(final_price).strip() != "":
            try:
                price = Money.of(final_price)
            except ValidationError as exc:
                raise ValidationError(
                    f"Final price must be a non-negative number, got {final_price!r}"
                ) from exc

        details = SaleDetails(
            payment_method=payment_method or "",
            transaction_id=transaction_id or "",
            final_price=price,
            admin_notes=admin_notes or "",
        )
        result = self._lifecycle.convert_hold_to_sale(hold_id, details)

        now = self._clock()
        return ConversionDTO(
            sale=sale_to_dto(result.sale),
            hold=hold_to_dto(result.hold, now, self._display_tz),
            updated_products=[
                product_to_dto(p, [result.hold], now) for p in result.updated_products
            ],
        )
