"""Domain service: Hold Lifecycle.

Creates, extends, cancels, expires and converts holds. This service is the
only writer of ``hold_status`` and ``hold_expires_at``.

The record store has no transactions, so every multi-step flow here is
ordered to be safe to retry:

* ``create_hold`` checks availability before writing. The check and the
  write are not atomic, so two simultaneous requests for the same product
  can still both succeed.
* ``convert_hold_to_sale`` writes the Sale first, then zeroes inventory,
  then completes the hold. A retry after a partial failure finds the
  existing Sale by its hold id instead of creating a second one, and the
  remaining writes are idempotent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta, timezone, tzinfo

from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import (
    EntityNotFoundError,
    HoldNotFoundError,
    NoProductsOnHoldError,
    ProductUnavailableError,
    ValidationError,
)
from gearstore.domain.model.hold import Hold, HoldStatus
from gearstore.domain.model.product import Product
from gearstore.domain.model.sale import Sale
from gearstore.domain.model.value_objects import Customer, Money, PickupRequest
from gearstore.domain.repository.hold_repository import HoldRepository
from gearstore.domain.repository.product_repository import ProductRepository
from gearstore.domain.repository.sale_repository import SaleRepository
from gearstore.domain.service.availability import blocking_hold
from gearstore.domain.service.pickup_schedule import resolve_pickup

logger = logging.getLogger(__name__)

DEFAULT_HOLD_DURATION = timedelta(hours=48)
DEFAULT_EXTENSION = timedelta(hours=24)


@dataclass(frozen=True)
class SaleDetails:
    """Admin-entered payment metadata. ``final_price`` None means "sum
    of the current listed prices"."""

    payment_method: str = ""
    transaction_id: str = ""
    final_price: Money | None = None
    admin_notes: str = ""


@dataclass(frozen=True)
class ConversionResult:
    sale: Sale
    updated_products: list[Product]
    hold: Hold


class HoldLifecycleService:

    def __init__(
        self,
        product_repo: ProductRepository,
        hold_repo: HoldRepository,
        sale_repo: SaleRepository,
        clock: Clock = utc_now,
        hold_duration: timedelta = DEFAULT_HOLD_DURATION,
        extension: timedelta = DEFAULT_EXTENSION,
        display_tz: tzinfo = timezone.utc,
    ) -> None:
        self._product_repo = product_repo
        self._hold_repo = hold_repo
        self._sale_repo = sale_repo
        self._clock = clock
        self._hold_duration = hold_duration
        self._extension = extension
        self._display_tz = display_tz

    # --- Creation -------------------------------------------------------------

    def create_hold(
        self,
        product_ids: list[str],
        customer: Customer,
        pickup: PickupRequest,
        notes: str = "",
    ) -> Hold:
        """Reserve products for a customer.

        Phase 1: load every product and check it is neither sold nor held.
         Fails before any write.
        Phase 2: resolve the pickup slot and expiration, write the hold.
        """
        if not product_ids:
            raise ValidationError("A hold must reserve at least one product")

        products = self.load_products(product_ids)
        now = self._clock()
        holds = self._hold_repo.list_all()

        for product in products:
            if product.is_sold:
                raise ProductUnavailableError(f"'{product.name}' has already been sold")
            if blocking_hold(product.id, holds, now) is not None:
                raise ProductUnavailableError(f"'{product.name}' is already on hold")

        slot = resolve_pickup(pickup, now, self._hold_duration, self._display_tz)
        hold = Hold.create(
            product_ids=[p.id for p in products],
            customer=customer,
            created_at=now,
            expires_at=slot.expires_at,
            pickup_day=slot.pickup_day,
            pickup_custom=slot.pickup_custom,
            notes=notes,
        )
        hold = self._hold_repo.add(hold)
        logger.info(
            "Hold %s created for %s on products %s (expires %s)",
            hold.id, hold.customer_email, ", ".join(hold.product_ids),
            hold.expires_at.isoformat() if hold.expires_at else "never",
        )
        return hold

    # --- Admin transitions ----------------------------------------------------

    def extend_hold(self, hold_id: str, additional: timedelta | None = None) -> Hold:
        hold = self._get_hold(hold_id)
        hold.extend(additional if additional is not None else self._extension)
        hold = self._hold_repo.save_lifecycle(hold)
        logger.info("Hold %s extended to %s", hold.id, hold.expires_at)
        return hold

    def cancel_hold(self, hold_id: str) -> Hold:
        """Cancel a hold. Already cancelled/completed holds are returned as-is."""
        hold = self._get_hold(hold_id)
        if not hold.cancel():
            logger.info("Hold %s already %s; nothing to cancel", hold.id, hold.hold_status)
            return hold
        hold = self._hold_repo.save_lifecycle(hold)
        logger.info("Hold %s cancelled", hold.id)
        return hold

    def convert_hold_to_sale(self, hold_id: str, details: SaleDetails) -> ConversionResult:
        hold = self._get_hold(hold_id)
        if not hold.product_ids:
            raise NoProductsOnHoldError(f"Hold {hold.id} has no products to sell")
        if hold.hold_status == HoldStatus.CANCELLED.value:
            raise ValidationError(f"Cannot complete cancelled hold {hold.id}")

        sale = self._sale_repo.find_by_hold_id(hold.id)
        if sale is not None:
            logger.warning("Sale %s already exists for hold %s; reusing it", sale.id, hold.id)
        else:
            price = details.final_price
            if price is None:
                price = sum((p.price for p in self.load_products(hold.product_ids)), Money.zero())
            sale = self._sale_repo.add(
                Sale.from_hold(
                    hold,
                    sale_date=self._clock(),
                    final_price=price,
                    payment_method=details.payment_method,
                    transaction_id=details.transaction_id,
                    admin_notes=details.admin_notes,
                )
            )
            logger.info("Sale %s recorded for hold %s at %s", sale.id, hold.id, sale.final_price)

        updated = [self._product_repo.set_inventory(pid, 0) for pid in hold.product_ids]

        hold.complete()
        hold = self._hold_repo.save_lifecycle(hold)
        logger.info("Hold %s completed", hold.id)
        return ConversionResult(sale=sale, updated_products=updated, hold=hold)

    def expire_overdue_holds(self) -> list[Hold]:
        """Persist "Expired" on every Active hold whose time has run out."""
        now = self._clock()
        expired: list[Hold] = []
        for hold in self._hold_repo.list_all():
            if hold.mark_expired(now):
                expired.append(self._hold_repo.save_lifecycle(hold))
                logger.info("Hold %s expired at %s", hold.id, hold.expires_at)
        return expired

    def update_hold_details(
        self,
        hold_id: str,
        pickup_day: str | None = None,
        pickup_custom: str | None = None,
        notes: str | None = None,
    ) -> Hold:
        """Edit pickup details and notes; lifecycle fields are untouched."""
        hold = self._get_hold(hold_id)
        if pickup_day is not None:
            hold.pickup_day = pickup_day.strip()
        if pickup_custom is not None:
            hold.pickup_custom = pickup_custom.strip()
        if notes is not None:
            hold.notes = notes.strip()
        return self._hold_repo.save_details(hold)

    # --- Helpers --------------------------------------------------------------

    def load_products(self, product_ids: list[str]) -> list[Product]:
        products: list[Product] = []
        for product_id in dict.fromkeys(product_ids):
            product = self._product_repo.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
            products.append(product)
        return products

    def _get_hold(self, hold_id: str) -> Hold:
        hold = self._hold_repo.get_by_id(hold_id)
        if hold is None:
            raise HoldNotFoundError(f"Hold '{hold_id}' not found")
        return hold
