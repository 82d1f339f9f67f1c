"""Application service: Create Hold use case (storefront purchase request).

Steps:
1. Validate the submitted form (before any write).
2. Let the lifecycle service check availability and write the hold.
3. Email the admin and the customer.

The hold is not rolled back when an email fails. Instead a
NotificationError carrying the stored hold and the per-leg report is
raised, so the caller can tell the customer the item is held and retry
or notify by hand.
"""

from __future__ import annotations

from datetime import timezone, tzinfo

from gearstore.application.dto import HoldDTO, PurchaseRequestSpec
from gearstore.application.mapping import hold_to_dto
from gearstore.application.notification_dispatcher import HoldNotificationDispatcher
from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import NotificationError, ValidationError
from gearstore.domain.model.value_objects import Customer, PickupRequest
from gearstore.domain.service.hold_lifecycle_service import HoldLifecycleService

MAX_NOTES_LENGTH = 2000


class CreateHoldHandler:

    def __init__(
        self,
        lifecycle: HoldLifecycleService,
        dispatcher: HoldNotificationDispatcher,
        clock: Clock = utc_now,
        display_tz: tzinfo = timezone.utc,
    ) -> None:
        self._lifecycle = lifecycle
        self._dispatcher = dispatcher
        self._clock = clock
        self._display_tz = display_tz

    def handle(self, spec: PurchaseRequestSpec) -> HoldDTO:
        product_ids = [pid.strip() for pid in spec.product_ids if pid and pid.strip()]
        if not product_ids:
            raise ValidationError("Missing required fields: product")
        customer = Customer.create(spec.name, spec.email, spec.phone)
        pickup = PickupRequest.create(spec.pickup_day, spec.other_pickup)
        notes = (spec.notes or "").strip()
        if len(notes) > MAX_NOTES_LENGTH:
            raise ValidationError(f"Notes must be at most {MAX_NOTES_LENGTH} characters")

        hold = self._lifecycle.create_hold(product_ids, customer, pickup, notes)
        products = self._lifecycle.load_products(hold.product_ids)

        report = self._dispatcher.notify_hold_created(hold, products)
        if not report.ok:
            raise NotificationError(
                f"Hold {hold.id} was created but notification failed: "
                f"{report.describe_failures()}",
                hold=hold,
                report=report,
            )
        return hold_to_dto(hold, self._clock(), self._display_tz)
