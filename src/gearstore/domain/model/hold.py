"""Hold aggregate — a time-bounded reservation of one or more products.

State machine::

    Active ──cancel()──► Cancelled      (terminal)
       │
       ├──complete()───► Completed      (terminal)
       │
       └──(clock passes expires_at)──► expired   (derived, not stored)

An expired hold keeps its stored "Active" status until the sweep writes
"Expired"; either way it no longer blocks availability and may be
re-extended by an admin.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from gearstore.domain.exceptions import NoExpirationSetError, ValidationError
from gearstore.domain.model.value_objects import Customer


class HoldStatus(Enum):
    ACTIVE = "Active"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"
    EXPIRED = "Expired"


TERMINAL_STATUSES = (HoldStatus.CANCELLED.value, HoldStatus.COMPLETED.value)

# Expiration urgency thresholds shown in the admin hold list.
CRITICAL_HOURS = 2
WARNING_HOURS = 6


@dataclass
class Hold:
    """Aggregate root for reservations.

    ``hold_status`` keeps the raw stored string. Status comparisons are
    case-sensitive: only the exact string "Active" blocks a product.
    """

    id: str
    product_ids: list[str]
    customer_name: str
    customer_email: str
    customer_phone: str
    hold_status: str = HoldStatus.ACTIVE.value
    created_at: datetime | None = None
    expires_at: datetime | None = None
    pickup_day: str = ""
    pickup_custom: str = ""
    notes: str = ""

    # --- Factory (used for NEW holds only) ------------------------------------

    @staticmethod
    def create(
        product_ids: list[str],
        customer: Customer,
        created_at: datetime,
        expires_at: datetime | None,
        pickup_day: str,
        pickup_custom: str = "",
        notes: str = "",
    ) -> Hold:
        """Create a new Active hold. The record store assigns the id."""
        if not product_ids:
            raise ValidationError("A hold must reserve at least one product")
        return Hold(
            id="",
            product_ids=list(dict.fromkeys(product_ids)),
            customer_name=customer.name,
            customer_email=customer.email,
            customer_phone=customer.phone,
            hold_status=HoldStatus.ACTIVE.value,
            created_at=created_at,
            expires_at=expires_at,
            pickup_day=pickup_day,
            pickup_custom=pickup_custom,
            notes=notes.strip(),
        )

    # --- Queries --------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        return self.hold_status in TERMINAL_STATUSES

    def is_expired(self, now: datetime) -> bool:
        """True once the clock has reached ``expires_at``.

        A hold without an expiration never expires.
        """
        return self.expires_at is not None and self.expires_at <= now

    def is_blocking(self, now: datetime) -> bool:
        """True while this hold reserves its products."""
        return self.hold_status == HoldStatus.ACTIVE.value and not self.is_expired(now)

    def covers(self, product_id: str) -> bool:
        return product_id in self.product_ids

    def hours_remaining(self, now: datetime) -> float | None:
        if self.expires_at is None:
            return None
        return (self.expires_at - now).total_seconds() / 3600

    def urgency(self, now: datetime) -> str:
        """Classify time left: none, expired, critical, warning or good."""
        hours = self.hours_remaining(now)
        if hours is None:
            return "none"
        if hours <= 0:
            return "expired"
        if hours < CRITICAL_HOURS:
            return "critical"
        if hours < WARNING_HOURS:
            return "warning"
        return "good"

    # --- State transitions ----------------------------------------------------

    def extend(self, additional: timedelta) -> None:
        """Push the expiration back by ``additional``.

        The duration is added to the stored expiration, not to the current
        time, so repeated extensions compound on the original schedule.
        """
        if additional <= timedelta(0):
            raise ValidationError("Extension must be a positive duration")
        if self.is_terminal:
            raise ValidationError(
                f"Cannot extend hold {self.id}: status is {self.hold_status}"
            )
        if self.expires_at is None:
            raise NoExpirationSetError(
                f"Hold {self.id} has no expiration time to extend"
            )
        try:
            self.expires_at = self.expires_at + additional
        except OverflowError as exc:
            raise ValidationError(
                f"Cannot extend hold {self.id}: new expiration is out of range"
            ) from exc
        if self.hold_status == HoldStatus.EXPIRED.value:
            self.hold_status = HoldStatus.ACTIVE.value

    def cancel(self) -> bool:
        """Transition to Cancelled. Returns False if already terminal."""
        if self.is_terminal:
            return False
        self.hold_status = HoldStatus.CANCELLED.value
        return True

    def complete(self) -> None:
        if self.hold_status == HoldStatus.CANCELLED.value:
            raise ValidationError(f"Cannot complete cancelled hold {self.id}")
        self.hold_status = HoldStatus.COMPLETED.value

    def mark_expired(self, now: datetime) -> bool:
        """Persistable sweep transition; only overdue Active holds move."""
        if self.hold_status != HoldStatus.ACTIVE.value or not self.is_expired(now):
            return False
        self.hold_status = HoldStatus.EXPIRED.value
        return True

