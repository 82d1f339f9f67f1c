"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from gearstore.domain.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_SEPARATORS_RE = re.compile(r"[\s\-().]")
MIN_PHONE_DIGITS = 10
MIN_NAME_LENGTH = 2


@dataclass(frozen=True)
class Money:
    """Monetary amount in dollars.

    Uses Decimal to avoid floating-point rounding errors in prices and
    sale totals.
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        return Money(self.amount + other.amount)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def to_number(self) -> int | float:
        """Numeric form for the record store (whole dollars stay ints)."""
        if self.amount == self.amount.to_integral_value():
            return int(self.amount)
        return float(self.amount)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        if isinstance(amount, bool):
            raise ValidationError(f"Invalid money amount: {amount!r}")
        try:
            return Money(Decimal(str(amount).strip()))
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid money amount: {amount!r}") from exc


@dataclass(frozen=True)
class Customer:
    """Contact details of the person requesting a pickup."""

    name: str
    email: str
    phone: str

    @staticmethod
    def create(name: str | None, email: str | None, phone: str | None) -> Customer:
        """Clean and validate raw form input."""
        name = (name or "").strip()
        email = (email or "").strip().lower()
        phone = (phone or "").strip()

        missing = [
            label
            for label, value in (("name", name), ("email", email), ("phone", phone))
            if not value
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}")
        if len(name) < MIN_NAME_LENGTH:
            raise ValidationError(
                f"Name must be at least {MIN_NAME_LENGTH} characters long"
            )
        if not _EMAIL_RE.match(email):
            raise ValidationError(f"Invalid email format: {email!r}")
        if len(_PHONE_SEPARATORS_RE.sub("", phone)) < MIN_PHONE_DIGITS:
            raise ValidationError(f"Invalid phone number: {phone!r}")
        return Customer(name=name, email=email, phone=phone)


class PickupOption(Enum):
    TODAY = "Today"
    TOMORROW = "Tomorrow"
    OTHER = "Other"


@dataclass(frozen=True)
class PickupRequest:
    """The customer's requested collection slot.

    ``other_text`` is only meaningful for ``PickupOption.OTHER`` and may be
    a date/time or free text such as "Saturday 2pm".
    """

    option: PickupOption
    other_text: str = ""

    @staticmethod
    def create(option: str | None, other_text: str | None = None) -> PickupRequest:
        raw = (option or "").strip()
        try:
            parsed = PickupOption(raw)
        except ValueError as exc:
            valid = ", ".join(o.value for o in PickupOption)
            raise ValidationError(
                f"Invalid pickup day {raw!r} (expected one of: {valid})"
            ) from exc

        text = (other_text or "").strip()
        if parsed is PickupOption.OTHER and not text:
            raise ValidationError("Please describe your preferred pickup time")
        if parsed is not PickupOption.OTHER:
            text = ""
        return PickupRequest(option=parsed, other_text=text)
