"""Notification Dispatcher — emails triggered by hold requests and product
questions.

Each email is an independent send. A failure on one leg never stops the
other and is reported per leg, so a caller can retry only what failed.
Nothing here touches hold state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import timezone, tzinfo

from gearstore.application.email_sender import EmailMessage, EmailSender
from gearstore.application.email_templates import (
    admin_hold_alert,
    admin_question_alert,
    customer_hold_confirmation,
    customer_question_confirmation,
)
from gearstore.domain.exceptions import DomainException
from gearstore.domain.model.hold import Hold
from gearstore.domain.model.product import Product
from gearstore.domain.model.value_objects import Customer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DispatchLeg:
    """Outcome of one email send."""

    name: str
    recipient: str
    sent: bool
    error: str | None = None


@dataclass(frozen=True)
class DispatchReport:
    legs: list[DispatchLeg] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(leg.sent for leg in self.legs)

    @property
    def failures(self) -> list[DispatchLeg]:
        return [leg for leg in self.legs if not leg.sent]

    def leg(self, name: str) -> DispatchLeg | None:
        for leg in self.legs:
            if leg.name == name:
                return leg
        return None

    @property
    def admin(self) -> DispatchLeg | None:
        return self.leg("admin")

    @property
    def customer(self) -> DispatchLeg | None:
        return self.leg("customer")

    def describe_failures(self) -> str:
        return "; ".join(
            f"{leg.name} email to {leg.recipient} failed: {leg.error}"
            for leg in self.failures
        )


class HoldNotificationDispatcher:

    def __init__(
        self,
        sender: EmailSender,
        admin_email: str,
        hold_hours: int = 48,
        display_tz: tzinfo = timezone.utc,
    ) -> None:
        self._sender = sender
        self._admin_email = admin_email
        self._hold_hours = hold_hours
        self._display_tz = display_tz

    def notify_hold_created(self, hold: Hold, products: list[Product]) -> DispatchReport:
        """Send the admin alert and the customer confirmation."""
        messages = [
            ("admin", admin_hold_alert(
                hold, products, self._admin_email, self._hold_hours, self._display_tz
            )),
            ("customer", customer_hold_confirmation(
                hold, products, self._hold_hours, self._display_tz
            )),
        ]
        return DispatchReport(legs=[self._send(name, msg) for name, msg in messages])

    def notify_product_question(
        self,
        product: Product,
        customer: Customer,
        question: str,
        notes: str = "",
    ) -> DispatchReport:
        messages = [
            ("admin", admin_question_alert(product, customer, question, notes, self._admin_email)),
            ("customer", customer_question_confirmation(product, customer, question, notes)),
        ]
        return DispatchReport(legs=[self._send(name, msg) for name, msg in messages])

    def _send(self, name: str, message: EmailMessage) -> DispatchLeg:
        try:
            self._sender.send(message)
        except DomainException as exc:
            logger.warning("%s email to %s failed: %s", name, message.to, exc)
            return DispatchLeg(name, message.to, sent=False, error=str(exc) or "Email send failed")
        logger.info("%s email sent to %s", name, message.to)
        return DispatchLeg(name, message.to, sent=True)
