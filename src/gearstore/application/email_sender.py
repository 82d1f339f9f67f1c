"""Outbound email port. Infrastructure supplies the concrete sender."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class EmailMessage:
    to: str
    subject: str
    html: str


class EmailSender(ABC):

    @abstractmethod
    def send(self, message: EmailMessage) -> None:
        """Deliver one email or raise NotificationError/ConfigurationError."""
