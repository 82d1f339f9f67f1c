"""Domain-level exceptions.

All failures are expressed as subclasses of DomainException so the CLI
and HTTP layers can catch them uniformly and turn them into user-facing
messages or status codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gearstore.application.notification_dispatcher import DispatchReport
    from gearstore.domain.model.hold import Hold


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated, or input was malformed."""


class ProductUnavailableError(ValidationError):
    """A product is sold or already held by another customer."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class HoldNotFoundError(EntityNotFoundError):
    """A referenced hold does not exist."""


class NoExpirationSetError(DomainException):
    """The hold never expires, so there is nothing to extend from."""


class NoProductsOnHoldError(DomainException):
    """The hold references no products and cannot be converted."""


class ConfigurationError(DomainException):
    """Required configuration (credentials, ids) is missing."""


class BackendUnavailableError(DomainException):
    """The record store could not be reached or answered with an error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AuthenticationError(DomainException):
    """Admin credentials or session token were rejected."""


class NotificationError(DomainException):
    """An email could not be delivered.

    When raised after a hold was written, ``hold`` and ``report`` describe
    what exists and which notification legs failed.
    """

    def __init__(
        self,
        message: str,
        hold: Hold | None = None,
        report: DispatchReport | None = None,
    ) -> None:
        super().__init__(message)
        self.hold = hold
        self.report = report
