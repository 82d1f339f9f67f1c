"""Admin session tokens.

A single admin account is configured through ADMIN_EMAIL and
ADMIN_PASSWORD. A successful login issues an HS256 JWT carried in the
``admin_token`` cookie or an ``Authorization: Bearer`` header.
"""

from __future__ import annotations

import hmac
import logging
from datetime import timedelta
from typing import Any

import jwt

from gearstore.domain.clock import Clock, utc_now
from gearstore.domain.exceptions import AuthenticationError, ConfigurationError, ValidationError

logger = logging.getLogger(__name__)

COOKIE_NAME = "admin_token"
ALGORITHM = "HS256"
ADMIN_ROLE = "admin"


class AdminAuth:

    def __init__(
        self,
        admin_email: str,
        admin_password: str,
        secret: str,
        expiry_hours: int = 24,
        clock: Clock = utc_now,
    ) -> None:
        if not (admin_email and admin_password and secret):
            raise ConfigurationError(
                "Missing admin auth configuration: ADMIN_EMAIL, ADMIN_PASSWORD and JWT_SECRET are required"
            )
        self._admin_email = admin_email.strip().lower()
        self._admin_password = admin_password
        self._secret = secret
        self.expiry = timedelta(hours=expiry_hours)
        self._clock = clock

    def login(self, email: str | None, password: str | None) -> str:
        """Check the credentials and return a signed token."""
        if not email or not password:
            raise ValidationError("Email and password are required")
        email = email.strip().lower()
        password_ok = hmac.compare_digest(password.encode(), self._admin_password.encode())
        if email != self._admin_email or not password_ok:
            logger.warning("Rejected admin login for %s", email)
            raise AuthenticationError("Invalid email or password")

        now = self._clock()
        payload = {
            "email": email,
            "role": ADMIN_ROLE,
            "iat": now,
            "exp": now + self.expiry,
        }
        logger.info("Admin %s logged in", email)
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def verify(self, token: str | None) -> dict[str, Any]:
        """Decode ``token``; raise AuthenticationError unless it is a live admin token."""
        if not token:
            raise AuthenticationError("Authentication required")
        try:
            payload = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("Session expired") from exc
        except jwt.InvalidTokenError as exc:
            raise AuthenticationError("Invalid session token") from exc

        if payload.get("role") != ADMIN_ROLE or not isinstance(payload.get("email"), str):
            raise AuthenticationError("Invalid session token")
        return payload
