"""Resend implementation of EmailSender (``POST /emails``)."""

from __future__ import annotations

import logging

import httpx

from gearstore.application.email_sender import EmailMessage, EmailSender
from gearstore.domain.exceptions import ConfigurationError, NotificationError

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.resend.com"


class ResendEmailSender(EmailSender):

    def __init__(
        self,
        api_key: str | None,
        from_email: str | None,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        client: httpx.Client | None = None,
    ) -> None:
        if not api_key or not from_email:
            raise ConfigurationError("Missing email configuration")
        self._from_email = from_email
        self._url = f"{api_url.rstrip('/')}/emails"
        self._client = client or httpx.Client(timeout=timeout)
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def send(self, message: EmailMessage) -> None:
        payload = {
            "from": self._from_email,
            "to": message.to,
            "subject": message.subject,
            "html": message.html,
        }
        try:
            response = self._client.post(self._url, json=payload, headers=self._headers)
        except httpx.HTTPError as exc:
            raise NotificationError(
                f"Email request failed: {str(exc) or type(exc).__name__}"
            ) from exc

        if response.is_error:
            raise NotificationError(response.text or f"Email send failed: {response.status_code}")
        logger.debug("Resend accepted email to %s: %s", message.to, response.text)
