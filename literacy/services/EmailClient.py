"""Email delivery client backed by the SendGrid v3 mail API."""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class EmailDeliveryError(Exception):
    """Raised when the mail provider rejects or cannot accept a message."""


class EmailClient:
    """
    Sends transactional email through SendGrid.

    Without an API key the client runs in development mode: messages are
    written to the log instead of being sent.
    """

    BASE_URL = "https://api.sendgrid.com/v3"

    def __init__(
        self,
        api_key: str,
        default_sender: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.api_key = api_key
        self.default_sender = default_sender
        self.timeout = timeout
        self._transport = transport

    @property
    def development_mode(self) -> bool:
        return not self.api_key

    def _build_payload(self, to_email: str, subject: str, body_text: str, body_html: str, sender: str) -> dict:
        return {
            "personalizations": [{"to": [{"email": to_email}]}],
            "from": {"email": sender},
            "subject": subject,
            "content": [
                {"type": "text/plain", "value": body_text},
                {"type": "text/html", "value": body_html},
            ],
        }

    async def send_email(
        self,
        to_email: str,
        subject: str,
        body_text: str,
        body_html: str,
        sender: Optional[str] = None
    ) -> dict:
        """
        Send one email.

        Args:
            to_email: Recipient address
            subject: Email subject
            body_text: Plain-text body
            body_html: HTML body
            sender: From address (defaults to the configured sender)

        Returns:
            dict with status information

        Raises:
            EmailDeliveryError: if the provider is unreachable or rejects the message
        """
        sender = sender or self.default_sender

        if self.development_mode:
            logger.info(
                "=== EMAIL (Development) ===\nTo: %s\nSubject: %s\nText: %s\n========================",
                to_email, subject, body_text
            )
            return {"success": True, "status": "logged", "email": to_email}

        payload = self._build_payload(to_email, subject, body_text, body_html, sender)
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(f"{self.BASE_URL}/mail/send", json=payload, headers=headers)
        except httpx.HTTPError as e:
            raise EmailDeliveryError(f"Could not reach mail provider: {e}") from e

        if response.status_code not in (200, 202):
            raise EmailDeliveryError(
                f"Mail provider rejected message ({response.status_code}): {response.text}"
            )

        logger.info(f"Sent email '{subject}' to {to_email}")
        return {"success": True, "status": "sent", "email": to_email}
