"""Brevo transactional email client.

Wraps the single Brevo endpoint used by this service behind the
`TransactionalEmailSender` protocol so handlers can be tested with a fake.
"""

from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from aptskola_mailer.schemas.email import TransactionalEmail
from aptskola_mailer.utils.logging import get_logger

logger = get_logger(__name__)

BREVO_API_URL = "https://api.brevo.com/v3/smtp/email"


@dataclass
class ProviderResponse:
    """Status code and parsed JSON body returned by the provider."""

    status_code: int
    body: Any

    @property
    def ok(self) -> bool:
        """True for any 2xx status."""
        return 200 <= self.status_code < 300


class TransactionalEmailSender(Protocol):
    """Anything that can submit a transactional email."""

    async def send(self, message: TransactionalEmail) -> ProviderResponse: ...


class BrevoClient:
    """Client for Brevo's transactional email API."""

    def __init__(
        self,
        api_key: str,
        api_url: str = BREVO_API_URL,
        timeout: float = 30.0,
    ):
        """Initialize client with API key.

        Args:
            api_key: Brevo API key sent in the api-key header
            api_url: Transactional email endpoint
            timeout: Per-request timeout in seconds
        """
        if not api_key:
            logger.warning("Brevo API key is not configured")
        self.api_url = api_url
        self.timeout = timeout
        self.headers = {
            "accept": "application/json",
            "content-type": "application/json",
            "api-key": api_key,
        }

    async def send(self, message: TransactionalEmail) -> ProviderResponse:
        """Submit a message to Brevo.

        The body is only parsed for rejected messages; accepted ones
        report a body of None.

        Args:
            message: The email to send or schedule

        Returns:
            ProviderResponse with the HTTP status and, on error, the parsed JSON body

        Raises:
            httpx.HTTPError: On network failure
            ValueError: If an error body is empty or not valid JSON
        """
        async with httpx.AsyncClient() as client:
            response = await client.post(
                self.api_url,
                headers=self.headers,
                json=message.to_payload(),
                timeout=self.timeout,
            )

            result = ProviderResponse(status_code=response.status_code, body=None)
            if not result.ok:
                result.body = response.json()
            return result
