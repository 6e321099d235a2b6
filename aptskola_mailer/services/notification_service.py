"""Notification Service for the admissions toolkit emails.

Orchestrates the send flow:
- Receipt: PDF attachment, sent immediately, must succeed
- Follow-up: feedback request scheduled with Brevo, best-effort
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

from result import Err, Ok, Result

from aptskola_mailer.config import Settings
from aptskola_mailer.services.brevo_client import TransactionalEmailSender
from aptskola_mailer.services.email_templates import (
    build_followup_email,
    build_receipt_email,
    scheduled_at,
    strip_data_uri_prefix,
)
from aptskola_mailer.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class NotificationOutcome:
    """Result of a notification run whose receipt was accepted."""

    followup_scheduled: bool


@dataclass
class ProviderRejection:
    """Brevo refused the receipt email."""

    status_code: int
    body: Any


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class NotificationService:
    """Service for sending the toolkit receipt and scheduling the follow-up."""

    def __init__(
        self,
        sender: TransactionalEmailSender,
        settings: Settings,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.sender = sender
        self.settings = settings
        self.clock = clock

    async def send_report(
        self,
        user_email: str,
        user_name: str | None,
        pdf_base64: str,
    ) -> Result[NotificationOutcome, ProviderRejection]:
        """Send the PDF receipt, then schedule the follow-up.

        Exceptions raised while sending the receipt propagate to the caller.
        Nothing raised by the follow-up does.

        Args:
            user_email: Recipient address
            user_name: Recipient display name, defaulted when empty
            pdf_base64: PDF content, optionally prefixed with a data URI scheme

        Returns:
            Result containing NotificationOutcome or ProviderRejection
        """
        recipient_name = user_name or self.settings.default_recipient_name

        # 1. Receipt with the PDF attached
        receipt = build_receipt_email(
            self.settings,
            recipient_email=user_email,
            recipient_name=recipient_name,
            pdf_base64=strip_data_uri_prefix(pdf_base64),
        )
        receipt_response = await self.sender.send(receipt)

        if not receipt_response.ok:
            logger.error(
                f"PDF email failed: {receipt_response.status_code} - {receipt_response.body}"
            )
            return Err(
                ProviderRejection(
                    status_code=receipt_response.status_code,
                    body=receipt_response.body,
                )
            )

        logger.info("PDF email sent")

        # 2. Follow-up, delivered later by Brevo
        followup_scheduled = await self._schedule_followup(user_email, recipient_name)
        return Ok(NotificationOutcome(followup_scheduled=followup_scheduled))

    async def _schedule_followup(self, user_email: str, recipient_name: str) -> bool:
        deliver_at = scheduled_at(
            self.clock(), timedelta(hours=self.settings.followup_delay_hours)
        )
        followup = build_followup_email(
            self.settings,
            recipient_email=user_email,
            recipient_name=recipient_name,
            deliver_at=deliver_at,
        )

        try:
            response = await self.sender.send(followup)
        except Exception as e:
            logger.warning(f"Scheduling feedback email error (non-critical): {e}")
            return False

        if not response.ok:
            logger.warning(
                f"Scheduling feedback email failed (non-critical): "
                f"{response.status_code} - {response.body}"
            )
            return False

        logger.info(f"Feedback email scheduled for {deliver_at}")
        return True
