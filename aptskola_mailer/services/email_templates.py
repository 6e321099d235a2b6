"""Builders for the receipt and follow-up emails."""

import html
import re
from datetime import datetime, timedelta, timezone

from aptskola_mailer.config import Settings
from aptskola_mailer.schemas.email import (
    EmailAddress,
    EmailAttachment,
    TransactionalEmail,
)

DATA_URI_PREFIX_PATTERN = re.compile(r"^data:.+;base64,")

PDF_MIME_TYPE = "application/pdf"

RECEIPT_SUBJECT = "Safe Keeping: Your AptSkola Admission Toolkit"
FOLLOWUP_SUBJECT = "One quick question about your kid's admission..."

RECEIPT_HTML_TEMPLATE = """
<html>
  <body style="font-family: Arial, sans-serif; color: #333;">
    <h2>Here is your Admission Toolkit.</h2>
    <p>Hi {name},</p>
    <p>As requested, here is the PDF copy of your <strong>AptSkola Report</strong> for your records.</p>
    <p>We recommend saving this file to your phone so you have it handy when visiting schools.</p>
    <br>
    <p>Best,</p>
    <p><strong>The AptSkola Team</strong></p>
  </body>
</html>
"""

FOLLOWUP_HTML_TEMPLATE = """
<html>
  <body style="font-family: Arial, sans-serif; color: #333;">
    <p>Hi {name},</p>
    <p>It’s been 3 days since you downloaded the toolkit. I’m curious—did the <strong>Fee Forecaster</strong> scare you, or did the <strong>School Checklist</strong> help?</p>
    <p>I read every reply. Could you hit reply and tell me:</p>
    <p><strong>What is the one thing in the report that surprised you the most?</strong></p>
    <br>
    <p>Best,</p>
    <p>Rahul<br>Founder, AptSkola</p>
  </body>
</html>
"""


def strip_data_uri_prefix(value: str) -> str:
    """Remove a leading "data:<mime>;base64," prefix, if any.

    Args:
        value: Base64 payload, possibly carrying a data URI prefix

    Returns:
        The raw base64 payload
    """
    return DATA_URI_PREFIX_PATTERN.sub("", value, count=1)


def format_instant(moment: datetime) -> str:
    """Format a datetime as a UTC ISO-8601 instant, e.g. 2026-10-22T10:00:00.000Z."""
    utc_moment = moment.astimezone(timezone.utc)
    return utc_moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def scheduled_at(now: datetime, delay: timedelta) -> str:
    """Return the delivery instant `delay` after `now`."""
    return format_instant(now + delay)


def build_receipt_email(
    settings: Settings,
    recipient_email: str,
    recipient_name: str,
    pdf_base64: str,
) -> TransactionalEmail:
    """Build the immediate email carrying the toolkit PDF.

    Args:
        settings: Sender identity and attachment name
        recipient_email: Address of the user
        recipient_name: Display name used in the greeting
        pdf_base64: Attachment content, already stripped of any data URI prefix

    Returns:
        TransactionalEmail with a single PDF attachment
    """
    return TransactionalEmail(
        sender=EmailAddress(
            email=settings.receipt_sender_email,
            name=settings.receipt_sender_name,
        ),
        to=[EmailAddress(email=recipient_email, name=recipient_name)],
        subject=RECEIPT_SUBJECT,
        htmlContent=RECEIPT_HTML_TEMPLATE.format(name=html.escape(recipient_name)),
        attachment=[
            EmailAttachment(
                content=pdf_base64,
                name=settings.attachment_filename,
                type=PDF_MIME_TYPE,
            )
        ],
    )


def build_followup_email(
    settings: Settings,
    recipient_email: str,
    recipient_name: str,
    deliver_at: str,
) -> TransactionalEmail:
    """Build the feedback email Brevo holds until `deliver_at`."""
    return TransactionalEmail(
        sender=EmailAddress(
            email=settings.followup_sender_email,
            name=settings.followup_sender_name,
        ),
        to=[EmailAddress(email=recipient_email, name=recipient_name)],
        subject=FOLLOWUP_SUBJECT,
        htmlContent=FOLLOWUP_HTML_TEMPLATE.format(name=html.escape(recipient_name)),
        scheduledAt=deliver_at,
    )
