"""Schema module for API request/response models."""

from aptskola_mailer.schemas.email import (
    EmailAddress,
    EmailAttachment,
    SendEmailRequest,
    SendEmailResponse,
    TransactionalEmail,
)

__all__ = [
    "EmailAddress",
    "EmailAttachment",
    "SendEmailRequest",
    "SendEmailResponse",
    "TransactionalEmail",
]
