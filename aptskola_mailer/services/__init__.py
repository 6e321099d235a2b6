"""Services package for business logic."""

from aptskola_mailer.services.brevo_client import (
    BrevoClient,
    ProviderResponse,
    TransactionalEmailSender,
)
from aptskola_mailer.services.notification_service import (
    NotificationOutcome,
    NotificationService,
    ProviderRejection,
)

__all__ = [
    "BrevoClient",
    "NotificationOutcome",
    "NotificationService",
    "ProviderRejection",
    "ProviderResponse",
    "TransactionalEmailSender",
]
