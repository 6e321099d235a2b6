"""Email schemas for the send-email endpoint and the Brevo payload."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class SendEmailRequest(BaseModel):
    """Request body for the send-email endpoint.

    Fields are optional at the schema level; the handler reports
    missing values with its own 400 response.
    """

    model_config = ConfigDict(extra="ignore")

    userEmail: str | None = None
    userName: str | None = None
    pdfBase64: str | None = None

    def has_required_fields(self) -> bool:
        """Return True when both the address and the PDF are present."""
        return bool(self.userEmail) and bool(self.pdfBase64)


class SendEmailResponse(BaseModel):
    """Response model for a successful send."""

    message: str


class EmailAddress(BaseModel):
    """Sender or recipient identity."""

    email: str
    name: str


class EmailAttachment(BaseModel):
    """Base64 attachment in Brevo's field naming."""

    content: str
    name: str
    type: str


class TransactionalEmail(BaseModel):
    """Outbound message for Brevo's /v3/smtp/email endpoint."""

    sender: EmailAddress
    to: list[EmailAddress]
    subject: str
    htmlContent: str
    attachment: list[EmailAttachment] | None = None
    scheduledAt: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize to the JSON body, omitting unset optional fields."""
        return self.model_dump(exclude_none=True)
