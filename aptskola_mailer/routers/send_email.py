"""Send-email endpoint.

Delivers the admissions toolkit PDF to the user and schedules a feedback
email three days later. The handler performs its own method check and
body parsing so that every outcome maps to a fixed status code and body.
"""

import json
from collections.abc import Callable

from fastapi import APIRouter, Depends, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from aptskola_mailer.config import get_settings
from aptskola_mailer.schemas.email import SendEmailRequest, SendEmailResponse
from aptskola_mailer.services.brevo_client import BrevoClient
from aptskola_mailer.services.notification_service import NotificationService
from aptskola_mailer.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["email"])

SUCCESS_MESSAGE = "Report sent & Feedback scheduled!"

ACCEPTED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def method_not_allowed_response() -> PlainTextResponse:
    return PlainTextResponse(
        "Method Not Allowed", status_code=status.HTTP_405_METHOD_NOT_ALLOWED
    )


async def plain_text_405_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Answer methods rejected by the router the same way the handler does.

    Register on the app for StarletteHTTPException. Other statuses are
    delegated to FastAPI's default handler.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return method_not_allowed_response()
    return await http_exception_handler(request, exc)


def build_notification_service() -> NotificationService:
    """Build the notification service from process-wide settings."""
    settings = get_settings()
    client = BrevoClient(
        api_key=settings.brevo_api_key,
        api_url=settings.brevo_api_url,
        timeout=settings.brevo_timeout_seconds,
    )
    return NotificationService(sender=client, settings=settings)


def get_notification_service_factory() -> Callable[[], NotificationService]:
    """Return the service builder, called only once a POST is accepted."""
    return build_notification_service


def parse_send_email_request(raw_body: bytes) -> SendEmailRequest:
    """Parse the raw JSON body.

    A body that is valid JSON but not an object yields an empty request.

    Raises:
        ValueError: If the body is not valid JSON or fields have the wrong type
    """
    payload = json.loads(raw_body)
    if not isinstance(payload, dict):
        return SendEmailRequest()
    return SendEmailRequest.model_validate(payload)


@router.api_route("/send-email", methods=ACCEPTED_METHODS)
async def send_email_endpoint(
    request: Request,
    service_factory: Callable[[], NotificationService] = Depends(
        get_notification_service_factory
    ),
) -> Response:
    """Send the toolkit PDF and schedule the feedback email.

    Returns:
        405 for non-POST methods, 400 for missing fields, the provider's
        status and body if the PDF email is rejected, 200 on success and
        500 with the error text for anything unexpected
    """
    if request.method != "POST":
        return method_not_allowed_response()

    try:
        body = parse_send_email_request(await request.body())

        if not body.has_required_fields():
            logger.warning("Missing email or PDF data")
            return PlainTextResponse(
                "Missing required fields", status_code=status.HTTP_400_BAD_REQUEST
            )

        service = service_factory()
        result = await service.send_report(
            user_email=body.userEmail,
            user_name=body.userName,
            pdf_base64=body.pdfBase64,
        )

        if result.is_err():
            rejection = result.unwrap_err()
            return JSONResponse(
                status_code=rejection.status_code, content=rejection.body
            )

        # Reported even when the follow-up could not be scheduled
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=SendEmailResponse(message=SUCCESS_MESSAGE).model_dump(),
        )

    except Exception as e:
        logger.exception(f"Critical function error: {e}")
        return PlainTextResponse(
            str(e) or type(e).__name__,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
