"""FastAPI application entry point."""

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from aptskola_mailer.config import get_settings
from aptskola_mailer.routers.send_email import plain_text_405_handler
from aptskola_mailer.routers.send_email import router as send_email_router
from aptskola_mailer.utils.logging import configure_logging

# Configure logging (must be called before other modules use loggers)
configure_logging()

settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
)

app.include_router(send_email_router, prefix="/api")
app.add_exception_handler(StarletteHTTPException, plain_text_405_handler)


@app.get("/")
async def root() -> dict:
    """Return application information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
    }


@app.get("/health")
async def health_check() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}
