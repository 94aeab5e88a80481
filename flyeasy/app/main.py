"""Main FastAPI application entry point for the Fly Easy inquiry relay."""

import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from flyeasy.app.config import Settings
from flyeasy.app.routes_inquiry import inquiry_router
from flyeasy.email_templates.outgoing import MailSender, SmtpMailSender
from flyeasy.handlers.inquiry_handler import InquiryHandler

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = app.state.settings
    logger.info(
        f"Starting up application (SMTP {settings.smtp_host}:{settings.smtp_port}, "
        f"origin {settings.cors_origin})"
    )
    yield
    logger.info("Shutting down application...")


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request body.", "error": str(exc.errors())},
    )


def create_app(
    settings: Optional[Settings] = None,
    mail_sender: Optional[MailSender] = None
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Configuration; read from the environment when omitted
        mail_sender: Delivery collaborator; SMTP from settings when omitted
    """
    settings = settings or Settings.from_env()
    mail_sender = mail_sender or SmtpMailSender(settings)

    app = FastAPI(
        title="Fly Easy Inquiry API",
        description="Relays travel inquiries from the Fly Easy website by email",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.inquiry_handler = InquiryHandler(settings, mail_sender)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_origin],
        allow_credentials=True,
        allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": "Fly Easy inquiry API is running"}

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "smtp_host": settings.smtp_host}

    app.include_router(inquiry_router)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
