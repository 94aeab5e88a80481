"""Inquiry handler: validates a form submission and relays it by email.

Exactly one field subset is checked, chosen by ``formType``. A valid request
produces one OutboundMessage and one send attempt; failures are never retried.
"""

import logging
from typing import Tuple

from flyeasy.app.config import Settings
from flyeasy.app.models import (
    DETAILED_INQUIRY,
    SIMPLIFIED_INQUIRY,
    InquiryRequest,
    InquiryResponse,
    OutboundMessage,
    SendResult,
)
from flyeasy.email_templates.inquiry import (
    render_detailed_body,
    render_simplified_body,
    render_subject,
)
from flyeasy.email_templates.outgoing import MailSender

logger = logging.getLogger(__name__)

MISSING_ESSENTIALS = "Missing essential inquiry details (name, email, form type)."
MISSING_DETAILED = "Missing detailed inquiry information."
MISSING_SIMPLIFIED = "Missing simplified inquiry information (departure, destination, travel date)."
INVALID_FORM_TYPE = "Invalid form type provided."
SEND_SUCCESS = "Your inquiry has been sent successfully! We will get back to you shortly."
SEND_FAILURE = "Failed to send inquiry. Please try again later."


class InquiryValidationError(Exception):
    """Raised when a submission is missing fields or has an unknown form type."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def render_inquiry(request: InquiryRequest) -> Tuple[str, str]:
    """
    Validate a submission and render its email.

    Args:
        request: Parsed form submission

    Returns:
        (subject, html) for the notification email

    Raises:
        InquiryValidationError: With the client-facing message
    """
    if not request.user_name or not request.user_email or not request.form_type:
        raise InquiryValidationError(MISSING_ESSENTIALS)

    if request.form_type == DETAILED_INQUIRY:
        if not request.inquiry_details:
            raise InquiryValidationError(MISSING_DETAILED)
        subject = render_subject(request.user_name, "Detailed")
        html = render_detailed_body(
            request.user_name, request.user_email, request.inquiry_details
        )
    elif request.form_type == SIMPLIFIED_INQUIRY:
        if not request.departure_place or not request.destination_place or not request.travel_date:
            raise InquiryValidationError(MISSING_SIMPLIFIED)
        subject = render_subject(request.user_name, "Simplified")
        html = render_simplified_body(
            request.user_name,
            request.user_email,
            request.departure_place,
            request.destination_place,
            request.travel_date,
            request.return_date,
        )
    else:
        raise InquiryValidationError(INVALID_FORM_TYPE)

    return subject, html


class InquiryHandler:
    """Maps one inquiry submission to one response."""

    def __init__(self, settings: Settings, mail_sender: MailSender):
        self.settings = settings
        self.mail_sender = mail_sender

    def build_message(self, request: InquiryRequest) -> OutboundMessage:
        subject, html = render_inquiry(request)
        return OutboundMessage(
            from_=self.settings.sender,
            to=self.settings.recipient_email,
            subject=subject,
            html=html,
        )

    async def handle(self, request: InquiryRequest) -> InquiryResponse:
        try:
            message = self.build_message(request)
        except InquiryValidationError as e:
            logger.warning(f"Rejected inquiry: {e.message}")
            return InquiryResponse(status_code=400, body={"message": e.message})

        try:
            result = await self.mail_sender.send(message)
        except Exception as e:
            result = SendResult.failure(str(e))

        if not result.ok:
            logger.error(f"Error sending inquiry from {request.user_email}: {result.error}")
            return InquiryResponse(
                status_code=500,
                body={"message": SEND_FAILURE, "error": result.error},
            )

        logger.info(f"Inquiry from {request.user_email} sent ({request.form_type})")
        return InquiryResponse(status_code=200, body={"message": SEND_SUCCESS})
