"""Route for flight inquiry submissions."""

from typing import Optional
from fastapi import APIRouter, Body, Depends, Request
from fastapi.responses import JSONResponse

from flyeasy.app.models import InquiryRequest
from flyeasy.handlers.inquiry_handler import InquiryHandler

inquiry_router = APIRouter(prefix="/api", tags=["Inquiries"])


def get_inquiry_handler(request: Request) -> InquiryHandler:
    """Dependency returning the handler built at startup."""
    return request.app.state.inquiry_handler


@inquiry_router.post("/send-flight-inquiry")
async def send_flight_inquiry(
    inquiry: Optional[InquiryRequest] = Body(None),
    handler: InquiryHandler = Depends(get_inquiry_handler)
):
    """
    Validate a travel inquiry and email it to the agency.

    Returns:
        200 on delivery, 400 for invalid submissions, 500 if the mail could not be sent
    """
    # An empty POST is treated as an empty form.
    response = await handler.handle(inquiry or InquiryRequest())
    return JSONResponse(status_code=response.status_code, content=response.body)
