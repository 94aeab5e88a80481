from typing import Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field

DETAILED_INQUIRY = "Detailed Inquiry"
SIMPLIFIED_INQUIRY = "Simplified Inquiry"


class InquiryRequest(BaseModel):
    """Form submission posted by the website. Field names follow the frontend's JSON."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    form_type: Optional[str] = Field(None, alias="formType")
    user_name: Optional[str] = Field(None, alias="userName")
    user_email: Optional[str] = Field(None, alias="userEmail")
    inquiry_details: Optional[str] = Field(None, alias="inquiryDetails")
    departure_place: Optional[str] = Field(None, alias="departurePlace")
    destination_place: Optional[str] = Field(None, alias="destinationPlace")
    travel_date: Optional[str] = Field(None, alias="travelDate")
    return_date: Optional[str] = Field(None, alias="returnDate")


class OutboundMessage(BaseModel):
    """Notification email handed to the mail sender."""
    from_: str = Field(..., alias="from")
    to: str
    subject: str
    html: str

    model_config = ConfigDict(populate_by_name=True)


class SendResult(BaseModel):
    """Outcome of a single send attempt."""
    ok: bool
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "SendResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> "SendResult":
        return cls(ok=False, error=error)


class InquiryResponse(BaseModel):
    """Status code and JSON body returned to the client."""
    status_code: int
    body: Dict[str, Any]
