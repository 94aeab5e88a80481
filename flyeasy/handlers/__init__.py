"""Request handlers for the inquiry relay."""

from .inquiry_handler import InquiryHandler, InquiryValidationError

__all__ = ["InquiryHandler", "InquiryValidationError"]
