"""Subject lines and HTML bodies for inquiry notification emails."""

import re
from html import escape
from typing import Optional

SITE_NAME = "Fly Easy Website"


def _esc(value: str) -> str:
    return escape(value, quote=False)


def newlines_to_breaks(text: str) -> str:
    """Replace every newline with a <br> tag, one tag per newline."""
    return text.replace("\n", "<br>")


def render_subject(user_name: str, form_type: Optional[str] = None) -> str:
    """
    Build the notification subject.

    Args:
        user_name: Name submitted with the form
        form_type: "Detailed" or "Simplified"; omitted for the generic subject

    Returns:
        Subject line, e.g. "New Detailed Inquiry from Ann (Fly Easy Website)"
    """
    qualifier = f"{form_type} " if form_type else ""
    # Subject is a mail header; line breaks would make it unsendable.
    user_name = re.sub(r"[\r\n]+", " ", user_name)
    return f"New {qualifier}Inquiry from {user_name} ({SITE_NAME})"


def render_detailed_body(user_name: str, user_email: str, inquiry_details: str) -> str:
    """HTML body for a detailed inquiry. User values are escaped for &, < and >."""
    travel_plans = newlines_to_breaks(_esc(inquiry_details))
    return f"""
<p><strong>New Detailed Inquiry Details:</strong></p>
<ul>
    <li><strong>Name:</strong> {_esc(user_name)}</li>
    <li><strong>Email:</strong> {_esc(user_email)}</li>
    <li><strong>Inquiry Type:</strong> Detailed Itinerary Request</li>
    <li><strong>Travel Plans:</strong><br>{travel_plans}</li>
</ul>
<p>Please respond to the customer at {_esc(user_email)} to craft their tailor-made itinerary.</p>
"""


def render_simplified_body(
    user_name: str,
    user_email: str,
    departure_place: str,
    destination_place: str,
    travel_date: str,
    return_date: Optional[str] = None,
) -> str:
    """HTML body for a simplified inquiry; a missing return date renders as N/A.

    User values are escaped for &, < and >.
    """
    return_text = _esc(return_date) if return_date else "N/A"
    return f"""
<p><strong>New Simplified Inquiry Details:</strong></p>
<ul>
    <li><strong>Name:</strong> {_esc(user_name)}</li>
    <li><strong>Email:</strong> {_esc(user_email)}</li>
    <li><strong>Inquiry Type:</strong> Simplified Travel Request</li>
    <li><strong>Departure Place:</strong> {_esc(departure_place)}</li>
    <li><strong>Destination Place:</strong> {_esc(destination_place)}</li>
    <li><strong>Date of Travel:</strong> {_esc(travel_date)}</li>
    <li><strong>Date of Return:</strong> {return_text}</li>
</ul>
<p>Please respond to the customer at {_esc(user_email)} with travel options.</p>
"""
