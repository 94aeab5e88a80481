import pytest
from flyeasy.app.config import Settings
from flyeasy.app.models import SendResult
from flyeasy.email_templates.outgoing import MailSender


class FakeMailSender(MailSender):
    """Records messages instead of sending them."""

    def __init__(self, result=None, exc=None):
        self.sent = []
        self.result = result or SendResult.success()
        self.exc = exc

    async def send(self, message):
        self.sent.append(message)
        if self.exc:
            raise self.exc
        return self.result


@pytest.fixture
def settings():
    return Settings(
        email_user="sender@flyeasy.test",
        email_pass="app-password",
        recipient_email="agent@flyeasy.test",
        smtp_host="smtp.flyeasy.test",
        smtp_port=2525,
        cors_origin="https://flyeasy.example",
    )


@pytest.fixture
def fake_sender():
    return FakeMailSender()


@pytest.fixture
def make_sender():
    """Factory for senders that fail or return a custom result."""
    return FakeMailSender


@pytest.fixture
def detailed_payload():
    return {
        "formType": "Detailed Inquiry",
        "userName": "Ann Lee",
        "userEmail": "ann@example.com",
        "inquiryDetails": "Line1\nLine2",
    }


@pytest.fixture
def simplified_payload():
    return {
        "formType": "Simplified Inquiry",
        "userName": "Bo Chen",
        "userEmail": "bo@example.com",
        "departurePlace": "Harare",
        "destinationPlace": "London",
        "travelDate": "2026-12-01",
    }
