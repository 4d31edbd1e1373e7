"""
Shared test fixtures for PDF stamp frontend tests.
"""
import os
import pytest

# Environment overrides cleared before the config module is imported
os.environ.pop("API_BASE_URL", None)
os.environ.pop("API_TIMEOUT_SECONDS", None)

from frontend.services.transport import Attachment, StampTransport, TransportResponse


class FakeTransport(StampTransport):
    """Records requests and replays a canned response or error."""

    def __init__(self, response: TransportResponse = None, error: Exception = None, on_send=None):
        self.response = response or TransportResponse(status_code=200, content=b'%PDF-1.7 stamped')
        self.error = error
        self.on_send = on_send
        self.requests = []

    def send(self, request):
        self.requests.append(request)
        if self.on_send is not None:
            self.on_send(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_transport():
    """Fake transport answering 200 with a small PDF body."""
    return FakeTransport()


@pytest.fixture
def pdf_attachment():
    """Minimal source PDF attachment."""
    return Attachment(
        filename="paper.pdf",
        content=b"%PDF-1.4\n1 0 obj\n<<>>\nendobj\n%%EOF",
        content_type="application/pdf",
    )


@pytest.fixture
def image_attachment():
    """Small PNG logo attachment."""
    return Attachment(
        filename="logo.png",
        content=b"\x89PNG\r\n\x1a\nfake-image-data",
        content_type="image/png",
    )


@pytest.fixture
def base_form_state():
    """Form state with every required field and no content toggles."""
    return {
        "publisher_id": "pub1",
        "jcode": "J100",
        "strategy": "new_page",
        "position": "FOOTER",
    }


@pytest.fixture
def transport_factory():
    """Factory for FakeTransport with a custom response or error."""
    return FakeTransport
