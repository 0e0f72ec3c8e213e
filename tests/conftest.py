"""
Pytest fixtures for the Vanish client tests.
"""
import httpx
import pytest

from vanish.client import VanishClient

BASE_URL = "https://api.vanish.test"


@pytest.fixture
def sent_requests():
    """Requests captured by make_client's transport, in order."""
    return []


@pytest.fixture
def make_client(sent_requests):
    """
    Build a VanishClient backed by httpx.MockTransport.

    The handler receives each httpx.Request and returns an httpx.Response
    (or a coroutine producing one).
    """
    def _make(handler, **options):
        def recording_handler(request):
            sent_requests.append(request)
            return handler(request)

        return VanishClient(BASE_URL, transport=httpx.MockTransport(recording_handler), **options)

    return _make


@pytest.fixture
def mock_summary():
    """An email summary as the server sends it."""
    return {
        "id": "email-123",
        "from": "John Doe <john@example.com>",
        "subject": "Your verification code",
        "textPreview": "Your code is 424242...",
        "receivedAt": "2024-01-01T00:00:00.000Z",
        "hasAttachments": False,
    }


@pytest.fixture
def mock_page(mock_summary):
    """A one-item page from GET /mailbox/{address}."""
    return {
        "data": [mock_summary],
        "nextCursor": "cursor-abc",
        "total": 1,
    }


@pytest.fixture
def mock_detail():
    """Full email as returned by GET /email/{id}."""
    return {
        "id": "email-123",
        "from": "John Doe <john@example.com>",
        "to": ["quiet-fox@vanish.host", "cc@vanish.host"],
        "subject": "Invoice",
        "html": "<p>Invoice attached</p>",
        "text": "Invoice attached",
        "receivedAt": "2024-03-15T12:30:45.000Z",
        "hasAttachments": True,
        "attachments": [
            {"id": "att-1", "name": "invoice.pdf", "type": "application/pdf", "size": 2048},
        ],
    }
