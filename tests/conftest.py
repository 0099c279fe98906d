"""Shared test fixtures."""
import pytest
from httpx import ASGITransport, AsyncClient

from bookstore.config import Settings
from bookstore.main import create_app
from bookstore.storage import BookStore


class RecordingErrorLogger:
    """Error logger that keeps entries in memory for assertions."""

    def __init__(self):
        self.entries: list[dict] = []

    def error(self, message, exc, request):
        self.entries.append(
            {
                "level": "error",
                "message": message,
                "error": str(exc),
                "method": request.method,
                "endpoint": request.url.path,
            }
        )

    def fatal(self, message, exc):
        self.entries.append({"level": "critical", "message": message, "error": str(exc)})


@pytest.fixture
def store() -> BookStore:
    """Fresh, empty store."""
    return BookStore()


@pytest.fixture
def error_logger() -> RecordingErrorLogger:
    return RecordingErrorLogger()


@pytest.fixture
def app(store, error_logger):
    """Application wired to the test store and recording logger."""
    return create_app(store=store, error_logger=error_logger, settings=Settings(debug=True))


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
