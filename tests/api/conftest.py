"""Fixtures shared by API tests."""

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.main import app
from api.records import InMemoryMatchStore, set_match_store
from api.routes import game as game_routes
from api.session import InMemorySessionStore, set_session_store


@pytest.fixture(autouse=True)
def in_memory_stores():
    """Run every API test against fresh in-memory stores."""
    set_session_store(InMemorySessionStore())
    set_match_store(InMemoryMatchStore())
    game_routes._games.clear()
    yield
    set_session_store(None)
    set_match_store(None)
    game_routes._games.clear()


@pytest_asyncio.fixture
async def client():
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
