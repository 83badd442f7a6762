"""Tests for session management."""

import time
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio

import api.session as session_module
from api.session import (
    InMemorySessionStore,
    SessionSigner,
    create_session,
    extract_session_id,
    get_session_signer,
    get_session_store,
    set_session_store,
)


class TestSessionSigner:
    """Tests for SessionSigner class."""

    def test_sign_creates_token(self):
        """Test that sign creates a token different from the id."""
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("test-session-123")

        assert token
        assert token != "test-session-123"

    def test_unsign_returns_original_id(self):
        """Test that unsign returns the original session ID."""
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("test-session-456")

        assert signer.unsign(token, max_age=3600) == "test-session-456"

    def test_unsign_invalid_token_returns_none(self):
        """Test that unsign returns None for invalid tokens."""
        signer = SessionSigner(secret_key="test-secret")
        assert signer.unsign("invalid-token-data", max_age=3600) is None

    def test_unsign_wrong_secret_returns_none(self):
        """Test that a token from another secret is rejected."""
        token = SessionSigner(secret_key="secret-one").sign("test-session")
        assert SessionSigner(secret_key="secret-two").unsign(token, max_age=3600) is None

    def test_unsign_expired_token_returns_none(self):
        """Test that unsign returns None for expired tokens."""
        signer = SessionSigner(secret_key="test-secret")
        token = signer.sign("test-session")

        original_time = time.time
        with patch("time.time", lambda: original_time() + 7200):
            assert signer.unsign(token, max_age=3600) is None

    def test_get_session_signer_returns_singleton(self):
        """Test that get_session_signer returns the same instance."""
        session_module._session_signer = None
        assert get_session_signer() is get_session_signer()


class TestInMemorySessionStore:
    """Tests for InMemorySessionStore class."""

    @pytest_asyncio.fixture
    async def store(self):
        """Create a fresh session store."""
        return InMemorySessionStore()

    @pytest.mark.asyncio
    async def test_set_and_get_session(self, store):
        """Test setting and getting session data."""
        await store.set("s1", {"game": {"balance": "100"}}, ttl=3600)
        assert await store.get("s1") == {"game": {"balance": "100"}}

    @pytest.mark.asyncio
    async def test_get_nonexistent_returns_none(self, store):
        """Test that a missing session is None."""
        assert await store.get("missing") is None

    @pytest.mark.asyncio
    async def test_delete_session(self, store):
        """Test deleting a session, twice."""
        await store.set("s1", {"data": "value"}, ttl=3600)
        await store.delete("s1")
        await store.delete("s1")
        assert await store.get("s1") is None

    @pytest.mark.asyncio
    async def test_exists_check(self, store):
        """Test existence check."""
        assert await store.exists("s1") is False
        await store.set("s1", {}, ttl=3600)
        assert await store.exists("s1") is True

    @pytest.mark.asyncio
    async def test_expired_sessions_dropped(self, store):
        """Test that expired sessions are neither returned nor kept."""
        await store.set("short-1", {"data": 1}, ttl=1)
        await store.set("short-2", {"data": 2}, ttl=1)
        await store.set("long", {"data": 3}, ttl=3600)

        time.sleep(1.5)

        assert await store.get("short-1") is None
        assert await store.cleanup_expired() == 1
        assert await store.exists("short-2") is False
        assert await store.exists("long") is True

    @pytest.mark.asyncio
    async def test_create_session_id(self, store):
        """Test signed and unsigned ids."""
        assert len(store.create_session_id(signed=True)) > 36
        unsigned = store.create_session_id(signed=False)
        assert len(unsigned) == 36
        assert unsigned.count("-") == 4


class TestModuleFunctions:
    """Tests for module-level session functions."""

    @pytest.mark.asyncio
    async def test_create_session_stores_data(self):
        """Test that create_session stores the initial data under the new id."""
        session_id = await create_session({"test": "data"})
        store = await get_session_store()
        assert await store.get(session_id) == {"test": "data"}

    @pytest.mark.asyncio
    async def test_created_session_id_is_signed(self):
        """Test that created ids verify with the global signer."""
        session_id = await create_session()
        assert extract_session_id(session_id) is not None

    @pytest.mark.asyncio
    async def test_extract_session_id_invalid_returns_none(self):
        """Test that tampered tokens are rejected."""
        assert extract_session_id("invalid-token") is None

    @pytest.mark.asyncio
    async def test_falls_back_to_memory_without_redis(self):
        """Test the in-memory fallback when Redis is unreachable."""
        set_session_store(None)
        with patch("api.session.connect_redis", AsyncMock(return_value=None)):
            store = await get_session_store()

        assert isinstance(store, InMemorySessionStore)
        assert await get_session_store() is store
