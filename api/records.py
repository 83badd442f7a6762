"""Match record storage for the stat tracker."""

import json
import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import redis.asyncio as redis

from api.session import connect_redis

logger = logging.getLogger(__name__)


def new_record(hero_name: str, role: str, result: str) -> dict[str, Any]:
    """Build a match record with a fresh id and creation timestamp."""
    return {
        "id": str(uuid4()),
        "hero_name": hero_name,
        "role": role,
        "result": result,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }


class MatchStore(ABC):
    """Abstract store of match records."""

    @abstractmethod
    async def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        """Store a record and return it."""
        ...

    @abstractmethod
    async def all(self) -> list[dict[str, Any]]:
        """Return every record in insertion order."""
        ...

    async def newest_first(self) -> list[dict[str, Any]]:
        """Return every record ordered by created_at, newest first.

        Records sharing a timestamp come back latest-inserted first.
        """
        records = await self.all()
        ordered = sorted(
            enumerate(records),
            key=lambda item: (item[1]["created_at"], item[0]),
            reverse=True,
        )
        return [record for _, record in ordered]


class InMemoryMatchStore(MatchStore):
    """In-memory match store for local development and tests."""

    def __init__(self) -> None:
        self._records: list[dict[str, Any]] = []

    async def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        self._records.append(record)
        return record

    async def all(self) -> list[dict[str, Any]]:
        return list(self._records)


class RedisMatchStore(MatchStore):
    """Redis-backed match store, one JSON document per list entry."""

    def __init__(self, redis_client: redis.Redis, key: str = "highcard:matches") -> None:
        self._redis = redis_client
        self._key = key

    async def insert(self, record: dict[str, Any]) -> dict[str, Any]:
        await self._redis.rpush(self._key, json.dumps(record))
        return record

    async def all(self) -> list[dict[str, Any]]:
        raw = await self._redis.lrange(self._key, 0, -1)
        return [json.loads(item) for item in raw]


# Global match store instance
_match_store: MatchStore | None = None


async def get_match_store() -> MatchStore:
    """Get or create the match store."""
    global _match_store

    if _match_store is None:
        client = await connect_redis()
        _match_store = RedisMatchStore(client) if client else InMemoryMatchStore()
        logger.info("Match store: %s", type(_match_store).__name__)
    return _match_store


def set_match_store(store: MatchStore | None) -> None:
    """Replace the global match store (None resets to lazy detection)."""
    global _match_store
    _match_store = store
