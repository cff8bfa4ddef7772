"""Round-robin layout assignment backed by a persisted per-industry counter"""

import asyncio
import logging
from typing import Dict, Optional, Protocol, Sequence

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from sitefactory.core.config import settings
from sitefactory.core.hasher import stable_hash
from sitefactory.design.archetypes import DEFAULT_ARCHETYPE_ID
from sitefactory.models.errors import PersistenceUnavailable

logger = logging.getLogger(__name__)


class LayoutCounterStore(Protocol):
    async def get_and_increment(self, key: str) -> int:
        """Atomically increment the counter for ``key``; returns the value before the increment"""
        ...


class RedisLayoutCounterStore:
    """Counter per industry in Redis. INCR is a single atomic round trip."""

    def __init__(self, url: Optional[str] = None, prefix: Optional[str] = None, client=None):
        self.prefix = settings.layout_counter_prefix if prefix is None else prefix
        self.client = client if client is not None else aioredis.from_url(
            url or settings.redis_url,
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=2
        )

    async def get_and_increment(self, key: str) -> int:
        try:
            value = await self.client.incr(f"{self.prefix}{key}")
        except (RedisError, OSError) as e:
            raise PersistenceUnavailable(f"Layout counter store unreachable: {e}")
        return int(value) - 1

    async def close(self):
        await self.client.aclose()


class InMemoryLayoutCounterStore:
    """Process-local counters for development and tests"""

    def __init__(self):
        self._counters: Dict[str, int] = {}
        self._lock = asyncio.Lock()

    async def get_and_increment(self, key: str) -> int:
        async with self._lock:
            current = self._counters.get(key, 0)
            self._counters[key] = current + 1
            return current


def create_counter_store() -> LayoutCounterStore:
    if settings.redis_enabled:
        logger.info(f"[LayoutCounter] Using Redis at {settings.redis_url}")
        return RedisLayoutCounterStore()
    logger.info("[LayoutCounter] Redis disabled, using in-memory counters")
    return InMemoryLayoutCounterStore()


class LayoutAssigner:
    """
    Picks the next archetype for an industry.

    Consecutive calls for one industry walk its pool in order and wrap, so
    neighbours never repeat unless the pool has a single entry. If the store
    fails the pick degrades to a hash of the seed: still deterministic per
    business, but no longer guaranteed to differ from the previous site.
    """

    def __init__(self, store: LayoutCounterStore):
        self.store = store

    async def next_layout(self, industry_key: str, pool: Sequence[str], seed: Optional[str] = None) -> str:
        if not pool:
            return DEFAULT_ARCHETYPE_ID
        try:
            counter = await self.store.get_and_increment(industry_key)
        except Exception as e:
            index = stable_hash(seed or industry_key) % len(pool)
            logger.warning(
                f"[LayoutCounter] Counter unavailable for '{industry_key}' ({e}); "
                f"falling back to hash selection: {pool[index]}"
            )
            return pool[index]
        selected = pool[counter % len(pool)]
        logger.info(f"[LayoutCounter] {industry_key} #{counter} -> {selected}")
        return selected
