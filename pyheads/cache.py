# pyheads/cache.py
import base64
import hashlib
import logging
import time
from typing import Callable, Dict, Optional, Tuple

from tortoise.exceptions import BaseORMException

from config import CACHE_TTL
from .database import CachedHead
from .errors import CacheUnavailable

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "head-cache:"


def head_cache_key(skin_url: str) -> str:
    """Content address of a rendered head: the SHA-1 of its skin URL."""
    digest = hashlib.sha1(skin_url.encode("utf-8")).digest()
    return CACHE_KEY_PREFIX + base64.b64encode(digest).decode("ascii")


class MemoryCacheBackend:
    """Process-local cache, lost on restart."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._entries: Dict[str, Tuple[bytes, float]] = {}
        self._clock = clock

    async def get(self, key: str) -> Optional[bytes]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        data, expires_at = entry
        if expires_at <= self._clock():
            del self._entries[key]
            return None
        return data

    async def put(self, key: str, data: bytes, ttl: int) -> None:
        self._entries[key] = (bytes(data), self._clock() + ttl)


class DatabaseCacheBackend:
    """Cache rows stored through Tortoise ORM."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock

    async def get(self, key: str) -> Optional[bytes]:
        try:
            row = await CachedHead.filter(key=key, expires_at__gt=int(self._clock())).first()
        except BaseORMException as e:
            raise CacheUnavailable(f"Cache lookup failed: {e}") from e
        return bytes(row.data) if row else None

    async def put(self, key: str, data: bytes, ttl: int) -> None:
        expires_at = int(self._clock()) + ttl
        try:
            await CachedHead.update_or_create(key=key, defaults={"data": data, "expires_at": expires_at})
        except BaseORMException as e:
            raise CacheUnavailable(f"Cache store failed: {e}") from e

    async def purge_expired(self) -> int:
        """Delete expired rows, returning how many were removed."""
        try:
            return await CachedHead.filter(expires_at__lte=int(self._clock())).delete()
        except BaseORMException as e:
            raise CacheUnavailable(f"Cache purge failed: {e}") from e


class HeadCache:
    """Best-effort front for a cache backend.

    A backend that is down never fails a request: lookups turn into misses
    and stores are dropped.
    """

    def __init__(self, backend, ttl: int = CACHE_TTL):
        self.backend = backend
        self.ttl = ttl

    async def lookup(self, key: str) -> Optional[bytes]:
        try:
            return await self.backend.get(key)
        except CacheUnavailable as e:
            logger.warning("Treating %s as a cache miss: %s", key, e)
            return None

    async def store(self, key: str, data: bytes) -> None:
        try:
            await self.backend.put(key, data, self.ttl)
        except CacheUnavailable as e:
            logger.warning("Dropped cache write for %s: %s", key, e)
