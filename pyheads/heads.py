# pyheads/heads.py
import asyncio
import logging
from typing import Optional, Set

import httpx

from .cache import HeadCache, head_cache_key
from .default_heads import default_head, uuid_to_default_skin_type
from .mojang import fetch_profile, fetch_skin
from .skins_render import composite_head, encode_png
from .timings import Timings

logger = logging.getLogger(__name__)


class HeadResolver:
    """Turns a player UUID into a PNG of their head.

    Cache writes run as detached tasks so the response never waits on them;
    ``drain()`` must be awaited before shutdown so they still finish.
    """

    def __init__(self, client: httpx.AsyncClient, cache: HeadCache):
        self.client = client
        self.cache = cache
        self._pending: Set[asyncio.Task] = set()

    async def resolve_head(self, uuid: str, timings: Optional[Timings] = None) -> bytes:
        timings = timings if timings is not None else Timings()

        with timings.measure("total"):
            with timings.measure("profile-req"):
                profile = await fetch_profile(self.client, uuid)

            if profile.skin_url:
                logger.info("Got skin URL: %s", profile.skin_url)
                return await self._render_skin_head(profile.skin_url, timings)

            logger.info("Player %s has no skin", uuid)
            return default_head(uuid_to_default_skin_type(uuid))

    async def _render_skin_head(self, skin_url: str, timings: Timings) -> bytes:
        key = head_cache_key(skin_url)

        with timings.measure("get-cache"):
            cached = await self.cache.lookup(key)
        if cached is not None:
            logger.info("Cache HIT for: %s", key)
            return cached
        logger.info("Cache miss for: %s", key)

        with timings.measure("skin-req"):
            texture = await fetch_skin(self.client, skin_url)

        with timings.measure("gen-img"):
            head_image = encode_png(composite_head(texture))

        self._spawn(self.cache.store(key, head_image))
        return head_image

    def _spawn(self, coro) -> None:
        task = asyncio.get_running_loop().create_task(coro)
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    @property
    def pending_writes(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every detached cache write to finish."""
        while self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
