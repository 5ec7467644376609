"""Tests for the application lifespan."""
from __future__ import annotations

import asyncio

from fastapi import FastAPI

import main


def test_shutdown_waits_for_pending_cache_writes(monkeypatch) -> None:
    monkeypatch.setattr(main, "CACHE_BACKEND", "memory")
    stored = []

    async def slow_store() -> None:
        await asyncio.sleep(0.05)
        stored.append(True)

    async def body():
        app = FastAPI()
        async with main.lifespan(app):
            resolver = app.state.resolver
            resolver._spawn(slow_store())
            assert resolver.pending_writes == 1
        assert stored == [True]
        assert resolver.pending_writes == 0

    asyncio.run(body())
