import logging
from contextlib import asynccontextmanager, AsyncExitStack

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from tortoise.contrib.fastapi import RegisterTortoise

from config import (CACHE_BACKEND, CORS_ALLOWED_METHODS, CORS_ALLOWED_ORIGINS,
                    DATA_DIR, DB_URL, HOST, HTTP_TIMEOUT, LOG_LEVEL, PORT,
                    USER_AGENT)
from pyheads.cache import DatabaseCacheBackend, HeadCache, MemoryCacheBackend
from pyheads.errors import CacheUnavailable
from pyheads.heads import HeadResolver
from pyheads.web import router as web_router

logging.basicConfig(
    level=LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("pyheads")


# --- Lifespan manager for startup and shutdown ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    async with AsyncExitStack() as stack:
        if CACHE_BACKEND == "database":
            DATA_DIR.mkdir(parents=True, exist_ok=True)
            await stack.enter_async_context(RegisterTortoise(
                app,
                db_url=DB_URL,
                modules={"models": ["pyheads.database"]},
                generate_schemas=True,
            ))
            backend = DatabaseCacheBackend()
            try:
                purged = await backend.purge_expired()
                logger.info("Purged %d expired heads from the cache", purged)
            except CacheUnavailable as e:
                logger.warning("Could not purge expired heads: %s", e)
        else:
            backend = MemoryCacheBackend()

        client = await stack.enter_async_context(httpx.AsyncClient(
            timeout=HTTP_TIMEOUT,
            headers={"User-Agent": USER_AGENT},
        ))
        resolver = HeadResolver(client, HeadCache(backend))
        app.state.resolver = resolver
        yield
        # Detached cache writes must land before the database closes
        logger.info("Waiting for %d pending cache writes", resolver.pending_writes)
        await resolver.drain()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOWED_ORIGINS,
    allow_methods=CORS_ALLOWED_METHODS,
)

app.include_router(web_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL)
