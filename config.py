from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"

# Address uvicorn binds to when run via `python main.py`
HOST = "localhost"
PORT = 8000

# Shared by uvicorn and the pyheads loggers
LOG_LEVEL = "info"

# Session server used to look up player profiles
PROFILE_API_URL = "https://sessionserver.mojang.com/session/minecraft/profile/{uuid}"

# Sent with every outgoing request (profile and skin downloads)
USER_AGENT = "CLHeads/1.0"

# Timeout in seconds for outgoing requests
HTTP_TIMEOUT = 10.0

# Where rendered heads are cached
# "database" stores them through Tortoise ORM in DB_URL
# "memory" keeps them in the process (lost on restart)
CACHE_BACKEND = "database"
DB_URL = f"sqlite://{DATA_DIR / 'heads.db'}"

# How long a rendered head stays in the cache (7 days)
CACHE_TTL = 60 * 60 * 24 * 7

# Cache-Control max-age sent to clients
RESPONSE_MAX_AGE = 600

# CORS configuration
# Heads are public images, so any origin may read them
CORS_ALLOWED_ORIGINS = ["*"]
# Allowed methods for CORS
CORS_ALLOWED_METHODS = ["GET"]
