# pyheads/mojang.py
import base64
import json
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from config import PROFILE_API_URL
from .errors import NotFound, TextureFetchFailed, UpstreamError
from .pixels import TextureBuffer
from .skins_render import decode_skin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkinProfile:
    uuid: str
    name: str
    skin_url: Optional[str]
    # "slim" or "classic"; only a hint, heads look the same either way
    model: str = "classic"


def parse_profile(data: dict) -> SkinProfile:
    """Read the skin out of a session server profile.

    The "textures" property is base64 encoded JSON of the form
    ``{"textures": {"SKIN": {"url": ..., "metadata": {"model": "slim"}}}}``.
    """
    encoded = next(p["value"] for p in data["properties"] if p["name"] == "textures")
    textures = json.loads(base64.b64decode(encoded))
    skin = textures.get("textures", {}).get("SKIN") or {}
    model = (skin.get("metadata") or {}).get("model", "classic")
    return SkinProfile(uuid=data["id"], name=data["name"], skin_url=skin.get("url"), model=model)


async def fetch_profile(client: httpx.AsyncClient, uuid: str) -> SkinProfile:
    try:
        response = await client.get(PROFILE_API_URL.format(uuid=uuid))
    except httpx.HTTPError as e:
        logger.error("Mojang API request for %s failed: %s", uuid, e)
        raise UpstreamError(f"Mojang API request failed: {e}") from e

    # The session server answers unknown players with 204 (older) or 404
    if response.status_code in (204, 404):
        logger.info("Player %s not found", uuid)
        raise NotFound(uuid)
    if response.status_code != 200:
        logger.error("Mojang API error: %s", response.status_code)
        logger.error("Response headers: %s", json.dumps(dict(response.headers)))
        logger.error("Response body: %s", response.text)
        raise UpstreamError("Mojang API error", status_code=response.status_code, body=response.text)

    try:
        return parse_profile(response.json())
    except (ValueError, KeyError, TypeError, AttributeError, StopIteration) as e:
        logger.error("Malformed profile for %s: %s", uuid, response.text)
        raise UpstreamError(f"Malformed profile: {e}", status_code=response.status_code, body=response.text) from e


async def fetch_skin(client: httpx.AsyncClient, url: str) -> TextureBuffer:
    try:
        response = await client.get(url)
    except httpx.HTTPError as e:
        logger.error("Skin request failed: %s", e)
        raise TextureFetchFailed(url, str(e)) from e

    if not response.is_success:
        logger.error("Skin request failed: %s", response.status_code)
        raise TextureFetchFailed(url, f"status {response.status_code}")

    try:
        return decode_skin(response.content)
    except (OSError, ValueError) as e:
        logger.error("Could not decode skin %s: %s", url, e)
        raise TextureFetchFailed(url, str(e)) from e
