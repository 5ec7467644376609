# pyheads/web.py

import re
from typing import Optional

from fastapi import APIRouter, Query, Request, Response
from fastapi.responses import PlainTextResponse

from config import RESPONSE_MAX_AGE
from .errors import NotFound, TextureFetchFailed, UpstreamError
from .heads import HeadResolver
from .skins_render import HEAD_SIZE, upscale_head
from .timings import Timings


router = APIRouter()

UUID_PATTERN = re.compile(r"^[0-9a-f]{32}$")

INDEX_TEXT = """PyHeads

GET /<uuid>        8x8 PNG of the player's face with the hat layer applied
GET /<uuid>.png    same thing

Dashes in the UUID are optional.

Query parameters:
  size=<8..512>    scale the head up (nearest neighbour)
  timings=1        add a Server-Timing header
"""


def normalize_uuid(raw: str) -> Optional[str]:
    """Strip dashes and a ``.png`` suffix; None if what is left is not a UUID."""
    uuid = raw.strip().replace("-", "")
    if uuid.endswith(".png"):
        uuid = uuid[:-4]
    return uuid if UUID_PATTERN.match(uuid) else None


@router.get("/", response_class=PlainTextResponse)
async def index():
    return INDEX_TEXT


@router.get("/{player_uuid}")
async def head(
    request: Request,
    player_uuid: str,
    timings: Optional[str] = Query(None),
    size: int = Query(HEAD_SIZE, ge=HEAD_SIZE, le=512),
):
    uuid = normalize_uuid(player_uuid)
    if uuid is None:
        return PlainTextResponse("Invalid UUID", status_code=400)

    resolver: HeadResolver = request.app.state.resolver
    request_timings = Timings()
    try:
        head_image = await resolver.resolve_head(uuid, request_timings)
    except NotFound:
        return PlainTextResponse("Player not found", status_code=404)
    except UpstreamError:
        return PlainTextResponse("Mojang API error", status_code=500)
    except TextureFetchFailed:
        return PlainTextResponse("Skin request failed", status_code=500)

    if size != HEAD_SIZE:
        head_image = upscale_head(head_image, size)

    headers = {"Cache-Control": f"public, max-age={RESPONSE_MAX_AGE}"}
    if timings:
        headers["Server-Timing"] = request_timings.to_header()
    return Response(content=head_image, media_type="image/png", headers=headers)
