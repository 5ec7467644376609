# pyheads/default_heads.py
from enum import IntEnum
from functools import lru_cache

from .skins_render import HEAD_SIZE, encode_png


class DefaultSkinType(IntEnum):
    STEVE = 0
    ALEX = 1


# Hex digit positions spread over the dash-separated groups of a UUID
DIGIT_POSITIONS = (7, 15, 23, 31)

# --- Default faces, one character per pixel ---
_PALETTES = {
    DefaultSkinType.STEVE: {
        "h": (47, 32, 13),     # hair
        "H": (36, 24, 10),     # hair shadow
        "s": (184, 133, 105),  # skin
        "S": (170, 125, 102),  # skin shadow
        "w": (255, 255, 255),  # eye white
        "e": (82, 61, 137),    # iris
        "n": (148, 96, 67),    # nose
        "m": (106, 64, 48),    # mouth
    },
    DefaultSkinType.ALEX: {
        "h": (232, 136, 62),   # hair
        "H": (208, 113, 44),   # hair shadow
        "s": (246, 213, 173),  # skin
        "S": (236, 196, 158),  # skin shadow
        "w": (255, 255, 255),  # eye white
        "e": (58, 122, 66),    # iris
        "n": (230, 180, 140),  # nose
        "m": (214, 140, 120),  # mouth
    },
}

_FACES = {
    DefaultSkinType.STEVE: (
        "hhhhhhhh",
        "hhhHhhhh",
        "hssssssh",
        "sSssssSs",
        "swessews",
        "sssnnsss",
        "ssmmmmss",
        "ssmSSmss",
    ),
    DefaultSkinType.ALEX: (
        "hhhhhhhh",
        "hhhhhhHh",
        "hhhsssss",
        "hhssssSs",
        "hwessews",
        "Hsssssss",
        "hssmmsss",
        "hsssssss",
    ),
}


def uuid_to_default_skin_type(uuid: str) -> DefaultSkinType:
    """Pick the default skin for a player without one.

    Xor of four hex digits of the (dashless) UUID, folded onto the number
    of default skins.
    """
    value = 0
    for position in DIGIT_POSITIONS:
        value ^= int(uuid[position], 16)
    return DefaultSkinType(value % len(DefaultSkinType))


@lru_cache(maxsize=None)
def default_head(skin_type: DefaultSkinType) -> bytes:
    palette = _PALETTES[skin_type]
    pixels = bytearray()
    for row in _FACES[skin_type]:
        for key in row:
            pixels.extend(palette[key])
            pixels.append(255)
    return encode_png(bytes(pixels), HEAD_SIZE)
