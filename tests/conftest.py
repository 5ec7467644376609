from __future__ import annotations

import io

import pytest
from PIL import Image

from pyheads.pixels import TextureBuffer


def blank_skin(width: int = 64, height: int = 64, fill=(0, 0, 0, 0)) -> Image.Image:
    return Image.new("RGBA", (width, height), fill)


def fill_block(img: Image.Image, origin: tuple[int, int], color) -> None:
    for dy in range(8):
        for dx in range(8):
            img.putpixel((origin[0] + dx, origin[1] + dy), color)


def to_texture(img: Image.Image) -> TextureBuffer:
    return TextureBuffer(img.tobytes(), img.width, img.height)


def to_png(img: Image.Image) -> bytes:
    out = io.BytesIO()
    img.save(out, format="PNG")
    return out.getvalue()


@pytest.fixture
def red_face_skin() -> Image.Image:
    """64x64 skin with a solid red face and no hat."""
    img = blank_skin()
    fill_block(img, (8, 8), (255, 0, 0, 255))
    return img


@pytest.fixture
def skin_helpers():
    class Helpers:
        blank = staticmethod(blank_skin)
        fill = staticmethod(fill_block)
        texture = staticmethod(to_texture)
        png = staticmethod(to_png)

    return Helpers
