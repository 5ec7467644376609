# pyheads/pixels.py
from dataclasses import dataclass
from typing import Tuple

BYTES_PER_PIXEL = 4

# --- Minecraft Skin Layouts (width, height) ---
# Classic skins have no second body layer; the head and hat sit at the
# same coordinates in both.
CLASSIC_LAYOUT = (64, 32)
MODERN_LAYOUT = (64, 64)
SKIN_LAYOUTS = (CLASSIC_LAYOUT, MODERN_LAYOUT)


def color_sig(r: int, g: int, b: int, a: int) -> int:
    """Pack an RGBA pixel into a single 32-bit value."""
    return r * 2 ** 24 + g * 2 ** 16 + b * 2 ** 8 + a


@dataclass(frozen=True)
class TextureBuffer:
    """Row-major RGBA pixels of a decoded skin."""

    data: bytes
    width: int
    height: int

    def __post_init__(self):
        # Copy so a caller's bytearray can't change under us
        object.__setattr__(self, "data", bytes(self.data))
        if len(self.data) != self.width * self.height * BYTES_PER_PIXEL:
            raise ValueError(
                f"Texture data is {len(self.data)} bytes, expected "
                f"{self.width}x{self.height}x{BYTES_PER_PIXEL}"
            )

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} texture")
        return y * self.width * BYTES_PER_PIXEL + x * BYTES_PER_PIXEL

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        start = self.offset(x, y)
        r, g, b, a = self.data[start:start + BYTES_PER_PIXEL]
        return r, g, b, a

    def color_sig(self, x: int, y: int) -> int:
        return color_sig(*self.pixel(x, y))
