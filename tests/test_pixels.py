"""Tests for the RGBA texture accessor."""
from __future__ import annotations

import pytest

from pyheads.pixels import TextureBuffer, color_sig


def _texture() -> TextureBuffer:
    # 4x2 texture where every byte is its own index
    return TextureBuffer(bytes(range(32)), 4, 2)


def test_offset_is_row_major() -> None:
    texture = _texture()
    assert texture.offset(0, 0) == 0
    assert texture.offset(3, 0) == 12
    assert texture.offset(1, 1) == 20


def test_pixel_returns_rgba_bytes() -> None:
    assert _texture().pixel(1, 1) == (20, 21, 22, 23)


def test_out_of_range_pixel_raises() -> None:
    texture = _texture()
    with pytest.raises(IndexError):
        texture.pixel(4, 0)
    with pytest.raises(IndexError):
        texture.pixel(0, 2)
    with pytest.raises(IndexError):
        texture.pixel(-1, 0)


def test_wrong_data_length_raises() -> None:
    with pytest.raises(ValueError):
        TextureBuffer(bytes(31), 4, 2)


def test_buffer_is_copied() -> None:
    data = bytearray(32)
    texture = TextureBuffer(data, 4, 2)
    data[0] = 99
    assert texture.pixel(0, 0) == (0, 0, 0, 0)


def test_color_sig_packs_channels() -> None:
    assert color_sig(0, 0, 0, 0) == 0
    assert color_sig(1, 2, 3, 4) == 0x01020304
    assert color_sig(255, 255, 255, 255) == 0xFFFFFFFF


def test_color_sig_distinguishes_alpha() -> None:
    assert color_sig(10, 20, 30, 0) != color_sig(10, 20, 30, 1)
    texture = _texture()
    assert texture.color_sig(0, 0) == color_sig(0, 1, 2, 3)
