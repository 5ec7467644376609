import io

from PIL import Image

from .pixels import BYTES_PER_PIXEL, SKIN_LAYOUTS, TextureBuffer

# --- Minecraft Skin Head Coordinates ---
# (x_start, y_start) of the front face and of the hat overlay drawn on top
# of it. Both layouts share these.
FACE_FRONT = (8, 8)
HAT_FRONT = (40, 8)
HEAD_SIZE = 8


def decode_skin(data: bytes) -> TextureBuffer:
    """Decode a skin PNG into RGBA pixels.

    Raises ``ValueError`` (or Pillow's ``OSError``) for images that are not
    a readable skin in one of the supported layouts, including headers that
    claim absurd dimensions.
    """
    try:
        img = Image.open(io.BytesIO(data))
    except Image.DecompressionBombError as e:
        raise ValueError(str(e)) from e
    with img:
        # Check before convert() so nothing oversized is ever decoded
        if img.size not in SKIN_LAYOUTS:
            raise ValueError(f"Unsupported skin size {img.size[0]}x{img.size[1]}")
        img = img.convert("RGBA")
        return TextureBuffer(img.tobytes(), img.width, img.height)


def composite_head(texture: TextureBuffer) -> bytes:
    """Blend the hat layer over the face and return 8x8 RGBA pixels.

    A hat pixel that is bit-identical to the texture's first pixel counts as
    never painted, whatever its alpha says. The result is always opaque.
    """
    if texture.size not in SKIN_LAYOUTS:
        raise ValueError(f"Cannot render a head from a {texture.width}x{texture.height} texture")

    transparency_sig = texture.color_sig(0, 0)
    head = bytearray(HEAD_SIZE * HEAD_SIZE * BYTES_PER_PIXEL)

    for i in range(HEAD_SIZE * HEAD_SIZE):
        x = i % HEAD_SIZE
        y = i // HEAD_SIZE
        face = texture.pixel(FACE_FRONT[0] + x, FACE_FRONT[1] + y)
        hat_x, hat_y = HAT_FRONT[0] + x, HAT_FRONT[1] + y
        hat = texture.pixel(hat_x, hat_y)

        if texture.color_sig(hat_x, hat_y) == transparency_sig:
            hat_alpha = 0.0
        else:
            hat_alpha = hat[3] / 255
        hat_strength = 1 - hat_alpha

        out = i * BYTES_PER_PIXEL
        for channel in range(3):
            head[out + channel] = round(face[channel] * hat_strength + hat[channel] * hat_alpha)
        head[out + 3] = 255

    return bytes(head)


def encode_png(pixels: bytes, size: int = HEAD_SIZE) -> bytes:
    img = Image.frombytes("RGBA", (size, size), pixels).convert("RGB")
    out = io.BytesIO()
    img.save(out, format="PNG")
    return out.getvalue()


def upscale_head(png: bytes, size: int) -> bytes:
    # Nearest neighbour keeps the pixelated look
    with Image.open(io.BytesIO(png)) as img:
        avatar = img.resize((size, size), Image.NEAREST)
    out = io.BytesIO()
    avatar.save(out, format="PNG")
    return out.getvalue()
