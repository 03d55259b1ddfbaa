from __future__ import annotations

from PIL import Image

from .rasterizer import PixelBuffer


def buffer_to_image(buffer: PixelBuffer) -> Image.Image:
    buffer.validate()
    img = Image.new("RGB", (buffer.width, buffer.height))
    img.putdata(buffer.pixels)
    return img


def save_png(img: Image.Image, path: str) -> None:
    img.save(path, "PNG")
