from __future__ import annotations

from typing import List, Optional, Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from ..format.types import HeightmapHeader
from ..metadata import Extents, format_km

TEXT_COLOUR = (0, 0, 0)
MARGIN = 5
LINE_SPACING = 5

# Names ImageFont.truetype resolves against the system font directories.
CAPTION_FONT_NAMES = ("arial.ttf", "DejaVuSans.ttf", "LiberationSans-Regular.ttf", "FreeSans.ttf")

AnyFont = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def caption_font(size: int, path: Optional[str] = None) -> AnyFont:
    """Load the caption font.

    An explicit path must load. Otherwise the first installed font from
    CAPTION_FONT_NAMES is used, then Pillow's built-in bitmap font.
    """
    if path:
        return ImageFont.truetype(path, size)
    for name in CAPTION_FONT_NAMES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default()


def caption_lines(header: HeightmapHeader, extents: Extents) -> List[str]:
    lines = [
        f"Seed: {header.seed}",
        f"1px = {header.scale} blocks",
        f"X: {header.origin_x} to {extents.end_x} ({format_km(extents.real_width)}km)",
    ]
    if header.origin_z is not None and extents.end_z is not None:
        lines.append(f"Z: {header.origin_z} to {extents.end_z} ({format_km(extents.real_height)}km)")
    return lines


def _text_height(draw: ImageDraw.ImageDraw, text: str, font: AnyFont) -> int:
    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    return abs(bottom - top)


def draw_caption(
    img: Image.Image,
    lines: List[str],
    font: AnyFont,
    colour: Tuple[int, int, int] = TEXT_COLOUR,
) -> int:
    """Draw lines top-down from the top-left corner; return the final offset."""
    draw = ImageDraw.Draw(img)
    offset = MARGIN
    for line in lines:
        height = _text_height(draw, line, font)
        draw.text((MARGIN, offset), line, font=font, fill=colour)
        offset += height + LINE_SPACING
    return offset
