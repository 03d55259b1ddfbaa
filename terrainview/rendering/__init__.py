from .overlay import caption_font, caption_lines, draw_caption
from .palette import (
    ColourMode,
    ColourTable,
    RGB,
    build_colour_table,
    colour_function,
    gradient_colour,
    greyscale_colour,
    sentinel_colour,
)
from .rasterizer import PixelBuffer, RasterResult, rasterize
from .renderer import buffer_to_image, save_png

__all__ = [
    "buffer_to_image",
    "build_colour_table",
    "caption_font",
    "caption_lines",
    "colour_function",
    "ColourMode",
    "ColourTable",
    "draw_caption",
    "gradient_colour",
    "greyscale_colour",
    "PixelBuffer",
    "RasterResult",
    "rasterize",
    "RGB",
    "save_png",
    "sentinel_colour",
]
