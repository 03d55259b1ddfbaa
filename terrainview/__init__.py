from .config import RenderSettings
from .errors import FormatError, ResourceError, TerrainViewError
from .format import ByteStream, HeaderGrammar, HeightmapHeader, read_header
from .pipeline import HeightmapPipeline, RenderResult
from .rendering import ColourMode, PixelBuffer, build_colour_table, rasterize

__version__ = "0.1.0"

__all__ = [
    "build_colour_table",
    "ByteStream",
    "ColourMode",
    "FormatError",
    "HeaderGrammar",
    "HeightmapHeader",
    "HeightmapPipeline",
    "PixelBuffer",
    "rasterize",
    "read_header",
    "RenderResult",
    "RenderSettings",
    "ResourceError",
    "TerrainViewError",
]
