from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

import structlog
from PIL import Image

from .config import RenderSettings
from .errors import ResourceError
from .format.header import read_any_header
from .format.stream import ByteStream
from .format.types import HeightmapHeader
from .metadata import Extents, compute_extents, output_name
from .rendering.overlay import AnyFont, caption_font, caption_lines, draw_caption
from .rendering.palette import ColourTable, build_colour_table
from .rendering.rasterizer import RasterResult, rasterize
from .rendering.renderer import buffer_to_image, save_png

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RenderResult:
    source_path: str
    header: HeightmapHeader
    extents: Extents
    output_name: str
    output_path: str
    trailing_bytes: int = 0
    archived_path: Optional[str] = None


class HeightmapPipeline:
    """Decodes, colours and writes one heightmap file at a time."""

    def __init__(
        self,
        settings: Optional[RenderSettings] = None,
        colour_table: Optional[ColourTable] = None,
        font: Optional[AnyFont] = None,
    ) -> None:
        self.settings = settings or RenderSettings()
        self.colour_table = colour_table or build_colour_table(self.settings.colour_mode)
        self._font = font

    @property
    def font(self) -> AnyFont:
        if self._font is None:
            try:
                self._font = caption_font(self.settings.text_size, self.settings.font_path)
            except OSError as exc:
                raise ResourceError("Cannot load font", self.settings.font_path) from exc
        return self._font

    def decode(self, stream: ByteStream) -> Tuple[HeightmapHeader, RasterResult]:
        header = read_any_header(stream, self.settings.grammar)
        logger.debug(
            "Header decoded",
            seed=header.seed,
            scale=header.scale,
            origin_x=header.origin_x,
            origin_z=header.origin_z,
            width=header.width,
            height=header.height,
        )
        raster = rasterize(header.width, header.height, stream, self.colour_table)
        return header, raster

    def render(self, header: HeightmapHeader, raster: RasterResult) -> Image.Image:
        img = buffer_to_image(raster.buffer)
        if self.settings.annotate:
            draw_caption(img, caption_lines(header, compute_extents(header)), self.font)
        return img

    def process_file(self, path: str) -> RenderResult:
        """Convert one input file into a PNG and describe the result."""
        try:
            with open(path, "rb") as handle:
                header, raster = self.decode(ByteStream(handle))
        except OSError as exc:
            raise ResourceError("Cannot read input", path) from exc
        img = self.render(header, raster)
        name = output_name(header, self.settings.output_prefix)
        out_dir = self.settings.resolved_output_dir
        out_path = os.path.join(out_dir, name)
        try:
            os.makedirs(out_dir, exist_ok=True)
            save_png(img, out_path)
        except OSError as exc:
            raise ResourceError("Cannot write output", out_path) from exc
        logger.info("Image written", source=path, output=out_path)
        return RenderResult(
            source_path=path,
            header=header,
            extents=compute_extents(header),
            output_name=name,
            output_path=out_path,
            trailing_bytes=raster.trailing_bytes,
        )
