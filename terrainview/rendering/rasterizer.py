from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

import structlog

from ..errors import FormatError
from ..format.stream import ByteStream
from .palette import RGB, ColourTable

logger = structlog.get_logger(__name__)


@dataclass
class PixelBuffer:
    """Row-major RGB pixel grid; row 0 is the top of the image."""

    width: int
    height: int
    pixels: List[RGB]

    @classmethod
    def blank(cls, width: int, height: int, fill: RGB = (0, 0, 0)) -> "PixelBuffer":
        return cls(width, height, [fill] * (width * height))

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Width and height must be greater than zero")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("Pixel count must equal width * height")

    def _index(self, column: int, row: int) -> int:
        if not (0 <= column < self.width and 0 <= row < self.height):
            raise IndexError(f"Pixel ({column}, {row}) outside {self.width}x{self.height}")
        return row * self.width + column

    def get(self, column: int, row: int) -> RGB:
        return self.pixels[self._index(column, row)]

    def set(self, column: int, row: int, colour: RGB) -> None:
        self.pixels[self._index(column, row)] = colour

    def column(self, column: int) -> List[RGB]:
        """Return one column from top to bottom."""
        return [self.get(column, row) for row in range(self.height)]

    def rows(self) -> Iterator[List[RGB]]:
        for row in range(self.height):
            start = row * self.width
            yield self.pixels[start : start + self.width]


@dataclass(frozen=True)
class RasterResult:
    buffer: PixelBuffer
    trailing_bytes: int = 0


def rasterize(width: int, height: int, stream: ByteStream, table: ColourTable) -> RasterResult:
    """Colour ``width * height`` samples into a pixel buffer.

    Samples arrive column by column, each column running from the bottom
    row up, so sample ``i`` of column ``x`` lands on row ``height - 1 - i``.
    """
    if len(table) != 256:
        raise ValueError("Colour table must have 256 entries")
    if width <= 0 or height <= 0:
        raise ValueError("Width and height must be greater than zero")
    expected = width * height
    available = stream.remaining()
    if available is not None and available < expected:
        raise FormatError("truncated sample data", raw=f"{available} of {expected} samples")
    # The buffer is allocated only once every sample is in hand.
    samples = stream.read(expected)
    if len(samples) < expected:
        raise FormatError("truncated sample data", raw=f"{len(samples)} of {expected} samples")
    buffer = PixelBuffer.blank(width, height)
    pixels = buffer.pixels
    for x in range(width):
        column = samples[x * height : (x + 1) * height]
        for i, sample in enumerate(column):
            pixels[(height - 1 - i) * width + x] = table[sample]
    trailing = stream.drain()
    if trailing:
        logger.warning("Trailing sample data ignored", trailing_bytes=trailing, width=width, height=height)
    return RasterResult(buffer, trailing)
