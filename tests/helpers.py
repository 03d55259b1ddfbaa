import io
from typing import Optional

from terrainview.format import HeightmapHeader


def make_header(
    seed: str = "abc",
    scale: int = 10,
    origin_x: int = 100,
    origin_z: Optional[int] = 200,
    width: int = 2,
    height: int = 2,
) -> HeightmapHeader:
    return HeightmapHeader(seed, scale, origin_x, origin_z, width, height)


class ChunkyReader(io.RawIOBase):
    """Non-seekable reader returning at most two bytes per call."""

    def __init__(self, data: bytes) -> None:
        self._data = data

    def readable(self) -> bool:
        return True

    def read(self, size=-1):
        size = 2 if size < 0 else min(size, 2)
        chunk, self._data = self._data[:size], self._data[size:]
        return chunk
