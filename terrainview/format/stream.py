from __future__ import annotations

import io
from typing import BinaryIO, Optional, Union


class ByteStream:
    """Forward-only byte reader with explicit end-of-stream signalling."""

    CHUNK_SIZE = 65536

    def __init__(self, source: Union[BinaryIO, bytes, bytearray]) -> None:
        if isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(bytes(source))
        self._source = source
        self._position = 0

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._position

    def read_byte(self) -> Optional[int]:
        """Return the next byte value, or None at end of stream."""
        chunk = self._source.read(1)
        if not chunk:
            return None
        self._position += 1
        return chunk[0]

    def read(self, count: int) -> bytes:
        """Read up to ``count`` bytes; shorter only at end of stream."""
        if count <= 0:
            return b""
        out = bytearray()
        while len(out) < count:
            chunk = self._source.read(min(count - len(out), self.CHUNK_SIZE))
            if not chunk:
                break
            out += chunk
        self._position += len(out)
        return bytes(out)

    def drain(self, chunk_size: int = CHUNK_SIZE) -> int:
        """Consume the rest of the stream and return how many bytes it held."""
        total = 0
        while True:
            chunk = self._source.read(chunk_size)
            if not chunk:
                break
            total += len(chunk)
        self._position += total
        return total

    def remaining(self) -> Optional[int]:
        """Bytes left in a seekable source, or None when unknown."""
        try:
            if not self._source.seekable():
                return None
            here = self._source.tell()
            end = self._source.seek(0, io.SEEK_END)
            self._source.seek(here)
        except (AttributeError, OSError):
            return None
        return max(0, end - here)
