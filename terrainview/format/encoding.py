from __future__ import annotations

from typing import Iterable, Optional

from .header import FIELD_TERMINATOR
from .types import HeightmapHeader


def encode_field(text: str) -> bytes:
    """Encode one header field with its NUL terminator."""
    data = text.encode("utf-8")
    if FIELD_TERMINATOR in data:
        raise ValueError("Header fields cannot contain NUL bytes")
    return data + bytes([FIELD_TERMINATOR])


def _optional_text(value: Optional[int]) -> str:
    return "" if value is None else str(value)


def encode_header(header: HeightmapHeader) -> bytes:
    """Encode a header in the six-field NUL-delimited grammar."""
    out = bytearray()
    out += encode_field(header.seed)
    out += encode_field(str(header.scale))
    out += encode_field(str(header.origin_x))
    out += encode_field(_optional_text(header.origin_z))
    out += encode_field(str(header.width))
    out += encode_field(str(header.height))
    return bytes(out)


def encode_length_prefixed_int(value: int) -> bytes:
    """Encode an integer as a digit count byte followed by its digits."""
    digits = str(value)
    if value < 0 or len(digits) > 9:
        raise ValueError("Length-prefixed values must be non-negative with at most 9 digits")
    return str(len(digits)).encode("ascii") + digits.encode("ascii")


def encode_legacy_header(width: int, height: int) -> bytes:
    return encode_length_prefixed_int(width) + encode_length_prefixed_int(height)


def encode_samples(samples: Iterable[int]) -> bytes:
    """Pack sample values (column-major, bottom row first) into bytes."""
    out = bytearray()
    for value in samples:
        if not 0 <= value <= 255:
            raise ValueError(f"Sample out of range: {value}")
        out.append(value)
    return bytes(out)


def encode_heightmap(header: HeightmapHeader, samples: Iterable[int]) -> bytes:
    """Build a complete heightmap file body."""
    return encode_header(header) + encode_samples(samples)
