from __future__ import annotations

import re
from decimal import ROUND_DOWN, Decimal, InvalidOperation
from typing import Optional

from ..errors import FormatError
from .stream import ByteStream
from .types import HeaderGrammar, HeightmapHeader

FIELD_TERMINATOR = 0x00
MAX_INT_DIGITS = 18

_NUMERIC_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


def read_field(stream: ByteStream, name: str) -> str:
    """Read one NUL-terminated header field and return its text."""
    raw = bytearray()
    while True:
        value = stream.read_byte()
        if value is None:
            raise FormatError("unterminated header field", field=name, raw=raw.decode("utf-8", "replace"))
        if value == FIELD_TERMINATOR:
            break
        raw.append(value)
    return raw.decode("utf-8", "replace")


def parse_int(name: str, text: str) -> int:
    """Parse decimal text that must hold a whole number.

    ``"12"``, ``"12.0"`` and ``"1e3"`` are accepted, ``"12.5"`` is not.
    """
    stripped = text.strip()
    if not _NUMERIC_RE.match(stripped):
        raise FormatError("not an integer", field=name, raw=text)
    try:
        value = Decimal(stripped)
    except InvalidOperation as exc:
        raise FormatError("not an integer", field=name, raw=text) from exc
    if value.adjusted() >= MAX_INT_DIGITS:
        raise FormatError("integer out of range", field=name, raw=text)
    if value.to_integral_value(rounding=ROUND_DOWN) != value:
        raise FormatError("not an integer", field=name, raw=text)
    return int(value)


def read_int_field(stream: ByteStream, name: str) -> int:
    return parse_int(name, read_field(stream, name))


def read_optional_int_field(stream: ByteStream, name: str) -> Optional[int]:
    """Like read_int_field, but an empty field means the value is absent."""
    text = read_field(stream, name)
    if text == "":
        return None
    return parse_int(name, text)


def read_header(stream: ByteStream) -> HeightmapHeader:
    """Read the six-field NUL-delimited header.

    The stream is left positioned at the first sample byte.
    """
    header = HeightmapHeader(
        seed=read_field(stream, "seed"),
        scale=read_int_field(stream, "scale"),
        origin_x=read_int_field(stream, "origin_x"),
        origin_z=read_optional_int_field(stream, "origin_z"),
        width=read_int_field(stream, "width"),
        height=read_int_field(stream, "height"),
    )
    header.validate()
    return header


def read_length_prefixed_int(stream: ByteStream, name: str) -> int:
    """Read a digit count byte followed by that many decimal digits."""
    count_byte = stream.read_byte()
    if count_byte is None:
        raise FormatError("unterminated header field", field=name)
    count_text = chr(count_byte)
    if not ("1" <= count_text <= "9"):
        raise FormatError("invalid length prefix", field=name, raw=count_text)
    count = int(count_text)
    raw = stream.read(count)
    if len(raw) < count:
        raise FormatError("unterminated header field", field=name, raw=raw.decode("latin-1"))
    return parse_int(name, raw.decode("latin-1"))


def read_legacy_header(stream: ByteStream) -> HeightmapHeader:
    """Read the width/height-only length-prefixed header.

    Legacy files carry no provenance: the result is unscaled, starts at x=0
    and has no z origin.
    """
    width = read_length_prefixed_int(stream, "width")
    height = read_length_prefixed_int(stream, "height")
    header = HeightmapHeader(seed="", scale=1, origin_x=0, origin_z=None, width=width, height=height)
    header.validate()
    return header


def read_any_header(stream: ByteStream, grammar: HeaderGrammar = HeaderGrammar.NULL_DELIMITED) -> HeightmapHeader:
    if grammar == HeaderGrammar.LENGTH_PREFIXED:
        return read_legacy_header(stream)
    return read_header(stream)
