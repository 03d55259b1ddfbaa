from .encoding import (
    encode_field,
    encode_header,
    encode_heightmap,
    encode_legacy_header,
    encode_length_prefixed_int,
    encode_samples,
)
from .header import (
    parse_int,
    read_any_header,
    read_field,
    read_header,
    read_int_field,
    read_legacy_header,
    read_length_prefixed_int,
    read_optional_int_field,
)
from .stream import ByteStream
from .types import HeaderGrammar, HeightmapHeader

__all__ = [
    "ByteStream",
    "encode_field",
    "encode_header",
    "encode_heightmap",
    "encode_legacy_header",
    "encode_length_prefixed_int",
    "encode_samples",
    "HeaderGrammar",
    "HeightmapHeader",
    "parse_int",
    "read_any_header",
    "read_field",
    "read_header",
    "read_int_field",
    "read_legacy_header",
    "read_length_prefixed_int",
    "read_optional_int_field",
]
