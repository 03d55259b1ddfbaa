"""Tests for the heightmap header grammars."""

import pytest

from terrainview.errors import FormatError
from terrainview.format import (
    ByteStream,
    HeaderGrammar,
    encode_header,
    encode_legacy_header,
    parse_int,
    read_any_header,
    read_field,
    read_header,
    read_legacy_header,
)
from terrainview.rendering import build_colour_table, rasterize

from .helpers import make_header


class TestParseInt:
    @pytest.mark.parametrize(
        "text, expected",
        [("12", 12), ("12.0", 12), ("-3", -3), ("+5", 5), (" 7 ", 7), ("1e3", 1000), ("1.0e1", 10), ("0", 0)],
    )
    def test_accepts_whole_numbers(self, text, expected):
        assert parse_int("scale", text) == expected

    @pytest.mark.parametrize("text", ["12.5", "", "abc", "1e-1", "0x10", "1 2", "-"])
    def test_rejects_other_text(self, text):
        with pytest.raises(FormatError) as excinfo:
            parse_int("scale", text)
        assert excinfo.value.message == "not an integer"
        assert excinfo.value.field == "scale"
        assert excinfo.value.raw == text

    @pytest.mark.parametrize("text", ["1e999999999", "1" + "0" * 40, "-1e18"])
    def test_rejects_oversized_values(self, text):
        with pytest.raises(FormatError) as excinfo:
            parse_int("width", text)
        assert excinfo.value.message == "integer out of range"
        assert excinfo.value.field == "width"

    def test_accepts_large_in_range_values(self):
        assert parse_int("origin_x", "-999999999999999999") == -999999999999999999


class TestNullDelimitedHeader:
    def test_reads_all_fields(self):
        stream = ByteStream(b"abc\x0010\x00100\x00200\x002\x003\x00" + b"\x01\x02")
        header = read_header(stream)
        assert header == make_header(width=2, height=3)
        assert stream.read_byte() == 1

    def test_stream_left_at_first_sample(self):
        data = encode_header(make_header())
        stream = ByteStream(data + b"\xff")
        read_header(stream)
        assert stream.position == len(data)
        assert stream.read_byte() == 255
        assert stream.read_byte() is None

    def test_round_trip(self):
        header = make_header(seed="-1878033377675837610", scale=16, origin_x=-512, origin_z=-512, width=64, height=32)
        assert read_header(ByteStream(encode_header(header))) == header

    def test_round_trip_without_origin_z(self):
        header = make_header(origin_z=None)
        decoded = read_header(ByteStream(encode_header(header)))
        assert decoded.origin_z is None
        assert not decoded.has_origin_z
        assert decoded == header

    def test_empty_seed_allowed(self):
        header = read_header(ByteStream(b"\x001\x000\x000\x001\x001\x00"))
        assert header.seed == ""

    def test_decimal_text_accepted(self):
        header = read_header(ByteStream(b"s\x0010.0\x00100\x00200\x002\x002\x00"))
        assert header.scale == 10

    def test_fractional_field_names_field(self):
        with pytest.raises(FormatError) as excinfo:
            read_header(ByteStream(b"s\x0012.5\x00100\x00200\x002\x002\x00"))
        assert excinfo.value.field == "scale"
        assert excinfo.value.raw == "12.5"
        assert "not an integer" in str(excinfo.value)

    def test_empty_required_field_rejected(self):
        with pytest.raises(FormatError) as excinfo:
            read_header(ByteStream(b"s\x0010\x00100\x00200\x00\x002\x00"))
        assert excinfo.value.field == "width"

    def test_unterminated_field(self):
        with pytest.raises(FormatError) as excinfo:
            read_header(ByteStream(b"seed\x0010"))
        assert excinfo.value.message == "unterminated header field"
        assert excinfo.value.field == "scale"

    def test_empty_stream(self):
        with pytest.raises(FormatError) as excinfo:
            read_field(ByteStream(b""), "seed")
        assert excinfo.value.field == "seed"

    @pytest.mark.parametrize("field", ["scale", "width", "height"])
    def test_non_positive_dimensions_rejected(self, field):
        values = {"scale": 10, "width": 2, "height": 2}
        values[field] = 0
        data = encode_header(make_header(**values))
        with pytest.raises(FormatError) as excinfo:
            read_header(ByteStream(data))
        assert excinfo.value.field == field

    def test_negative_origin_allowed(self):
        header = read_header(ByteStream(encode_header(make_header(origin_x=-5000, origin_z=-1))))
        assert header.origin_x == -5000
        assert header.origin_z == -1


class TestLengthPrefixedHeader:
    def test_reads_width_and_height(self):
        stream = ByteStream(b"41024" + b"3256" + b"FT")
        header = read_legacy_header(stream)
        assert (header.width, header.height) == (1024, 256)
        assert header.scale == 1
        assert header.origin_z is None
        assert header.seed == ""
        assert stream.read(2) == b"FT"

    def test_matches_encoder(self):
        header = read_any_header(ByteStream(encode_legacy_header(7, 12345)), HeaderGrammar.LENGTH_PREFIXED)
        assert (header.width, header.height) == (7, 12345)

    def test_bad_length_prefix(self):
        with pytest.raises(FormatError) as excinfo:
            read_legacy_header(ByteStream(b"x12"))
        assert excinfo.value.field == "width"

    def test_zero_length_prefix(self):
        with pytest.raises(FormatError):
            read_legacy_header(ByteStream(b"0"))

    def test_truncated_digits(self):
        with pytest.raises(FormatError) as excinfo:
            read_legacy_header(ByteStream(b"41"))
        assert excinfo.value.message == "unterminated header field"

    def test_missing_height(self):
        with pytest.raises(FormatError) as excinfo:
            read_legacy_header(ByteStream(b"14"))
        assert excinfo.value.field == "height"

    def test_non_numeric_digits(self):
        with pytest.raises(FormatError) as excinfo:
            read_legacy_header(ByteStream(b"2ab11"))
        assert excinfo.value.message == "not an integer"


def test_huge_header_then_short_samples_is_a_format_error():
    stream = ByteStream(b"s\x001\x000\x000\x001000000\x001000000\x00" + b"\x01\x02")
    header = read_header(stream)
    assert (header.width, header.height) == (10**6, 10**6)
    with pytest.raises(FormatError) as excinfo:
        rasterize(header.width, header.height, stream, build_colour_table())
    assert excinfo.value.message == "truncated sample data"
