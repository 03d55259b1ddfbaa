import pytest

from terrainview.metadata import Extents, compute_extents, format_km, output_name

from .helpers import make_header


def test_extents():
    extents = compute_extents(make_header(scale=10, origin_x=100, origin_z=200, width=2, height=3))
    assert extents == Extents(real_width=20, end_x=120, real_height=30, end_z=230)


def test_extents_without_origin_z():
    extents = compute_extents(make_header(origin_z=None))
    assert extents.end_z is None
    assert extents.end_x == 120


def test_output_name_is_deterministic():
    header = make_header()
    assert output_name(header) == "simplex_abc_10_100_200.png"
    assert output_name(make_header()) == output_name(header)


def test_output_name_without_origin_z():
    assert output_name(make_header(origin_z=None)) == "simplex_abc_10_100.png"


def test_output_name_prefix_and_separators():
    header = make_header(seed="a/b\\c", origin_x=-512, origin_z=-512)
    assert output_name(header, prefix="map") == "map_a_b_c_10_-512_-512.png"


@pytest.mark.parametrize(
    "blocks, expected",
    [(12000, "12"), (10500, "10.5"), (1050, "1.1"), (250, "0.3"), (20, "0"), (16384, "16.4")],
)
def test_format_km(blocks, expected):
    assert format_km(blocks) == expected
