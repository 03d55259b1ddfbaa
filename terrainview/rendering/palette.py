from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Tuple

RGB = Tuple[int, int, int]
ColourTable = Tuple[RGB, ...]

WATER_TOP = 51
LOWLAND_START = 52
LOWLAND_END = 153
HIGHLAND_START = 154
HIGHLAND_END = 255

# Green (102,204,0) -> yellow (255,255,0)
LOWLAND_FROM: RGB = (102, 204, 0)
LOWLAND_TO: RGB = (255, 255, 0)

SENTINEL_COLOURS: Dict[int, RGB] = {
    0: (0, 0, 139),  # water surface
    1: (0, 0, 0),  # no ground found
    2: (96, 96, 96),  # bedrock
}


class ColourMode(str, Enum):
    GRADIENT = "gradient"
    SENTINEL = "sentinel"
    GREYSCALE = "greyscale"


def _check_sample(value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"Sample value out of range: {value}")


def gradient_colour(value: int) -> RGB:
    """Map a sample to the blue / green-yellow / yellow-red terrain gradient."""
    _check_sample(value)
    if value < LOWLAND_START:
        return (0, int((1 - (float(value) / float(WATER_TOP))) * 128), 255)
    if value < HIGHLAND_START:
        dist = float(value - LOWLAND_START) / float(LOWLAND_END - LOWLAND_START)
        return (
            int(((LOWLAND_TO[0] - LOWLAND_FROM[0]) * dist) + LOWLAND_FROM[0]),
            int(((LOWLAND_TO[1] - LOWLAND_FROM[1]) * dist) + LOWLAND_FROM[1]),
            0,
        )
    dist = float(value - HIGHLAND_START) / float(HIGHLAND_END - HIGHLAND_START)
    return (255, int((1 - dist) * 255), 0)


def sentinel_colour(value: int) -> RGB:
    """Gradient colour with fixed colours for the marker values 0, 1 and 2."""
    _check_sample(value)
    sentinel = SENTINEL_COLOURS.get(value)
    if sentinel is not None:
        return sentinel
    return gradient_colour(value)


def greyscale_colour(value: int) -> RGB:
    _check_sample(value)
    return (value, value, value)


COLOUR_FUNCTIONS: Dict[ColourMode, Callable[[int], RGB]] = {
    ColourMode.GRADIENT: gradient_colour,
    ColourMode.SENTINEL: sentinel_colour,
    ColourMode.GREYSCALE: greyscale_colour,
}


def colour_function(mode: ColourMode) -> Callable[[int], RGB]:
    try:
        return COLOUR_FUNCTIONS[ColourMode(mode)]
    except ValueError as exc:
        raise ValueError(f"Unknown colour mode: {mode}") from exc


def build_colour_table(mode: ColourMode = ColourMode.GRADIENT) -> ColourTable:
    """Evaluate the colour law once for every possible sample value."""
    func = colour_function(mode)
    return tuple(func(value) for value in range(256))
