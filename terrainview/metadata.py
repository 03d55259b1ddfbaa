from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .format.types import HeightmapHeader

DEFAULT_OUTPUT_PREFIX = "simplex"


@dataclass(frozen=True)
class Extents:
    """Real-world size and end coordinates covered by a heightmap."""

    real_width: int
    end_x: int
    real_height: int
    end_z: Optional[int]


def compute_extents(header: HeightmapHeader) -> Extents:
    real_width = header.width * header.scale
    real_height = header.height * header.scale
    end_z = None
    if header.origin_z is not None:
        end_z = header.origin_z + real_height
    return Extents(
        real_width=real_width,
        end_x=header.origin_x + real_width,
        real_height=real_height,
        end_z=end_z,
    )


def format_km(blocks: int) -> str:
    """Render a block count as kilometres to one decimal place.

    Halves round away from zero and a trailing ``.0`` is dropped.
    """
    km = (Decimal(blocks) / Decimal(1000)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    if km == km.to_integral_value():
        return str(int(km))
    return str(km)


def _safe_component(text: str) -> str:
    return text.replace("/", "_").replace("\\", "_")


def output_name(header: HeightmapHeader, prefix: str = DEFAULT_OUTPUT_PREFIX) -> str:
    """Deterministic image file name for a header.

    Headers with the same seed, scale and origin map to the same name.
    """
    parts = [prefix, _safe_component(header.seed), str(header.scale), str(header.origin_x)]
    if header.origin_z is not None:
        parts.append(str(header.origin_z))
    return "_".join(parts) + ".png"
