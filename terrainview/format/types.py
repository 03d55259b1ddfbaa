from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..errors import FormatError


class HeaderGrammar(str, Enum):
    NULL_DELIMITED = "null"
    LENGTH_PREFIXED = "length-prefixed"


@dataclass(frozen=True)
class HeightmapHeader:
    """Metadata preceding the sample bytes of a heightmap file.

    ``origin_z`` is None when the file leaves that field empty.
    """

    seed: str
    scale: int
    origin_x: int
    origin_z: Optional[int]
    width: int
    height: int

    def validate(self) -> None:
        """Reject dimensions that cannot describe a raster."""
        for name in ("scale", "width", "height"):
            value = getattr(self, name)
            if value <= 0:
                raise FormatError("must be a positive integer", field=name, raw=str(value))

    @property
    def has_origin_z(self) -> bool:
        return self.origin_z is not None

    @property
    def sample_count(self) -> int:
        return self.width * self.height
