from pathlib import Path
from typing import Callable, Iterable

import pytest
from PIL import ImageFont

from terrainview.format import HeightmapHeader, encode_heightmap


@pytest.fixture
def write_heightmap(tmp_path: Path) -> Callable[..., Path]:
    def write(name: str, header: HeightmapHeader, samples: Iterable[int]) -> Path:
        path = tmp_path / name
        path.write_bytes(encode_heightmap(header, samples))
        return path

    return write


@pytest.fixture
def default_font():
    return ImageFont.load_default()
