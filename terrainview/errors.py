from __future__ import annotations

from typing import Optional


class TerrainViewError(Exception):
    """Base class for errors raised while converting heightmaps."""


class FormatError(TerrainViewError, ValueError):
    """Input file does not follow the heightmap format."""

    def __init__(self, message: str, field: Optional[str] = None, raw: Optional[str] = None) -> None:
        self.message = message
        self.field = field
        self.raw = raw
        details = []
        if field is not None:
            details.append(f"field={field}")
        if raw is not None:
            details.append(f"value={raw!r}")
        text = message if not details else f"{message} ({', '.join(details)})"
        super().__init__(text)


class ResourceError(TerrainViewError, RuntimeError):
    """An input could not be read or an output could not be written."""

    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.message = message
        self.path = path
        super().__init__(f"{message}: {path}" if path else message)
