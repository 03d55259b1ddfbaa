from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .format.types import HeaderGrammar
from .metadata import DEFAULT_OUTPUT_PREFIX
from .rendering.palette import ColourMode

FONT_ENV_VAR = "TERRAINVIEW_FONT"
LINK_BASE_ENV_VAR = "TERRAINVIEW_LINK_BASE"
LOG_LEVEL_ENV_VAR = "TERRAINVIEW_LOG_LEVEL"

DEFAULT_EXTENSION = ".txt"
DEFAULT_PROCESSED_DIR = "processed"
DEFAULT_TEXT_SIZE = 18


@dataclass
class RenderSettings:
    input_dir: str = "."
    output_dir: Optional[str] = None
    processed_dir: str = DEFAULT_PROCESSED_DIR
    extension: str = DEFAULT_EXTENSION
    colour_mode: ColourMode = ColourMode.GRADIENT
    grammar: HeaderGrammar = HeaderGrammar.NULL_DELIMITED
    output_prefix: str = DEFAULT_OUTPUT_PREFIX
    annotate: bool = True
    font_path: Optional[str] = None
    text_size: int = DEFAULT_TEXT_SIZE
    link_base: str = ""
    fail_fast: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "RenderSettings":
        env = os.environ if environ is None else environ
        settings = cls()
        if env.get(FONT_ENV_VAR):
            settings.font_path = env[FONT_ENV_VAR]
        if env.get(LINK_BASE_ENV_VAR):
            settings.link_base = env[LINK_BASE_ENV_VAR]
        if env.get(LOG_LEVEL_ENV_VAR):
            settings.log_level = env[LOG_LEVEL_ENV_VAR].upper()
        overrides = {key: value for key, value in overrides.items() if value is not None}
        return replace(settings, **overrides)

    @property
    def resolved_output_dir(self) -> str:
        return self.output_dir or self.input_dir

    @property
    def resolved_processed_dir(self) -> str:
        if os.path.isabs(self.processed_dir):
            return self.processed_dir
        return os.path.join(self.input_dir, self.processed_dir)
