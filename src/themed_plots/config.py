"""Runtime settings, read from THEMED_PLOTS_* environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from .theme import LAYOUT

ENV_OUTPUT_DIR = "THEMED_PLOTS_OUTPUT_DIR"
ENV_DPI = "THEMED_PLOTS_DPI"
ENV_FORMAT = "THEMED_PLOTS_FORMAT"

# Default output directory (relative to the working directory)
DEFAULT_OUTPUT_DIR = Path("static") / "img" / "charts"
DEFAULT_FORMAT = "svg"


@dataclass(frozen=True)
class Settings:
    output_dir: Path = DEFAULT_OUTPUT_DIR
    dpi: int = LAYOUT["dpi"]
    image_format: str = DEFAULT_FORMAT


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from ``environ`` (``os.environ`` by default)."""
    env = os.environ if environ is None else environ

    output_dir = Path(env.get(ENV_OUTPUT_DIR) or DEFAULT_OUTPUT_DIR)

    raw_dpi = env.get(ENV_DPI)
    dpi = LAYOUT["dpi"]
    if raw_dpi:
        try:
            dpi = int(raw_dpi)
        except ValueError:
            raise ValueError(f"{ENV_DPI} must be an integer, got {raw_dpi!r}") from None
        if dpi <= 0:
            raise ValueError(f"{ENV_DPI} must be positive, got {dpi}")

    image_format = (env.get(ENV_FORMAT) or DEFAULT_FORMAT).lstrip(".").lower()

    return Settings(output_dir=output_dir, dpi=dpi, image_format=image_format)
