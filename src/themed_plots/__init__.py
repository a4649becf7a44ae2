"""themed-plots: matplotlib charts that take their colors from a web UI theme."""

from .builder import build
from .charts import figure, line, render, save
from .config import Settings, load_settings
from .errors import EmptyDataset, MissingColorKey, ThemedPlotError
from .plotspec import Background, LineMark, PlotSpec, PointMark
from .providers import (
    CssVariableProvider,
    StaticThemeProvider,
    ThemeColorProvider,
    theme_colors,
)
from .style import rc_params, style_context
from .theme import BOOTSTRAP_COLORS, FONTS, LAYOUT, REQUIRED_COLORS

__all__ = [
    "build",
    "figure",
    "line",
    "render",
    "save",
    "Settings",
    "load_settings",
    "EmptyDataset",
    "MissingColorKey",
    "ThemedPlotError",
    "Background",
    "LineMark",
    "PlotSpec",
    "PointMark",
    "CssVariableProvider",
    "StaticThemeProvider",
    "ThemeColorProvider",
    "theme_colors",
    "rc_params",
    "style_context",
    "BOOTSTRAP_COLORS",
    "FONTS",
    "LAYOUT",
    "REQUIRED_COLORS",
]
