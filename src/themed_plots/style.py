"""Translate theme.py constants into transparent matplotlib rcParams."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Mapping

import matplotlib as mpl

from .theme import FONTS, LAYOUT, TEXT_COLORS, TRANSPARENT


def rc_params(colors: Mapping[str, str] | None = None) -> dict:
    """Return rcParams for a chart with no canvas or panel fill.

    Labels and titles use ``colors["body_color"]``. Tick marks and spines use
    ``colors["border_color"]``. Theme defaults fill in whatever is missing.
    """
    colors = colors or {}
    text = colors.get("body_color") or TEXT_COLORS["text"]
    border = colors.get("border_color") or TEXT_COLORS["border"]
    ticks = colors.get("border_color") or TEXT_COLORS["muted"]

    return {
        # Figure: nothing painted behind the axes
        "figure.figsize": LAYOUT["figsize"],
        "figure.dpi": LAYOUT["dpi"],
        "figure.facecolor": TRANSPARENT,
        "figure.edgecolor": TRANSPARENT,
        "savefig.dpi": LAYOUT["dpi"],
        "savefig.facecolor": TRANSPARENT,
        "savefig.edgecolor": TRANSPARENT,
        "savefig.transparent": True,
        "savefig.bbox": "tight",
        "savefig.pad_inches": 0.3,

        # Axes
        "axes.facecolor": TRANSPARENT,
        "axes.edgecolor": border,
        "axes.linewidth": LAYOUT["spine_width"],
        "axes.titlesize": LAYOUT["title_size"],
        "axes.titleweight": "bold",
        "axes.titlecolor": text,
        "axes.titlepad": 16,
        "axes.labelsize": LAYOUT["label_size"],
        "axes.labelcolor": text,
        "axes.labelpad": 8,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.grid": False,

        # Ticks
        "xtick.labelsize": LAYOUT["tick_size"],
        "ytick.labelsize": LAYOUT["tick_size"],
        "xtick.color": ticks,
        "ytick.color": ticks,
        "xtick.labelcolor": text,
        "ytick.labelcolor": text,
        "xtick.direction": "out",
        "ytick.direction": "out",
        "xtick.major.width": LAYOUT["spine_width"],
        "ytick.major.width": LAYOUT["spine_width"],

        # Lines
        "lines.linewidth": LAYOUT["line_width"],

        # Legend: no box, the page shows through
        "legend.frameon": False,
        "legend.fontsize": LAYOUT["tick_size"],
        "legend.labelcolor": text,

        # Font
        "font.family": "sans-serif",
        "font.sans-serif": FONTS["sans"],
        "font.size": LAYOUT["tick_size"],
        "text.color": text,
    }


@contextmanager
def style_context(colors: Mapping[str, str] | None = None) -> Iterator[None]:
    """Apply the transparent style inside a ``with`` block only."""
    with mpl.rc_context(rc_params(colors)):
        yield
