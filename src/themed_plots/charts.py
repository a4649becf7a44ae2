"""Draw PlotSpecs with matplotlib: figure(), render(), save(), line()."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping, Sequence

import matplotlib.pyplot as plt
import numpy as np

from .builder import build
from .config import Settings, load_settings
from .plotspec import Background, LineMark, PlotSpec, PointMark
from .style import style_context

log = logging.getLogger(__name__)


def figure(
    figsize: tuple[float, float] | None = None,
    colors: Mapping[str, str] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Create a styled (fig, ax) pair with see-through patches."""
    with style_context(colors):
        fig, ax = plt.subplots(figsize=figsize)
    clear_background(fig, ax)
    return fig, ax


def clear_background(fig: plt.Figure, ax: plt.Axes, background: Background | None = None) -> None:
    """Remove canvas and panel fills (and grid lines) from a figure."""
    background = background or Background()
    fig.patch.set_facecolor(background.figure_facecolor)
    fig.patch.set_alpha(0.0)
    ax.patch.set_facecolor(background.axes_facecolor)
    ax.patch.set_alpha(0.0)
    ax.grid(background.grid)


def _x_positions(xs: Sequence[Any], ax: plt.Axes) -> np.ndarray:
    # Categorical x values go at 0..n-1 with their labels as ticks
    if any(isinstance(v, str) for v in xs):
        positions = np.arange(len(xs))
        ax.set_xticks(positions)
        ax.set_xticklabels([str(v) for v in xs])
        return positions
    return np.asarray(xs)


def render(
    plot_spec: PlotSpec,
    ax: plt.Axes | None = None,
    *,
    figsize: tuple[float, float] | None = None,
    colors: Mapping[str, str] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Draw every mark of ``plot_spec`` onto ``ax`` (a new figure if None).

    ``colors`` styles text and spines (see style.rc_params). Marks always use
    the colors already stored in the PlotSpec.
    """
    with style_context(colors):
        if ax is None:
            fig, ax = plt.subplots(figsize=figsize)
        else:
            fig = ax.figure

        x = _x_positions(plot_spec.xs, ax)
        y = np.asarray(plot_spec.ys)

        for mark in plot_spec.marks:
            if isinstance(mark, LineMark):
                ax.plot(x, y, color=mark.stroke, linewidth=mark.width, zorder=2)
            elif isinstance(mark, PointMark):
                ax.scatter(
                    x, y,
                    s=mark.size,
                    facecolors=mark.fill,
                    edgecolors=mark.edge,
                    zorder=3,
                )
            else:
                raise TypeError(f"unsupported mark: {mark!r}")

        if plot_spec.title:
            ax.set_title(plot_spec.title)
        if plot_spec.xlabel:
            ax.set_xlabel(plot_spec.xlabel)
        if plot_spec.ylabel:
            ax.set_ylabel(plot_spec.ylabel)

    clear_background(fig, ax, plot_spec.background)
    log.debug("rendered %d marks over %d records", len(plot_spec.marks), len(plot_spec.data))
    return fig, ax


def save(
    fig: plt.Figure,
    filename: str,
    output_dir: str | Path | None = None,
    settings: Settings | None = None,
) -> Path:
    """Save a figure with a transparent canvas and close it.

    Files go to the configured output directory unless ``output_dir`` is
    given. A filename without a suffix gets the configured image format.
    Returns the path to the saved file.
    """
    settings = settings or load_settings()
    dest = Path(output_dir) if output_dir else settings.output_dir
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename
    if not path.suffix:
        path = path.with_suffix(f".{settings.image_format}")
    with style_context():
        fig.savefig(path, dpi=settings.dpi, transparent=True)
    plt.close(fig)
    log.info("Wrote %s", path)
    return path


def line(
    dataset: Sequence[Any],
    colors: Mapping[str, str],
    *,
    x: str = "x",
    y: str = "y",
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Themed line-and-points chart in one call; saved if ``filename`` is set."""
    plot_spec = build(
        dataset, colors, x=x, y=y, title=title, xlabel=xlabel, ylabel=ylabel,
    )
    fig, ax = render(plot_spec, figsize=figsize, colors=colors)

    if filename:
        save(fig, filename, output_dir)

    return fig, ax
