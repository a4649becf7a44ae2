"""Build a PlotSpec from a dataset and a set of theme colors."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .errors import EmptyDataset, MissingColorKey
from .plotspec import Background, ColorMapping, LineMark, PlotSpec, PointMark, Record
from .theme import LAYOUT, REQUIRED_COLORS

log = logging.getLogger(__name__)


def freeze_colors(colors: Mapping[str, str]) -> ColorMapping:
    """Return a read-only copy of a color mapping."""
    return MappingProxyType(dict(colors))


def require_colors(colors: Mapping[str, str], names=REQUIRED_COLORS) -> None:
    """Raise MissingColorKey for the first name without a usable value."""
    for name in names:
        if not colors.get(name):
            raise MissingColorKey(name, available=colors.keys())


def _record(item: Any, x: str, y: str, index: int) -> Record:
    if isinstance(item, Mapping):
        try:
            return (item[x], item[y])
        except KeyError as e:
            raise ValueError(f"record {index} has no field {e.args[0]!r}") from e
    # tuples, lists, numpy rows
    if not isinstance(item, (str, bytes)) and hasattr(item, "__getitem__") and hasattr(item, "__len__"):
        if len(item) == 2:
            return (item[0], item[1])
    raise ValueError(f"record {index} is not an (x, y) pair or a mapping: {item!r}")


def build(
    dataset: Iterable[Any],
    colors: Mapping[str, str],
    *,
    x: str = "x",
    y: str = "y",
    title: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    line_width: float = LAYOUT["line_width"],
    marker_size: float = LAYOUT["marker_size"],
) -> PlotSpec:
    """Describe a line-and-points chart themed with ``colors``.

    The line is stroked with ``colors["primary"]`` and the points are filled
    with ``colors["secondary"]``. The background is always transparent, so the
    rendered chart picks up whatever page it is placed on.

    Raises EmptyDataset for a dataset with no records and MissingColorKey when
    either required color is absent.
    """
    records = list(dataset)
    if not records:
        raise EmptyDataset()
    require_colors(colors)
    palette = freeze_colors(colors)

    data = tuple(_record(item, x, y, i) for i, item in enumerate(records))
    marks = (
        LineMark(x=x, y=y, stroke=palette["primary"], width=line_width),
        PointMark(
            x=x,
            y=y,
            fill=palette["secondary"],
            edge=palette["primary"],
            size=marker_size,
        ),
    )
    log.debug(
        "built plot: %d records, stroke=%s fill=%s",
        len(data), palette["primary"], palette["secondary"],
    )
    return PlotSpec(
        data=data,
        marks=marks,
        background=Background(),
        title=title,
        xlabel=xlabel,
        ylabel=ylabel,
    )
