"""Engine-independent chart description: marks, data, and background."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from .theme import TRANSPARENT

# name -> color string, read-only once handed out
ColorMapping = Mapping[str, str]

Record = tuple[Any, Any]


@dataclass(frozen=True)
class LineMark:
    """A polyline through the data, stroked in one color."""

    x: str
    y: str
    stroke: str
    width: float


@dataclass(frozen=True)
class PointMark:
    """One marker per record."""

    x: str
    y: str
    fill: str
    edge: str
    size: float


Mark = Union[LineMark, PointMark]


@dataclass(frozen=True)
class Background:
    """Canvas and panel styling. Only the transparent form can be built."""

    transparent: bool = True
    figure_facecolor: str = TRANSPARENT
    axes_facecolor: str = TRANSPARENT
    grid: bool = False

    def __post_init__(self) -> None:
        if not self.transparent:
            raise ValueError("background must be transparent")
        for name in ("figure_facecolor", "axes_facecolor"):
            value = getattr(self, name)
            if value != TRANSPARENT:
                raise ValueError(f"{name} must be {TRANSPARENT!r}, got {value!r}")
        if self.grid:
            raise ValueError("grid lines are not drawn on a transparent background")


@dataclass(frozen=True)
class PlotSpec:
    """A chart as data: what to draw, in which colors, on what background."""

    data: tuple[Record, ...]
    marks: tuple[Mark, ...]
    background: Background = field(default_factory=Background)
    title: str | None = None
    xlabel: str | None = None
    ylabel: str | None = None

    @property
    def lines(self) -> tuple[LineMark, ...]:
        return tuple(m for m in self.marks if isinstance(m, LineMark))

    @property
    def points(self) -> tuple[PointMark, ...]:
        return tuple(m for m in self.marks if isinstance(m, PointMark))

    @property
    def stroke(self) -> str | None:
        """Stroke color of the first line mark."""
        lines = self.lines
        return lines[0].stroke if lines else None

    @property
    def fill(self) -> str | None:
        """Fill color of the first point mark."""
        points = self.points
        return points[0].fill if points else None

    @property
    def xs(self) -> tuple[Any, ...]:
        return tuple(r[0] for r in self.data)

    @property
    def ys(self) -> tuple[Any, ...]:
        return tuple(r[1] for r in self.data)
