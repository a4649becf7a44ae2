"""Errors raised while turning data and theme colors into a plot."""

from __future__ import annotations


class ThemedPlotError(Exception):
    """Base class for themed-plots errors."""


class EmptyDataset(ThemedPlotError, ValueError):
    """Raised when a dataset has no records to plot."""

    def __init__(self, message: str = "dataset has no records") -> None:
        super().__init__(message)


class MissingColorKey(ThemedPlotError, KeyError):
    """Raised when a color mapping lacks a required name."""

    def __init__(self, key: str, available=()) -> None:
        self.key = key
        self.available = tuple(sorted(map(str, available)))
        super().__init__(key)

    def __str__(self) -> str:
        msg = f"color mapping has no value for {self.key!r}"
        if self.available:
            msg += f" (available: {', '.join(self.available)})"
        return msg
