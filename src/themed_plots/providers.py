"""Theme color providers: where a plot's named colors come from.

A provider is anything with a ``colors(names)`` method returning a read-only
mapping of exactly the requested names. Two are included:

- ``StaticThemeProvider`` wraps a dict (Bootstrap defaults unless told
  otherwise).
- ``CssVariableProvider`` reads CSS custom properties out of a compiled
  stylesheet, e.g. the ``--bs-primary`` / ``--bs-secondary`` variables a
  Bootstrap or bslib theme emits.

Usage:
    provider = CssVariableProvider.from_file("static/css/theme.css")
    spec = build(dataset, theme_colors(provider))
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Mapping, Protocol

from .builder import freeze_colors
from .errors import MissingColorKey
from .plotspec import ColorMapping
from .theme import BOOTSTRAP_COLORS, REQUIRED_COLORS

log = logging.getLogger(__name__)

_CSS_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
# ":root, [data-bs-theme=light] { ... }" -> (selector list, declarations)
_CSS_RULE = re.compile(r"([^{}]+)\{([^{}]*)\}")
# "--bs-primary: #0d6efd;" -> ("bs-primary", "#0d6efd")
_CSS_VAR = re.compile(r"--([A-Za-z0-9_-]+)\s*:\s*([^;}]+)")
_IMPORTANT = re.compile(r"\s*!important\s*$", re.IGNORECASE)


class ThemeColorProvider(Protocol):
    def colors(self, names: Iterable[str]) -> ColorMapping:
        ...


class StaticThemeProvider:
    """Serve colors from a fixed mapping."""

    def __init__(self, palette: Mapping[str, str] | None = None) -> None:
        self._palette = freeze_colors(BOOTSTRAP_COLORS if palette is None else palette)

    @property
    def palette(self) -> ColorMapping:
        return self._palette

    def colors(self, names: Iterable[str]) -> ColorMapping:
        out = {}
        for name in names:
            value = self._palette.get(name)
            if not value:
                raise MissingColorKey(name, available=self._palette.keys())
            out[name] = value
        return freeze_colors(out)


class CssVariableProvider(StaticThemeProvider):
    """Serve colors parsed from CSS custom property declarations."""

    @classmethod
    def from_css(
        cls,
        text: str,
        prefix: str = "--bs-",
        selector: str | None = ":root",
    ) -> "CssVariableProvider":
        """Collect ``<prefix><name>: value`` declarations from ``text``.

        Only rules whose selector list contains ``selector`` are read, so a
        stylesheet's ``[data-bs-theme=dark]`` overrides don't leak into the
        light theme. Pass ``selector=None`` to read every rule.

        Hyphens in names become underscores (``--bs-body-color`` is served as
        ``body_color``). Later declarations win.
        """
        bare_prefix = prefix[2:] if prefix.startswith("--") else prefix
        text = _CSS_COMMENT.sub("", text)
        palette = {}
        for rule in _CSS_RULE.finditer(text):
            selectors = [s.strip() for s in rule.group(1).split(",")]
            if selector is not None and selector not in selectors:
                continue
            for match in _CSS_VAR.finditer(rule.group(2)):
                name, value = match.group(1), match.group(2)
                if not name.startswith(bare_prefix):
                    continue
                key = name[len(bare_prefix):].replace("-", "_")
                value = _IMPORTANT.sub("", value.strip())
                if key and value:
                    palette[key] = value
        log.debug(
            "parsed %d theme colors with prefix %s from %s",
            len(palette), prefix, selector or "all rules",
        )
        return cls(palette)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        prefix: str = "--bs-",
        selector: str | None = ":root",
    ) -> "CssVariableProvider":
        text = Path(path).read_text(encoding="utf-8")
        return cls.from_css(text, prefix=prefix, selector=selector)


def theme_colors(
    provider: ThemeColorProvider | None = None,
    names: Iterable[str] = REQUIRED_COLORS,
) -> ColorMapping:
    """Ask ``provider`` (Bootstrap defaults if None) for the plot colors."""
    if provider is None:
        provider = StaticThemeProvider()
    return provider.colors(names)
