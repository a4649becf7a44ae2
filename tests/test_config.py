"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from themed_plots import LAYOUT, load_settings


def test_defaults():
    settings = load_settings({})

    assert settings.output_dir == Path("static/img/charts")
    assert settings.dpi == LAYOUT["dpi"]
    assert settings.image_format == "svg"


def test_overrides():
    settings = load_settings({
        "THEMED_PLOTS_OUTPUT_DIR": "/tmp/out",
        "THEMED_PLOTS_DPI": "144",
        "THEMED_PLOTS_FORMAT": ".PNG",
    })

    assert settings.output_dir == Path("/tmp/out")
    assert settings.dpi == 144
    assert settings.image_format == "png"


@pytest.mark.parametrize("value", ["high", "0", "-5"])
def test_bad_dpi(value):
    with pytest.raises(ValueError, match="THEMED_PLOTS_DPI"):
        load_settings({"THEMED_PLOTS_DPI": value})


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("THEMED_PLOTS_FORMAT", "pdf")
    assert load_settings().image_format == "pdf"
