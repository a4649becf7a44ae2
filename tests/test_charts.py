"""Tests for matplotlib rendering, styling, and saving."""

from __future__ import annotations

import matplotlib as mpl
import matplotlib.pyplot as plt
import pytest
from matplotlib.colors import to_rgba

from themed_plots import (
    BOOTSTRAP_COLORS,
    Settings,
    build,
    figure,
    line,
    rc_params,
    render,
    save,
    style_context,
)


def _assert_transparent(fig, ax):
    assert fig.patch.get_alpha() == 0.0
    assert fig.patch.get_facecolor()[3] == 0.0
    assert ax.patch.get_alpha() == 0.0
    assert ax.patch.get_facecolor()[3] == 0.0


def test_render_uses_theme_colors(dataset, colors):
    fig, ax = render(build(dataset, colors))

    (drawn_line,) = ax.get_lines()
    assert drawn_line.get_color() == "#2596be"
    (points,) = ax.collections
    assert tuple(points.get_facecolor()[0]) == pytest.approx(to_rgba("#eab676"))
    assert tuple(points.get_edgecolor()[0]) == pytest.approx(to_rgba("#2596be"))


def test_render_strips_background(dataset, colors):
    fig, ax = render(build(dataset, colors))

    _assert_transparent(fig, ax)
    assert not any(gl.get_visible() for gl in ax.get_ygridlines())


def test_render_onto_existing_axes(dataset, colors):
    fig, ax = plt.subplots()
    fig.patch.set_facecolor("#ffffff")
    ax.set_facecolor("#ffffff")

    out_fig, out_ax = render(build(dataset, colors), ax)

    assert out_fig is fig and out_ax is ax
    _assert_transparent(fig, ax)


def test_render_labels_and_categories(colors):
    spec = build(
        [("Jan", 3), ("Feb", 5), ("Mar", 4)], colors,
        title="Signups", xlabel="Month", ylabel="Count",
    )
    fig, ax = render(spec)
    fig.canvas.draw()

    assert ax.get_title() == "Signups"
    assert ax.get_xlabel() == "Month"
    assert ax.get_ylabel() == "Count"
    assert [t.get_text() for t in ax.get_xticklabels()] == ["Jan", "Feb", "Mar"]
    assert list(ax.get_lines()[0].get_xdata()) == [0, 1, 2]


def test_figure_is_transparent():
    fig, ax = figure(figsize=(4, 3))

    _assert_transparent(fig, ax)
    assert tuple(fig.get_size_inches()) == (4, 3)


def test_rc_params_never_fill_background():
    params = rc_params({"primary": "#2596be", "secondary": "#eab676", "body_bg": "#ffffff"})

    assert params["figure.facecolor"] == "none"
    assert params["axes.facecolor"] == "none"
    assert params["savefig.facecolor"] == "none"
    assert params["savefig.transparent"] is True
    assert params["axes.grid"] is False


def test_rc_params_use_theme_text_colors():
    params = rc_params({"body_color": "#1e2b33", "border_color": "#c9d6de"})

    assert params["axes.labelcolor"] == "#1e2b33"
    assert params["axes.edgecolor"] == "#c9d6de"
    assert params["xtick.color"] == "#c9d6de"
    assert params["ytick.color"] == "#c9d6de"


def test_rc_params_ticks_ignore_mark_colors(colors):
    params = rc_params(colors)

    assert params["xtick.color"] == BOOTSTRAP_COLORS["secondary"]
    assert params["ytick.color"] == BOOTSTRAP_COLORS["secondary"]
    assert "#eab676" not in params.values()


def test_style_context_restores_rcparams():
    before = mpl.rcParams["axes.facecolor"]
    with style_context():
        assert mpl.rcParams["axes.facecolor"] == "none"
    assert mpl.rcParams["axes.facecolor"] == before


def test_save_writes_and_closes(tmp_path, dataset, colors):
    fig, _ = render(build(dataset, colors))

    path = save(fig, "revenue.png", output_dir=tmp_path)

    assert path == tmp_path / "revenue.png"
    assert path.stat().st_size > 0
    assert not plt.fignum_exists(fig.number)


def test_save_png_has_transparent_pixels(tmp_path, dataset, colors):
    fig, _ = render(build(dataset, colors))
    path = save(fig, "corner.png", output_dir=tmp_path)

    pixels = plt.imread(path)
    assert pixels.shape[2] == 4
    assert pixels[0, 0, 3] == 0.0


def test_save_uses_settings(tmp_path, dataset, colors):
    settings = Settings(output_dir=tmp_path / "charts", dpi=50, image_format="svg")
    fig, _ = render(build(dataset, colors))

    path = save(fig, "revenue", settings=settings)

    assert path == tmp_path / "charts" / "revenue.svg"
    assert path.read_text().lstrip().startswith("<?xml")


def test_save_reads_environment(tmp_path, monkeypatch, dataset, colors):
    monkeypatch.setenv("THEMED_PLOTS_OUTPUT_DIR", str(tmp_path))
    fig, _ = render(build(dataset, colors))

    assert save(fig, "env.png").parent == tmp_path


def test_save_logs_path(tmp_path, caplog, dataset, colors):
    fig, _ = render(build(dataset, colors))
    with caplog.at_level("INFO", logger="themed_plots.charts"):
        path = save(fig, "logged.png", output_dir=tmp_path)

    assert str(path) in caplog.text


def test_line_builds_renders_and_saves(tmp_path, dataset, colors):
    fig, ax = line(dataset, colors, title="Revenue", filename="line.svg", output_dir=tmp_path)

    assert (tmp_path / "line.svg").exists()
    assert ax.get_title() == "Revenue"
    assert ax.get_lines()[0].get_color() == "#2596be"
    _assert_transparent(fig, ax)
