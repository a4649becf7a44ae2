from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture
def colors() -> dict[str, str]:
    return {"primary": "#2596be", "secondary": "#eab676"}


@pytest.fixture
def dataset() -> list[tuple[int, int]]:
    return [(2020, 100), (2021, 110)]


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
