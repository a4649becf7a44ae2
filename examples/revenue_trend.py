"""Example: two years of revenue in the default Bootstrap colors."""

import logging

import themed_plots as tp

logging.basicConfig(level=logging.INFO)

revenue = [(2020, 100), (2021, 110)]

tp.line(
    revenue,
    tp.theme_colors(),
    title="Revenue",
    xlabel="Year",
    ylabel="Revenue ($k)",
    filename="revenue-trend.svg",
)
