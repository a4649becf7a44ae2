"""Example: pull colors out of a compiled Bootstrap stylesheet."""

import logging

import numpy as np

import themed_plots as tp

logging.basicConfig(level=logging.INFO)

# What a bslib app with primary="#2596be", secondary="#eab676" ships
THEME_CSS = """
:root {
  --bs-primary: #2596be;
  --bs-secondary: #eab676;
  --bs-body-color: #1e2b33;
  --bs-border-color: #c9d6de;
}
"""

provider = tp.CssVariableProvider.from_css(THEME_CSS)
colors = provider.colors(["primary", "secondary", "body_color", "border_color"])

months = ["Jan", "Feb", "Mar", "Apr", "May", "Jun"]
signups = np.array([120, 135, 160, 158, 190, 240])
dataset = [{"month": m, "signups": int(s)} for m, s in zip(months, signups)]

plot = tp.build(
    dataset,
    colors,
    x="month",
    y="signups",
    title="Monthly Signups",
    ylabel="Signups",
)

fig, ax = tp.figure(colors=colors)
tp.render(plot, ax, colors=colors)
ax.set_ylim(bottom=0)

tp.save(fig, "monthly-signups.png")
