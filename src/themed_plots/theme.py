"""Pure data: default theme colors, fonts, and layout constants.

No library imports: this module describes the visual identity as plain
Python dicts and tuples so any consumer (matplotlib, a CSS parser, tests)
can read it. Treat everything here as read-only defaults: copy before
changing anything.
"""

# Names every themed plot needs from the host theme
REQUIRED_COLORS = ("primary", "secondary")

# Bootstrap 5 default palette (the --bs-* custom properties a bslib app
# exposes when no theme overrides are set)
BOOTSTRAP_COLORS = {
    "primary": "#0d6efd",
    "secondary": "#6c757d",
    "success": "#198754",
    "info": "#0dcaf0",
    "warning": "#ffc107",
    "danger": "#dc3545",
    "light": "#f8f9fa",
    "dark": "#212529",
    "body_color": "#212529",
    "body_bg": "#ffffff",
    "border_color": "#dee2e6",
}

# Text and axis colors used when the host theme doesn't supply them
TEXT_COLORS = {
    "text": BOOTSTRAP_COLORS["body_color"],
    "muted": BOOTSTRAP_COLORS["secondary"],
    "border": BOOTSTRAP_COLORS["border_color"],
}

# System fonts, in the order a browser would try them
FONTS = {
    "sans": [
        "Helvetica Neue", "Helvetica", "Arial",
        "Segoe UI", "Roboto", "sans-serif",
    ],
}

# Chart layout constants
LAYOUT = {
    "figsize": (8.5, 5.0),
    "dpi": 80,
    "title_size": 14,
    "label_size": 11,
    "tick_size": 9,
    "line_width": 2.0,
    "marker_size": 36.0,  # scatter area, points^2
    "spine_width": 0.8,
}

# matplotlib's spelling of "no fill"
TRANSPARENT = "none"
