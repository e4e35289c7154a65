"""
Dashboard Configuration

Palette and chart settings for the reports tab.
"""

from typing import Any

# Pie slices cycle through this palette by index
PIE_COLORS = ["#0088FE", "#00C49F", "#FFBB28", "#FF8042"]

BAR_COLOR = "#8884d8"
LINE_COLOR = "#82ca9d"
LINE_WIDTH = 3

CHART_WIDTH = 400
CHART_HEIGHT = 300

# Summary cards: (title, state key, accent color)
SUMMARY_CARDS = [
    ("Total Categories", "record_count", "#0088FE"),
    ("Total Value", "total_value", "#00C49F"),
]


def pie_color(index: int) -> str:
    return PIE_COLORS[index % len(PIE_COLORS)]


def format_value(value: Any) -> str:
    """
    Format a record value for display.

    Whole numbers drop the decimal point (100.0 -> "100"); other floats keep
    up to six significant decimals.
    """
    if value is None or value == '':
        return '—'

    try:
        num_val = float(value)
    except (ValueError, TypeError):
        return '—'

    if num_val.is_integer():
        return f"{num_val:.0f}"
    return f"{num_val:.6f}".rstrip("0").rstrip(".")
