"""
Dashboard Controller

Turns a DashboardState into the plain data structure the templates render.
All methods return Python data structures that are easy to inspect in tests.
"""

import time
import logging
from typing import Any, Dict, List

from .config import (
    BAR_COLOR, CHART_HEIGHT, CHART_WIDTH, LINE_COLOR, LINE_WIDTH,
    SUMMARY_CARDS, pie_color,
)
from .state import DashboardState

logger = logging.getLogger("admindash.dashboard")


class DashboardController:
    """Builds render data for the reports and settings tabs."""

    def get_dashboard_data(self, state: DashboardState) -> Dict[str, Any]:
        """
        Get complete dashboard data structure.

        Derived values (counts, totals, chart series) are recomputed from the
        held records on every call.
        """
        logger.debug("Generating dashboard data")
        records = state.records
        result = state.last_result

        return {
            "page_title": "Admin Dashboard",
            "timestamp": int(time.time()),
            "tab": state.tab,
            "form": {"category": state.form.category, "value": state.form.value},
            "alert": self._get_alert(result),
            "cards": self._get_summary_cards(state),
            "charts": self._get_charts(records),
            "rows": self._get_table_rows(records),
        }

    def _get_alert(self, result) -> Dict[str, str]:
        if result is None:
            return {}
        if not result.ok:
            return {"level": "error", "text": result.error or "Request failed"}
        if result.message:
            return {"level": "info", "text": result.message}
        return {}

    def _get_summary_cards(self, state: DashboardState) -> List[Dict[str, Any]]:
        values = {
            "record_count": len(state.records),
            "total_value": state.total_value,
        }
        return [
            {"title": title, "value": values[key], "color": color}
            for title, key, color in SUMMARY_CARDS
        ]

    def _get_charts(self, records: List[Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
        """Chart.js configs keyed category -> value, one entry per record."""
        labels = [r.get("category") for r in records]
        values = [r.get("value") for r in records]

        return {
            "bar": {
                "title": "Bar Chart",
                "width": CHART_WIDTH,
                "height": CHART_HEIGHT,
                "config": {
                    "type": "bar",
                    "data": {
                        "labels": labels,
                        "datasets": [{"label": "value", "data": values, "backgroundColor": BAR_COLOR}],
                    },
                    "options": self._cartesian_options(),
                },
            },
            "line": {
                "title": "Line Chart",
                "width": CHART_WIDTH,
                "height": CHART_HEIGHT,
                "config": {
                    "type": "line",
                    "data": {
                        "labels": labels,
                        "datasets": [{
                            "label": "value",
                            "data": values,
                            "borderColor": LINE_COLOR,
                            "backgroundColor": LINE_COLOR,
                            "borderWidth": LINE_WIDTH,
                            "cubicInterpolationMode": "monotone",
                        }],
                    },
                    "options": self._cartesian_options(),
                },
            },
            "pie": {
                "title": "Pie Chart",
                "width": CHART_WIDTH,
                "height": CHART_HEIGHT,
                "config": {
                    "type": "pie",
                    "data": {
                        "labels": labels,
                        "datasets": [{
                            "data": values,
                            "backgroundColor": [pie_color(i) for i in range(len(records))],
                        }],
                    },
                    "options": {"responsive": False, "plugins": {"legend": {"display": False}}},
                },
            },
        }

    @staticmethod
    def _cartesian_options() -> Dict[str, Any]:
        return {
            "responsive": False,
            "scales": {
                "x": {"border": {"dash": [3, 3]}},
                "y": {"beginAtZero": True, "border": {"dash": [3, 3]}},
            },
            "plugins": {"legend": {"display": True}},
        }

    def _get_table_rows(self, records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [
            {
                "id": r.get("id"),
                "category": r.get("category"),
                "value": r.get("value"),
            }
            for r in records
        ]
