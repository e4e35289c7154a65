"""
admindash Dashboard Module

Server-rendered dashboard (Jinja2 + htmx, Chart.js for charts) that talks to
the data service only over HTTP. All state handling lives in pure Python.
"""

from .controller import DashboardController
from .http_client import ApiRequestError, RecordsApiClient
from .state import ActionResult, DashboardState, DashboardView

__all__ = [
    "ActionResult",
    "ApiRequestError",
    "DashboardController",
    "DashboardState",
    "DashboardView",
    "RecordsApiClient",
]
