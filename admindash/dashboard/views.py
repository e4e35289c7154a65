"""
Per-browser dashboard views.

Each browser gets its own DashboardView, found again through a cookie. The
registry is bounded; the least recently used view is dropped when full and
a returning browser simply gets a fresh view.
"""

import logging
import secrets
import threading
from collections import OrderedDict
from typing import Callable, Optional, Tuple

from .state import DashboardView

logger = logging.getLogger("admindash.dashboard")

VIEW_COOKIE = "dashboard_view"


class ViewRegistry:
    """Bounded, thread-safe map of view id -> DashboardView."""

    def __init__(self, view_factory: Callable[[], DashboardView], max_views: int = 256):
        self._factory = view_factory
        self._max_views = max_views
        self._views: "OrderedDict[str, DashboardView]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._views)

    def create(self) -> Tuple[str, DashboardView]:
        view_id = secrets.token_urlsafe(16)
        view = self._factory()
        with self._lock:
            self._views[view_id] = view
            while len(self._views) > self._max_views:
                evicted, _ = self._views.popitem(last=False)
                logger.debug(f"evicted dashboard view {evicted}")
        return view_id, view

    def get(self, view_id: Optional[str]) -> Optional[DashboardView]:
        if not view_id:
            return None
        with self._lock:
            view = self._views.get(view_id)
            if view is not None:
                self._views.move_to_end(view_id)
            return view

    def get_or_create(self, view_id: Optional[str]) -> Tuple[str, DashboardView, bool]:
        """Return (view_id, view, created)."""
        view = self.get(view_id)
        if view is not None:
            return view_id, view, False
        new_id, view = self.create()
        return new_id, view, True
