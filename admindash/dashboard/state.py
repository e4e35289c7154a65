"""
Dashboard view state and action handlers.

A DashboardView owns exactly one DashboardState. State changes only through
the view's action handlers; each handler returns an ActionResult that the web
layer renders (alert banner) instead of swallowing the failure.
"""

import asyncio
import logging
import math
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .http_client import ApiRequestError, RecordsApiClient

logger = logging.getLogger("admindash.dashboard")

TABS = ("reports", "settings")


@dataclass
class ActionResult:
    """Outcome of one dashboard action."""
    ok: bool
    message: str = ""
    error: Optional[str] = None
    failed_ids: List[str] = field(default_factory=list)

    @classmethod
    def success(cls, message: str = "") -> "ActionResult":
        return cls(ok=True, message=message)

    @classmethod
    def failure(cls, error: str, failed_ids: Optional[List[str]] = None) -> "ActionResult":
        return cls(ok=False, error=error, failed_ids=failed_ids or [])


@dataclass
class FormState:
    category: str = ""
    value: str = ""


@dataclass
class DashboardState:
    records: List[Dict[str, Any]] = field(default_factory=list)
    tab: str = "reports"
    form: FormState = field(default_factory=FormState)
    last_result: Optional[ActionResult] = None

    @property
    def total_value(self) -> float:
        return sum(r.get("value") or 0 for r in self.records)


class DashboardView:
    """One dashboard session: local record copy plus the actions that change it.

    Requests to the API run outside the view lock; only the read-modify-write
    of local state holds it, so overlapping actions on one view all land.
    """

    def __init__(self, api: RecordsApiClient):
        self.api = api
        self.state = DashboardState()
        self._lock = threading.Lock()

    def _finish(self, result: ActionResult) -> ActionResult:
        with self._lock:
            self.state.last_result = result
        return result

    def load(self) -> ActionResult:
        """Fetch the full collection and replace local records."""
        try:
            records = self.api.list_records()
        except ApiRequestError as e:
            logger.error(f"failed to load records: {e}")
            return self._finish(ActionResult.failure(f"Could not load data ({e})"))

        with self._lock:
            self.state.records = list(records)
        return self._finish(ActionResult.success())

    def select_tab(self, tab: str) -> ActionResult:
        if tab not in TABS:
            return self._finish(ActionResult.failure(f"Unknown tab: {tab}"))
        with self._lock:
            self.state.tab = tab
        return self._finish(ActionResult.success())

    def update_form(self, category: str = "", value: str = "") -> None:
        with self._lock:
            self.state.form = FormState(category=category, value=value)

    def add(self) -> ActionResult:
        """Create a record from the pending form; invalid input never reaches the API."""
        with self._lock:
            form = self.state.form
        if not form.category or form.value == "":
            return self._finish(ActionResult.failure("Category and value are required!"))

        try:
            value = float(form.value)
        except ValueError:
            return self._finish(ActionResult.failure(f"Value must be a number, got {form.value!r}"))
        if not math.isfinite(value):
            return self._finish(ActionResult.failure(f"Value must be a finite number, got {form.value!r}"))
        if value.is_integer():
            value = int(value)

        try:
            created = self.api.create_record(form.category, value)
        except ApiRequestError as e:
            logger.error(f"failed to create record: {e}")
            return self._finish(ActionResult.failure(f"Could not add data ({e})"))

        with self._lock:
            self.state.records = [*self.state.records, created]
            # keep input typed while the request was in flight
            if self.state.form == form:
                self.state.form = FormState()
        return self._finish(ActionResult.success(f"Added {created.get('category')}"))

    def delete(self, record_id: str) -> ActionResult:
        """Delete one record server-side, then drop it locally without re-fetching."""
        try:
            self.api.delete_record(record_id)
        except ApiRequestError as e:
            logger.error(f"failed to delete record {record_id}: {e}")
            return self._finish(ActionResult.failure(f"Could not delete item ({e})", [record_id]))

        with self._lock:
            self.state.records = [r for r in self.state.records if r.get("id") != record_id]
        return self._finish(ActionResult.success("Deleted successfully"))

    async def reset(self, confirmed: bool) -> ActionResult:
        """
        Delete every held record, one request per record, all in flight at once.

        Only ids whose delete succeeded are removed locally; the rest stay
        visible and are reported in failed_ids. Records added while the
        deletes were in flight are kept.
        """
        if not confirmed:
            return self._finish(ActionResult.success("Reset cancelled"))

        with self._lock:
            ids = [r.get("id") for r in self.state.records]
        outcomes = await asyncio.gather(
            *(asyncio.to_thread(self.api.delete_record, record_id) for record_id in ids),
            return_exceptions=True,
        )

        failed = []
        for record_id, outcome in zip(ids, outcomes):
            if isinstance(outcome, ApiRequestError):
                if outcome.status_code == 404:
                    # already gone server-side
                    continue
                logger.error(f"reset: failed to delete record {record_id}: {outcome}")
                failed.append(record_id)
            elif isinstance(outcome, BaseException):
                raise outcome

        removed = set(ids) - set(failed)
        with self._lock:
            self.state.records = [r for r in self.state.records if r.get("id") not in removed]

        if failed:
            return self._finish(ActionResult.failure(
                f"Deleted {len(ids) - len(failed)} of {len(ids)} items; {len(failed)} could not be deleted",
                failed,
            ))
        return self._finish(ActionResult.success(f"Deleted {len(ids)} items"))
