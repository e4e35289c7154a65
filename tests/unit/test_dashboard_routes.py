"""Unit tests for the dashboard web routes

The records API client is replaced by the in-memory fake so pages render
without a running data service.
"""
from unittest.mock import patch

import pytest

from admindash.dashboard.views import VIEW_COOKIE, ViewRegistry


@pytest.fixture
def dashboard(client, fake_api):
    with patch("admindash.dashboard.routes.RecordsApiClient", return_value=fake_api):
        yield client


class TestPage:

    def test_mount_renders_records(self, dashboard, fake_api):
        response = dashboard.get("/")

        assert response.status_code == 200
        assert "Admin Dashboard" in response.text
        assert "marketing" in response.text
        assert VIEW_COOKIE in response.cookies
        assert fake_api.calls == [("list", None)]

    def test_unmatched_path_falls_back_to_page(self, dashboard):
        response = dashboard.get("/reports/anything")

        assert response.status_code == 200
        assert "Admin Dashboard" in response.text

    def test_static_assets_are_served(self, dashboard):
        response = dashboard.get("/static/dashboard.js")

        assert response.status_code == 200
        assert "data-chart" in response.text

    def test_load_failure_renders_alert(self, dashboard, fake_api):
        fake_api.fail_all = True

        response = dashboard.get("/")

        assert response.status_code == 200
        assert "Could not load data" in response.text


class TestActions:

    def test_switch_to_settings(self, dashboard):
        dashboard.get("/")

        response = dashboard.post("/dashboard/tab/settings")

        assert response.status_code == 200
        assert "Add Data" in response.text
        assert "Reset All Data" in response.text

    def test_add_record(self, dashboard, fake_api):
        dashboard.get("/")

        response = dashboard.post("/dashboard/records", data={"category": "ops", "value": "7"})

        assert response.status_code == 200
        assert "Added ops" in response.text
        assert fake_api.records[-1]["category"] == "ops"

    def test_add_record_missing_value(self, dashboard, fake_api):
        dashboard.get("/")
        fake_api.calls.clear()

        response = dashboard.post("/dashboard/records", data={"category": "ops", "value": ""})

        assert "Category and value are required!" in response.text
        assert fake_api.calls == []

    def test_delete_record(self, dashboard, fake_api):
        dashboard.get("/")

        response = dashboard.post("/dashboard/records/b2/delete")

        assert response.status_code == 200
        assert "marketing" not in response.text
        assert [r["id"] for r in fake_api.records] == ["a1", "c3"]

    def test_reset_without_confirmation_keeps_data(self, dashboard, fake_api):
        dashboard.get("/")

        dashboard.post("/dashboard/reset")

        assert len(fake_api.records) == 3

    def test_reset_confirmed(self, dashboard, fake_api):
        dashboard.get("/")

        response = dashboard.post("/dashboard/reset", data={"confirm": "yes"})

        assert response.status_code == 200
        assert "Deleted 3 items" in response.text
        assert fake_api.records == []

    def test_action_without_view_cookie_creates_view(self, dashboard, fake_api):
        response = dashboard.post("/dashboard/refresh")

        assert response.status_code == 200
        assert VIEW_COOKIE in response.cookies
        assert "sales" in response.text


class TestViewRegistry:

    def test_get_or_create_reuses_view(self):
        registry = ViewRegistry(object, max_views=4)
        view_id, view = registry.create()

        same_id, same_view, created = registry.get_or_create(view_id)

        assert same_id == view_id
        assert same_view is view
        assert created is False

    def test_unknown_id_creates_new_view(self):
        registry = ViewRegistry(object, max_views=4)

        view_id, _, created = registry.get_or_create("stale")

        assert created is True
        assert view_id != "stale"

    def test_oldest_view_is_evicted(self):
        registry = ViewRegistry(object, max_views=2)
        first, _ = registry.create()
        second, _ = registry.create()
        registry.get(first)  # touch: second becomes oldest
        registry.create()

        assert len(registry) == 2
        assert registry.get(first) is not None
        assert registry.get(second) is None
