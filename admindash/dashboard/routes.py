"""
Dashboard Routes - Web UI and Template Rendering

The page is rendered once on mount; every action posts through htmx and gets
back the re-rendered dashboard body.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Cookie, Form, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from .controller import DashboardController
from .filters import setup_template_filters
from .http_client import RecordsApiClient
from .state import DashboardView
from .views import VIEW_COOKIE, ViewRegistry

logger = logging.getLogger("admindash.dashboard")

TEMPLATES_DIR = Path(__file__).parent / "templates"
STATIC_DIR = Path(__file__).parent / "static"


def create_dashboard_routes(api_url: str, max_views: int = 256, api_timeout: int = 10) -> APIRouter:
    """Create dashboard and web UI routes, including the catch-all page fallback."""
    router = APIRouter(include_in_schema=False)

    dashboard_controller = DashboardController()
    registry = ViewRegistry(lambda: DashboardView(RecordsApiClient(api_url, timeout=api_timeout)), max_views)
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    setup_template_filters(templates)

    def render(request: Request, template: str, view_id: str, view: DashboardView) -> HTMLResponse:
        context = dashboard_controller.get_dashboard_data(view.state)
        response = templates.TemplateResponse(request, template, context)
        response.set_cookie(VIEW_COOKIE, view_id, httponly=True, samesite="lax")
        return response

    def resolve_view(view_id: Optional[str]):
        view_id, view, created = registry.get_or_create(view_id)
        if created:
            view.load()
        return view_id, view

    def mount_page(request: Request) -> HTMLResponse:
        """Fresh view per page load: fetch the collection and render everything."""
        view_id, view = registry.create()
        view.load()
        logger.debug(f"mounted dashboard view {view_id}")
        return render(request, "dashboard.html", view_id, view)

    @router.get("/", response_class=HTMLResponse)
    def dashboard_main(request: Request):
        """Main dashboard page."""
        return mount_page(request)

    @router.post("/dashboard/tab/{tab}", response_class=HTMLResponse)
    def dashboard_select_tab(tab: str, request: Request, dashboard_view: Optional[str] = Cookie(None)):
        view_id, view = resolve_view(dashboard_view)
        view.select_tab(tab)
        return render(request, "partials/body.html", view_id, view)

    @router.post("/dashboard/refresh", response_class=HTMLResponse)
    def dashboard_refresh(request: Request, dashboard_view: Optional[str] = Cookie(None)):
        view_id, view = resolve_view(dashboard_view)
        view.load()
        return render(request, "partials/body.html", view_id, view)

    @router.post("/dashboard/records", response_class=HTMLResponse)
    def dashboard_add_record(
        request: Request,
        category: str = Form(""),
        value: str = Form(""),
        dashboard_view: Optional[str] = Cookie(None),
    ):
        view_id, view = resolve_view(dashboard_view)
        view.update_form(category=category, value=value)
        view.add()
        return render(request, "partials/body.html", view_id, view)

    @router.post("/dashboard/records/{record_id}/delete", response_class=HTMLResponse)
    def dashboard_delete_record(record_id: str, request: Request, dashboard_view: Optional[str] = Cookie(None)):
        view_id, view = resolve_view(dashboard_view)
        view.delete(record_id)
        return render(request, "partials/body.html", view_id, view)

    @router.post("/dashboard/reset", response_class=HTMLResponse)
    async def dashboard_reset(
        request: Request,
        confirm: str = Form(""),
        dashboard_view: Optional[str] = Cookie(None),
    ):
        view_id, view, created = registry.get_or_create(dashboard_view)
        if created:
            # the API may be served by this same process
            await run_in_threadpool(view.load)
        await view.reset(confirmed=confirm == "yes")
        return render(request, "partials/body.html", view_id, view)

    @router.get("/{full_path:path}", response_class=HTMLResponse)
    def dashboard_fallback(full_path: str, request: Request):
        """Single-page hosting: unmatched GET paths render the dashboard."""
        if full_path.startswith("api/"):
            raise HTTPException(status_code=404, detail="Not found")
        return mount_page(request)

    return router
