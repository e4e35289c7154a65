#!/usr/bin/env python3
"""
admindash FastAPI application factory

Wires the record API, operational routes and the dashboard (static assets plus
the catch-all page fallback) into one app. The dashboard router is included
last so its fallback never shadows an API route.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from ... import __version__
from ...dashboard.routes import STATIC_DIR, create_dashboard_routes
from ..api.routes.admin_routes import create_admin_routes
from ..api.routes.data_routes import create_data_routes
from ..models import db_manager
from .config import ServerConfig
from .errors import register_error_handlers

logger = logging.getLogger("admindash.server")


def create_app(config: ServerConfig) -> FastAPI:
    """Build the FastAPI app for a given configuration."""
    db_manager.database_url = config.database_url

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if not db_manager.connect():
            raise RuntimeError(f"cannot open database {db_manager.database_url}")
        logger.info(f"admindash server ready on {config.host}:{config.port}")
        try:
            yield
        finally:
            db_manager.close()

    app = FastAPI(
        title="admindash",
        description="Record store API and charts dashboard",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(create_data_routes())
    app.include_router(create_admin_routes(db_manager))
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(create_dashboard_routes(config.resolved_api_url(), max_views=config.max_views))

    return app
