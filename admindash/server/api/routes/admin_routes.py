#!/usr/bin/env python3
"""
Admin Routes - Stats and Health Checks
"""

import logging

import peewee
from fastapi import APIRouter

from ...models import DatabaseManager
from ...core.errors import StoreError
from ..schemas import HealthResponse

logger = logging.getLogger("admindash.server")


def create_admin_routes(db_manager: DatabaseManager) -> APIRouter:
    """Create operational routes."""
    router = APIRouter()

    @router.get("/api/stats")
    def get_stats():
        """Record count and value total straight from the store."""
        try:
            return db_manager.get_stats()
        except peewee.PeeweeException as e:
            raise StoreError(str(e))

    @router.get("/health", response_model=HealthResponse)
    def health():
        """Health check endpoint."""
        db_ok = db_manager.ping()
        return {"status": "ok", "db": "connected" if db_ok else "down"}

    return router
