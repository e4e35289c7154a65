#!/usr/bin/env python3
"""
Data Routes - Record Collection CRUD (/api/data)
"""

import logging
from typing import List

import peewee
from fastapi import APIRouter, status

from ...models import Record
from ...core.errors import NotFoundError, StoreError, ValidationError
from ..schemas import MessageResponse, RecordCreateRequest, RecordResponse

logger = logging.getLogger("admindash.server")


def create_data_routes() -> APIRouter:
    """Create record collection routes."""
    router = APIRouter(prefix="/api/data", tags=["data"])

    @router.get("", response_model=List[RecordResponse])
    def list_records():
        """Return every record in insertion order."""
        try:
            return [r.to_dict() for r in Record.list_all()]
        except peewee.PeeweeException as e:
            raise StoreError(str(e))

    @router.post("", response_model=RecordResponse, status_code=status.HTTP_201_CREATED)
    def create_record(body: RecordCreateRequest):
        """Create one record; the store assigns its id."""
        if not body.category or body.value is None:
            raise ValidationError("Category and value are required")

        try:
            record = Record.create_record(category=body.category, value=body.value)
        except peewee.PeeweeException as e:
            # store rejections on create are reported as client errors
            raise ValidationError(str(e))

        data = record.to_dict()
        logger.info(f"record created: {data['id']}")
        return data

    @router.delete("/{record_id}", response_model=MessageResponse)
    def delete_record(record_id: str):
        """Delete one record by id."""
        try:
            deleted = Record.delete_by_id(record_id)
        except peewee.PeeweeException as e:
            raise StoreError(str(e))

        if not deleted:
            raise NotFoundError("Item not found")

        logger.info(f"record deleted: {record_id}")
        return {"message": "Deleted successfully"}

    @router.delete("", response_model=MessageResponse)
    def delete_all_records():
        """Delete the whole collection in one statement."""
        try:
            count = Record.delete_all()
        except peewee.PeeweeException as e:
            raise StoreError(str(e))

        logger.info(f"records cleared: {count}")
        return {"message": "All data deleted successfully"}

    return router
