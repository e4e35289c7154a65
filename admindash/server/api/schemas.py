#!/usr/bin/env python3
"""
admindash API Schemas - Pydantic Models for Request/Response Validation
"""

from typing import Optional
from pydantic import BaseModel, Field


class RecordCreateRequest(BaseModel):
    # Both optional so absence is reported by the presence check as a 400
    category: Optional[str] = None
    # NaN/Infinity have no JSON number form
    value: Optional[float] = Field(None, allow_inf_nan=False)


class RecordResponse(BaseModel):
    id: str
    category: str
    value: float


class MessageResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    db: str
