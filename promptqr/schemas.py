"""Pydantic schemas for API contracts."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from .identifiers import TargetType


class PointOfInitiation(str, Enum):
    STATIC = "static"
    DYNAMIC = "dynamic"


class PayloadResponse(BaseModel):
    payload: str
    crc: str = Field(min_length=4, max_length=4)
    target_type: TargetType
    target: str = Field(description="Identifier embedded in tag 29")
    display: str = Field(description="Identifier grouped for display")
    amount: str | None = Field(default=None, description="Amount as encoded in tag 54")
    point_of_initiation: PointOfInitiation


class ErrorResponse(BaseModel):
    code: str
    error: str
