"""Error envelope returned by the API."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Union

from pydantic import Field, field_validator

from .base import WireModel, coerce_enum


class Status(str, Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    FAILED_PRECONDITION = "FAILED_PRECONDITION"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NOT_FOUND = "NOT_FOUND"
    RESOURCE_EXHAUSTED = "RESOURCE_EXHAUSTED"
    INTERNAL = "INTERNAL"
    UNAVAILABLE = "UNAVAILABLE"
    DEADLINE_EXCEEDED = "DEADLINE_EXCEEDED"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    CANCELLED = "CANCELLED"
    UNKNOWN = "UNKNOWN"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    ABORTED = "ABORTED"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    UNIMPLEMENTED = "UNIMPLEMENTED"
    DATA_LOSS = "DATA_LOSS"


class ErrorInfo(WireModel):
    type: str = Field(alias="@type")
    reason: Optional[str] = None
    domain: Optional[str] = None
    metadata: Optional[Dict[str, str]] = None


class ErrorDetail(WireModel):
    code: int
    message: str
    status: Optional[Union[Status, str]] = None
    details: List[ErrorInfo] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def known_status(cls, value):
        return coerce_enum(Status, value)


class ApiErrorEnvelope(WireModel):
    error: ErrorDetail
