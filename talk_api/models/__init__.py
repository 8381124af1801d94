"""Pydantic request/response models for the API."""

from .responses import ErrorResponse, HealthResponse, PointResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "PointResponse",
]
