"""Response Pydantic models for the API."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PointResponse(BaseModel):
    """A decorated point as served by the query endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    summary: str = Field(alias="the-point")
    context: str
    category: Optional[str] = None
    category_id: Optional[int] = None


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    categories: int
    sessions: int
