"""Pydantic models for API responses."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str
    helpers: dict[str, int] = Field(default_factory=dict, description="Registered helper count per registry")
