"""Pydantic models for request/response validation."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Error response."""

    code: str = Field(..., description="Error code from ErrorCode")
    message: str
    details: dict = Field(default_factory=dict)
