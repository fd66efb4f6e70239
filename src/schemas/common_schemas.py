"""Shared response schemas."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every 4xx/5xx response."""

    error: str = Field(..., description="Human-readable error message")


class MessageResponse(BaseModel):
    message: str = Field(..., description="Confirmation message")


class HealthResponse(BaseModel):
    status: str = Field(default="healthy", examples=["healthy"])
