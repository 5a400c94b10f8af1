"""Common response wrapper schemas for API responses."""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Generic success response wrapper."""

    success: bool
    message: str


class ErrorResponse(BaseModel):
    """Body of every error returned by the exception handlers."""

    detail: str
