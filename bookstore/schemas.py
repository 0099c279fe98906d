"""Pydantic schemas for the book resource."""
from pydantic import BaseModel, ConfigDict


class Book(BaseModel):
    """A single book record.

    ``id`` is supplied by the caller and is the store key. Empty strings
    are accepted for every field; unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    author: str


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str
