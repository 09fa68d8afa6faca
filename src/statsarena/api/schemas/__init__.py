"""Pydantic models for API I/O."""

from .responses import ErrorResponse, HintResponse

__all__ = [
    "ErrorResponse",
    "HintResponse",
]
