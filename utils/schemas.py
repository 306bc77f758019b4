"""
Shared Pydantic building blocks for the HTTP API.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake-case in Python, camelCase on the wire; accepts either on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    data: Optional[T] = None
    message: str = ""


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    errors: Optional[List[Dict[str, Any]]] = None
