"""
Request / response schemas for the task routes.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field, StrictBool, computed_field

from utils.schemas import CamelModel


class TaskCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class TaskUpdate(CamelModel):
    """
    Partial update: only the fields the client actually sent are applied.

    ``completed`` is the older name of ``isCompleted`` and is still accepted.
    """

    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    is_completed: Optional[StrictBool] = None
    completed: Optional[StrictBool] = None


class TaskRead(CamelModel):
    id: uuid.UUID
    title: str
    description: Optional[str] = None
    is_completed: bool
    user_id: uuid.UUID
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def completed(self) -> bool:
        """Older name of ``isCompleted``, still emitted for existing clients."""
        return self.is_completed
