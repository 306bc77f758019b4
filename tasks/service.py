"""
Owner-scoped task operations.

Every method takes the authenticated ``user_id``; it always comes from the
verified token, never from client input.  A task that exists but belongs to
someone else is reported exactly like a task that does not exist.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Mapping, Optional, Union

from database.models import Task
from database.repositories import TaskRepository
from utils.errors import ErrorMessages, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "is_completed")

# Older clients send the completion flag as ``completed``.
LEGACY_FIELD_ALIASES = {"completed": "is_completed"}


def _parse_task_id(task_id: Union[str, uuid.UUID]) -> uuid.UUID:
    if isinstance(task_id, uuid.UUID):
        return task_id
    try:
        return uuid.UUID(str(task_id))
    except ValueError:
        raise NotFoundError(ErrorMessages.TASK_NOT_FOUND) from None


def _require_title(title: Any) -> str:
    if not isinstance(title, str) or not title.strip():
        raise ValidationError(
            ErrorMessages.VALIDATION_ERROR,
            [{"field": "title", "messages": ["Title must not be empty"]}],
        )
    return title


def normalize_changes(changes: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map legacy field names onto their canonical attribute and drop anything
    that is not updatable.  The canonical name wins when both are present.
    """
    normalized: Dict[str, Any] = {}
    for key, value in changes.items():
        if key in LEGACY_FIELD_ALIASES:
            normalized.setdefault(LEGACY_FIELD_ALIASES[key], value)
        elif key in UPDATABLE_FIELDS:
            normalized[key] = value
    return normalized


class TaskService:
    def __init__(self, tasks: TaskRepository) -> None:
        self._tasks = tasks

    async def create(
        self,
        user_id: uuid.UUID,
        title: str,
        description: Optional[str] = None,
    ) -> Task:
        task = await self._tasks.add(user_id, _require_title(title), description)
        logger.info("Task %s created for user %s", task.id, user_id)
        return task

    async def list_by_owner(self, user_id: uuid.UUID) -> List[Task]:
        return await self._tasks.list_by_owner(user_id)

    async def get(self, task_id: Union[str, uuid.UUID], user_id: uuid.UUID) -> Task:
        task = await self._tasks.get_owned(_parse_task_id(task_id), user_id)
        if task is None:
            raise NotFoundError(ErrorMessages.TASK_NOT_FOUND)
        return task

    async def update(
        self,
        task_id: Union[str, uuid.UUID],
        user_id: uuid.UUID,
        changes: Mapping[str, Any],
    ) -> Task:
        """Merge the fields present in ``changes`` into the task and persist."""
        task = await self.get(task_id, user_id)
        normalized = normalize_changes(changes)
        if "title" in normalized:
            _require_title(normalized["title"])
        if "is_completed" in normalized and not isinstance(normalized["is_completed"], bool):
            raise ValidationError(
                ErrorMessages.VALIDATION_ERROR,
                [{"field": "isCompleted", "messages": ["Completion flag must be a boolean"]}],
            )

        for field, value in normalized.items():
            setattr(task, field, value)
        task = await self._tasks.save(task)
        logger.info("Task %s updated (%s)", task.id, ", ".join(sorted(normalized)) or "no changes")
        return task

    async def delete(self, task_id: Union[str, uuid.UUID], user_id: uuid.UUID) -> None:
        task = await self.get(task_id, user_id)
        await self._tasks.delete(task)
        logger.info("Task %s deleted", task.id)
