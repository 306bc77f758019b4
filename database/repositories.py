"""
Repositories over the users and tasks tables.

Every task query is scoped by owner: a task is fetched with one statement
filtering on both its id and ``user_id``.  Writes commit immediately so each
create / update / delete is a single atomic unit.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models import Task, User
from utils.errors import ConflictError, ErrorMessages

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self._session.execute(
            select(User).where(User.email == email)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        result = await self._session.execute(
            select(User).where(User.id == user_id)
        )
        return result.scalar_one_or_none()

    async def add(self, email: str, full_name: str, password_hash: str) -> User:
        """
        Insert a new user.

        The unique index on ``email`` is the final word on duplicates: a
        concurrent signup that slipped past the caller's pre-check surfaces
        here as ``ConflictError``.
        """
        user = User(
            id=uuid.uuid4(),
            email=email,
            full_name=full_name,
            password_hash=password_hash,
        )
        self._session.add(user)
        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.info("Duplicate signup rejected by store for %s", email)
            raise ConflictError(ErrorMessages.EMAIL_ALREADY_EXISTS) from exc
        await self._session.refresh(user)
        return user


class TaskRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(
        self,
        user_id: uuid.UUID,
        title: str,
        description: Optional[str] = None,
    ) -> Task:
        task = Task(
            id=uuid.uuid4(),
            user_id=user_id,
            title=title,
            description=description,
            is_completed=False,
        )
        self._session.add(task)
        await self._session.commit()
        await self._session.refresh(task)
        return task

    async def list_by_owner(self, user_id: uuid.UUID) -> List[Task]:
        result = await self._session.execute(
            select(Task)
            .where(Task.user_id == user_id)
            .order_by(Task.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_owned(self, task_id: uuid.UUID, user_id: uuid.UUID) -> Optional[Task]:
        result = await self._session.execute(
            select(Task).where(Task.id == task_id, Task.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def save(self, task: Task) -> Task:
        await self._session.commit()
        await self._session.refresh(task)
        return task

    async def delete(self, task: Task) -> None:
        await self._session.delete(task)
        await self._session.commit()
