"""
Task API routes. Every route requires a Bearer token.

Route prefix: {api_prefix}/tasks
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from api.dependencies import get_task_service
from auth.dependencies import AuthContext, get_auth_context
from tasks.schemas import TaskCreate, TaskRead, TaskUpdate
from tasks.service import TaskService
from utils.schemas import ApiResponse

router = APIRouter(tags=["tasks"])


@router.post(
    "",
    response_model=ApiResponse[TaskRead],
    status_code=status.HTTP_201_CREATED,
)
async def create_task(
    req: TaskCreate,
    auth: AuthContext = Depends(get_auth_context),
    tasks: TaskService = Depends(get_task_service),
) -> ApiResponse[TaskRead]:
    task = await tasks.create(auth.user_id, req.title, req.description)
    return ApiResponse[TaskRead](
        data=TaskRead.model_validate(task),
        message="Task created successfully",
    )


@router.get("", response_model=ApiResponse[List[TaskRead]])
async def list_tasks(
    auth: AuthContext = Depends(get_auth_context),
    tasks: TaskService = Depends(get_task_service),
) -> ApiResponse[List[TaskRead]]:
    """All of the caller's tasks, newest first."""
    rows = await tasks.list_by_owner(auth.user_id)
    return ApiResponse[List[TaskRead]](
        data=[TaskRead.model_validate(t) for t in rows],
        message="Tasks retrieved successfully",
    )


@router.get("/{task_id}", response_model=ApiResponse[TaskRead])
async def get_task(
    task_id: str,
    auth: AuthContext = Depends(get_auth_context),
    tasks: TaskService = Depends(get_task_service),
) -> ApiResponse[TaskRead]:
    task = await tasks.get(task_id, auth.user_id)
    return ApiResponse[TaskRead](
        data=TaskRead.model_validate(task),
        message="Task retrieved successfully",
    )


@router.put("/{task_id}", response_model=ApiResponse[TaskRead])
async def update_task(
    task_id: str,
    req: TaskUpdate,
    auth: AuthContext = Depends(get_auth_context),
    tasks: TaskService = Depends(get_task_service),
) -> ApiResponse[TaskRead]:
    task = await tasks.update(task_id, auth.user_id, req.model_dump(exclude_unset=True))
    return ApiResponse[TaskRead](
        data=TaskRead.model_validate(task),
        message="Task updated successfully",
    )


@router.delete("/{task_id}", response_model=ApiResponse[None])
async def delete_task(
    task_id: str,
    auth: AuthContext = Depends(get_auth_context),
    tasks: TaskService = Depends(get_task_service),
) -> ApiResponse[None]:
    await tasks.delete(task_id, auth.user_id)
    return ApiResponse[None](data=None, message="Task deleted successfully")
