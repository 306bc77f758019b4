"""
Top-level API router: health check plus the auth and task routers.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from auth.routes import router as auth_router
from tasks.routes import router as task_router

router = APIRouter()


@router.get("/health", tags=["health"])
async def health() -> Dict[str, Any]:
    return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}


router.include_router(auth_router, prefix="/auth")
router.include_router(task_router, prefix="/tasks")
