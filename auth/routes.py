"""
Auth API routes: signup, signin.

Route prefix: {api_prefix}/auth
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from api.dependencies import get_auth_service
from auth.schemas import AuthData, SigninRequest, SignupRequest
from auth.service import AuthService
from utils.schemas import ApiResponse

router = APIRouter(tags=["auth"])


@router.post(
    "/signup",
    response_model=ApiResponse[AuthData],
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    req: SignupRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> ApiResponse[AuthData]:
    """Register a new user."""
    result = await auth_service.signup(req.email, req.full_name, req.password)
    return ApiResponse[AuthData](
        data=AuthData.model_validate(result),
        message="User registered successfully",
    )


@router.post("/signin", response_model=ApiResponse[AuthData])
async def signin(
    req: SigninRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> ApiResponse[AuthData]:
    """Login with email + password."""
    result = await auth_service.signin(req.email, req.password)
    return ApiResponse[AuthData](
        data=AuthData.model_validate(result),
        message="User signed in successfully",
    )
