# kudos_wall/adapters/inbound/api/v1/endpoints/auth_endpoint.py (async version)

import logging
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Security, status
from fastapi.security import HTTPAuthorizationCredentials

from kudos_wall.adapters.inbound.api.deps import bearer_scheme, get_auth_service
from kudos_wall.application.dtos.user_dto import (
    LoginUserOutput,
    LogoutOutput,
    RegisterUserOutput,
    UserLogin,
    UserRegister,
)
from kudos_wall.application.use_cases.auth_use_cases import AsyncAuthService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post(
    "/register",
    response_model=RegisterUserOutput,
    status_code=status.HTTP_200_OK,
    summary="Register User - Creates a new user",
    description="""
    Creates a new user and returns it with an access token.

    The password must meet the following criteria:
    - Between 8 and 100 characters
    - At least one uppercase letter
    - At least one lowercase letter
    - At least one number
    - At least one special character
    """,
    responses={
        200: {
            "description": "User created successfully",
            "content": {
                "application/json": {
                    "example": {
                        "id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                        "email": "user@example.com",
                        "name": "Jane Doe",
                        "role": "TEAM_MEMBER",
                        "createdAt": "2024-01-01T00:00:00Z",
                        "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                    }
                }
            }
        },
        400: {"description": "Validation failed"},
        409: {
            "description": "Email already in use",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "User with this email already exists",
                        "code": "RESOURCE_ALREADY_EXISTS",
                    }
                }
            }
        }
    }
)
async def register_user(
        user_input: UserRegister,
        service: AsyncAuthService = Depends(get_auth_service),
):
    return await service.register_user(user_input)


@router.post(
    "/login",
    response_model=LoginUserOutput,
    summary="Login User - Generates access token",
    description="Authenticates a user (email/password) and returns a JWT valid for 24 hours.",
    responses={
        400: {"description": "Validation failed"},
        401: {
            "description": "Invalid credentials",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "Invalid email or password",
                        "code": "INVALID_CREDENTIALS",
                    }
                }
            }
        }
    }
)
async def login_user(
        user_input: UserLogin,
        service: AsyncAuthService = Depends(get_auth_service),
):
    return await service.login_user(user_input)


@router.post(
    "/logout",
    response_model=LogoutOutput,
    status_code=status.HTTP_200_OK,
    summary="Logout - Revoke current access token",
    description=(
            "Adds the bearer token to the blacklist until it expires. "
            "A token that is already invalid is accepted as logged out."
    ),
    responses={
        401: {
            "description": "Missing bearer token",
            "content": {"application/json": {"example": {"detail": "Unauthorized"}}}
        }
    }
)
async def logout_user(
        credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
        service: AsyncAuthService = Depends(get_auth_service),
):
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return await service.logout_user(credentials.credentials)
