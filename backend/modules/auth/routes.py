"""
Authentication API endpoints.

Registration, login, logout and profile management. Unexpected errors
are logged and returned as a generic 500 so nothing about the store
leaks to clients.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.middleware.auth import get_current_user
from api.dependencies import get_auth_service
from shared.models import AuthenticatedUser

from .interfaces import IAuthService
from .models import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    ProfileUpdateResponse,
    RegisterRequest,
    UpdateProfileRequest,
    UserResponse,
)
from .exceptions import DuplicateUserError, InvalidCredentialsError, UserNotFoundError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Create an account and return a token for it.
    """
    try:
        return await service.register(request)
    except DuplicateUserError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except Exception:
        logger.exception("Registration error")
        raise HTTPException(status_code=500, detail="Registration failed")


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Exchange email and password for a token.

    Unknown email and wrong password get the same 401.
    """
    try:
        return await service.login(request)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=401, detail=e.message)
    except Exception:
        logger.exception("Login error")
        raise HTTPException(status_code=500, detail="Login failed")


@router.post("/logout", response_model=MessageResponse)
async def logout(
    user: AuthenticatedUser = Depends(get_current_user),
) -> MessageResponse:
    """
    Acknowledge a logout.

    Tokens are stateless, so the client discarding its token is the
    whole logout.
    """
    return MessageResponse(message="Logout successful")


@router.get("/me", response_model=UserResponse)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> UserResponse:
    """
    Get the current user's profile.
    """
    try:
        return UserResponse(user=await service.get_current_user(user.id))
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception:
        logger.exception("Get user error")
        raise HTTPException(status_code=500, detail="Failed to get user")


@router.put("/profile", response_model=ProfileUpdateResponse)
async def update_profile(
    request: UpdateProfileRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> ProfileUpdateResponse:
    """
    Update name, phone, city and/or dietary preferences.

    Fields left out of the request keep their current values.
    """
    try:
        updated = await service.update_profile(user.id, request)
    except UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception:
        logger.exception("Profile update error")
        raise HTTPException(status_code=500, detail="Profile update failed")

    return ProfileUpdateResponse(message="Profile updated successfully", user=updated)
