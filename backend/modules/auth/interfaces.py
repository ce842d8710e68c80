"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with fakes and swapping the user store.
"""

from typing import Any, Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import (
    AuthResponse,
    LoginRequest,
    PublicUser,
    RegisterRequest,
    UpdateProfileRequest,
    UserRecord,
)


@runtime_checkable
class IUserRepository(Protocol):
    """Storage operations the auth service needs."""

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        ...

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        ...

    def create(self, data: dict[str, Any]) -> UserRecord:
        ...

    def update(self, user_id: str, changes: dict[str, Any]) -> Optional[UserRecord]:
        ...


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """
        Create an account and sign it in.

        Raises:
            DuplicateUserError: If the email is already registered
        """
        ...

    async def login(self, request: LoginRequest) -> AuthResponse:
        """
        Sign in with email and password.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        ...

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a bearer token and return the authenticated user.

        Raises:
            MissingTokenError: If no token is given
            InvalidTokenError: If the token is malformed, forged or expired
        """
        ...

    async def get_current_user(self, user_id: str) -> PublicUser:
        """
        Get the public profile of an authenticated user.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        ...

    async def update_profile(self, user_id: str, request: UpdateProfileRequest) -> PublicUser:
        """
        Apply a partial profile update.

        Raises:
            UserNotFoundError: If the user no longer exists
        """
        ...
