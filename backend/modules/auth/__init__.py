"""
Authentication module.

Handles registration, login, bearer token issue/validation and user
profile management.

Public API:
- IAuthService: Interface for auth operations
- IUserRepository: Storage contract for users
- PublicUser: User projection returned to clients
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService, IUserRepository
from .models import (
    AuthResponse,
    LoginRequest,
    PublicUser,
    RegisterRequest,
    TokenPayload,
    UpdateProfileRequest,
    UserRecord,
)
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    DuplicateUserError,
    UserNotFoundError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "IUserRepository",
    # Models
    "AuthResponse",
    "LoginRequest",
    "PublicUser",
    "RegisterRequest",
    "TokenPayload",
    "UpdateProfileRequest",
    "UserRecord",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "DuplicateUserError",
    "UserNotFoundError",
]
