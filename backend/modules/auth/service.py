"""
Authentication service implementation.

Registers and signs in users stored in Supabase, issues HS256 bearer
tokens and validates them. Tokens are stateless: there is no
server-side session and no revocation.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from pydantic import ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser

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
    DuplicateUserError,
    ExpiredTokenError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    UserNotFoundError,
)
from .passwords import hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Password hashing runs in a worker thread so the event loop keeps
    serving other requests while bcrypt works.
    """

    def __init__(self, repository: IUserRepository, settings: Optional[Settings] = None):
        self._repository = repository
        self._settings = settings or get_settings()

    # -------------------------------------------------------------------------
    # Tokens
    # -------------------------------------------------------------------------

    def issue_token(self, user: UserRecord) -> str:
        """Sign a token for ``user`` valid for the configured TTL."""
        now = datetime.now(timezone.utc)
        payload = {
            "userId": user.id,
            "email": user.email,
            "iat": now,
            "exp": now + timedelta(hours=self._settings.token_ttl_hours),
        }
        return jwt.encode(
            payload,
            self._settings.jwt_secret,
            algorithm=self._settings.jwt_algorithm,
        )

    async def validate_token(self, token: Optional[str]) -> AuthenticatedUser:
        """
        Validate a token and return the authenticated user.

        Only the signature and expiry are checked.
        """
        if not token:
            raise MissingTokenError()

        try:
            payload = jwt.decode(
                token,
                self._settings.jwt_secret,
                algorithms=[self._settings.jwt_algorithm],
                options={"require": ["exp"]},
            )
            claims = TokenPayload(**payload)
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {str(e)}")
        except PydanticValidationError:
            raise InvalidTokenError("Invalid token: missing claims")

        return AuthenticatedUser(id=claims.user_id, email=claims.email)

    # -------------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------------

    async def register(self, request: RegisterRequest) -> AuthResponse:
        if self._repository.find_by_email(request.email) is not None:
            raise DuplicateUserError(request.email)

        password_hash = await asyncio.to_thread(
            hash_password, request.password, self._settings.bcrypt_rounds
        )
        user = self._repository.create({
            "name": request.name,
            "email": request.email,
            "password_hash": password_hash,
            "phone": request.phone,
            "city": request.city,
            "dietary_preferences": request.dietary_preferences,
        })
        logger.info("Registered user %s", user.id)

        return AuthResponse(
            message="User registered successfully",
            token=self.issue_token(user),
            user=PublicUser.from_record(user),
        )

    async def login(self, request: LoginRequest) -> AuthResponse:
        user = self._repository.find_by_email(request.email)
        if user is None:
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsError()

        matches = await asyncio.to_thread(verify_password, request.password, user.password_hash)
        if not matches:
            logger.info("Login failed: wrong password for user %s", user.id)
            raise InvalidCredentialsError()

        return AuthResponse(
            message="Login successful",
            token=self.issue_token(user),
            user=PublicUser.from_record(user),
        )

    async def get_current_user(self, user_id: str) -> PublicUser:
        user = self._repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return PublicUser.from_record(user)

    async def update_profile(self, user_id: str, request: UpdateProfileRequest) -> PublicUser:
        """
        Apply only the supplied fields.

        No concurrency check: the last write wins.
        """
        changes = request.changes()
        if not changes:
            return await self.get_current_user(user_id)

        user = self._repository.update(user_id, changes)
        if user is None:
            raise UserNotFoundError(user_id)
        return PublicUser.from_record(user)
