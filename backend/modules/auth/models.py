"""
Authentication module data models.

Request/response schemas use camelCase on the wire. UserRecord mirrors
a row of the users table and never leaves the auth module: responses
carry the PublicUser projection, which has no password hash.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field

from shared.models import CamelModel


class TokenPayload(CamelModel):
    """
    Decoded bearer token claims.

    Tokens carry the user id and email plus issue/expiry timestamps.
    """

    user_id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email")
    exp: int = Field(..., description="Expiration timestamp")
    iat: int = Field(..., description="Issued at timestamp")


class UserRecord(BaseModel):
    """A row of the users table."""

    id: str
    name: str
    email: str
    password_hash: str
    phone: Optional[str] = None
    city: Optional[str] = None
    dietary_preferences: list[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None


class PublicUser(CamelModel):
    """The user fields safe to return to clients."""

    id: str
    name: str
    email: str
    phone: Optional[str] = None
    city: Optional[str] = None
    dietary_preferences: list[str] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: UserRecord) -> "PublicUser":
        return cls(
            id=record.id,
            name=record.name,
            email=record.email,
            phone=record.phone,
            city=record.city,
            dietary_preferences=record.dietary_preferences,
        )


class RegisterRequest(CamelModel):
    """Request to create an account."""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=1)
    phone: Optional[str] = None
    city: Optional[str] = None
    dietary_preferences: list[str] = Field(default_factory=list)


class LoginRequest(CamelModel):
    """
    Request to sign in.

    The email is normalized the same way as on registration so the
    lookup matches the stored address.
    """

    email: EmailStr
    password: str = Field(..., min_length=1)


class UpdateProfileRequest(CamelModel):
    """
    Partial profile update.

    Only fields present (and not null) in the request change. Email and
    password cannot be changed here.
    """

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = None
    city: Optional[str] = None
    dietary_preferences: Optional[list[str]] = None

    def changes(self) -> dict:
        """Column updates for the supplied fields."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class AuthResponse(CamelModel):
    """Returned by register and login."""

    message: str
    token: str
    user: PublicUser


class UserResponse(CamelModel):
    """Returned by the current-user endpoint."""

    user: PublicUser


class ProfileUpdateResponse(CamelModel):
    """Returned by the profile update endpoint."""

    message: str
    user: PublicUser


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str
