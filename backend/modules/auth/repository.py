"""
User repository for database access.

Encapsulates all Supabase queries and row mapping for the users table.
The table enforces a unique constraint on email.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError
from supabase import Client

from shared.exceptions import ExternalServiceError
from shared.repository import BaseRepository
from .exceptions import DuplicateUserError
from .models import UserRecord

# Postgres error code for unique constraint violations
UNIQUE_VIOLATION = "23505"


def _store_error(error: APIError) -> ExternalServiceError:
    return ExternalServiceError(
        f"User store request failed: {error.message}",
        service="supabase",
        code="USER_STORE_ERROR",
        details={"postgres_code": error.code},
    )


class UserRepository(BaseRepository[UserRecord]):
    """
    Repository for user data access.

    Only insert, find-by-email, find-by-id and update-by-id are needed;
    users are never deleted through the API.
    """

    def __init__(self, db: Client, table: str = "users") -> None:
        super().__init__(db)
        self._table = table

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        """
        Get a user by exact email.

        Returns:
            The user, or None if no account uses this email.
        """
        result = self._execute(self._db.table(self._table).select("*").eq("email", email).limit(1))
        row = self._first_row(result)
        return self._map_to_user(row) if row else None

    def find_by_id(self, user_id: str) -> Optional[UserRecord]:
        """
        Get a user by ID.

        Returns:
            The user, or None if not found.
        """
        result = self._execute(self._db.table(self._table).select("*").eq("id", user_id))
        row = self._first_row(result)
        return self._map_to_user(row) if row else None

    def create(self, data: dict[str, Any]) -> UserRecord:
        """
        Insert a new user.

        Args:
            data: Column values (name, email, password_hash, ...)

        Returns:
            The created user with generated id and created_at.

        Raises:
            DuplicateUserError: If the email is already registered.
            ExternalServiceError: If the store rejects the insert otherwise.
        """
        try:
            result = self._db.table(self._table).insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateUserError(data.get("email", "")) from e
            raise _store_error(e) from e
        return self._map_to_user(result.data[0])

    def update(self, user_id: str, changes: dict[str, Any]) -> Optional[UserRecord]:
        """
        Apply a partial update and return the updated user.

        Returns:
            The updated user, or None if no row has this id.
        """
        result = self._execute(self._db.table(self._table).update(changes).eq("id", user_id))
        row = self._first_row(result)
        return self._map_to_user(row) if row else None

    # -------------------------------------------------------------------------
    # Query and mapping helpers
    # -------------------------------------------------------------------------

    def _execute(self, query: Any) -> Any:
        try:
            return query.execute()
        except APIError as e:
            raise _store_error(e) from e

    def _map_to_user(self, data: dict[str, Any]) -> UserRecord:
        return UserRecord(
            id=str(data["id"]),
            name=data["name"],
            email=data["email"],
            password_hash=data["password_hash"],
            phone=data.get("phone"),
            city=data.get("city"),
            dietary_preferences=data.get("dietary_preferences") or [],
            created_at=data.get("created_at"),
        )
