"""
Base class for Supabase-backed repositories.

Repositories own the query chains for one table and map rows to
Pydantic models; services never see raw rows.
"""

from typing import Any, Generic, Optional, TypeVar
from supabase import Client


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Holds the Supabase client for a repository.

    Subclasses add table-specific queries and a row mapper, e.g.
    ``UserRepository(BaseRepository[UserRecord])``.
    """

    def __init__(self, db: Client) -> None:
        self._db = db

    @staticmethod
    def _first_row(result: Any) -> Optional[dict[str, Any]]:
        """First row of a query response, None when it returned nothing."""
        if not result.data:
            return None
        return result.data[0]
