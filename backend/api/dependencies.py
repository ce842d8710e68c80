"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService, IUserRepository
    from modules.catalog.interfaces import ICatalogService
    from modules.catalog.store import CatalogStore
    from modules.contact.service import ContactService


class ServiceContainer:
    """
    Lazily built service singletons.

    The catalog store is loaded from disk the first time anything asks
    for it; the user repository connects to Supabase the same way.
    """

    def __init__(self) -> None:
        self._catalog_store: "CatalogStore | None" = None
        self._catalog_service: "ICatalogService | None" = None
        self._user_repository: "IUserRepository | None" = None
        self._auth_service: "IAuthService | None" = None
        self._contact_service: "ContactService | None" = None

    @property
    def catalog_store(self) -> "CatalogStore":
        """Get the catalog store, loading the seed file on first access."""
        if self._catalog_store is None:
            from modules.catalog.store import load_catalog
            from shared.config import get_settings
            self._catalog_store = load_catalog(get_settings().catalog_path)
        return self._catalog_store

    @property
    def catalog(self) -> "ICatalogService":
        """Get the catalog service instance."""
        if self._catalog_service is None:
            from modules.catalog.service import CatalogService
            from shared.config import get_settings
            self._catalog_service = CatalogService(
                self.catalog_store,
                hot_deals_limit=get_settings().hot_deals_limit,
            )
        return self._catalog_service

    @property
    def user_repository(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.config import get_settings
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(
                get_supabase_client(),
                table=get_settings().users_table,
            )
        return self._user_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(self.user_repository)
        return self._auth_service

    @property
    def contact(self) -> "ContactService":
        """Get the contact service instance."""
        if self._contact_service is None:
            from modules.contact.service import ContactService
            self._contact_service = ContactService()
        return self._contact_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._catalog_store = None
        self._catalog_service = None
        self._user_repository = None
        self._auth_service = None
        self._contact_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Drop the container so the next request rebuilds every service (tests)."""
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_catalog_service() -> "ICatalogService":
    """FastAPI dependency for catalog service."""
    return get_container().catalog


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_contact_service() -> "ContactService":
    """FastAPI dependency for contact service."""
    return get_container().contact
