"""
Shared infrastructure for PriceBite backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase client factory and connection bootstrap
- exceptions: Base exception classes
- app_logging: Logging setup

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    bootstrap_database,
    connect_database,
    get_supabase_client,
    is_connected,
    reset_client_cache,
)
from .exceptions import (
    PriceBiteError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, CamelModel

__all__ = [
    "Settings",
    "get_settings",
    "bootstrap_database",
    "connect_database",
    "get_supabase_client",
    "is_connected",
    "reset_client_cache",
    "PriceBiteError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "CamelModel",
]
