"""
Centralized configuration for the PriceBite backend.

All settings are loaded from environment variables with development defaults.
The defaults are NOT suitable for production: override SUPABASE_URL,
SUPABASE_SERVICE_ROLE_KEY and JWT_SECRET in any real deployment.
"""

from functools import lru_cache
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

# Bundled seed catalog shipped with the catalog module
DEFAULT_CATALOG_PATH = (
    Path(__file__).resolve().parent.parent / "modules" / "catalog" / "data" / "catalog.yaml"
)

# Supabase local-development service role key (public demo value)
LOCAL_SUPABASE_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJpc3MiOiJzdXBhYmFzZS1kZW1vIiwicm9sZSI6InNlcnZpY2Vfcm9sZSIsImV4cCI6MTk4MzgxMjk5Nn0."
    "EGIM96RAZx35lJzdJsyH-qQwv8Hdp7fsn3W0YpN81IU"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "PriceBite API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5001
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase (user store)
    supabase_url: str = "http://127.0.0.1:54321"
    supabase_service_role_key: str = LOCAL_SUPABASE_SERVICE_KEY
    users_table: str = "users"
    db_retry_delay_seconds: float = 5.0

    # Tokens and passwords
    jwt_secret: str = "pricebite-secret-key"
    jwt_algorithm: str = "HS256"
    token_ttl_hours: int = 24
    bcrypt_rounds: int = 10

    # Catalog
    catalog_path: Path = DEFAULT_CATALOG_PATH
    hot_deals_limit: int = 10


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
