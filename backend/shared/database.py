"""
Database client factory and connection bootstrap for Supabase.

The backend talks to Supabase with the service role key; all access
goes through repositories built on top of the cached client.
"""

import asyncio
import logging
from typing import Optional
from supabase import create_client, Client

from .config import get_settings

logger = logging.getLogger(__name__)

# Module-level client cache
_service_client: Optional[Client] = None
_connected: bool = False


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def is_connected() -> bool:
    """Whether the last connection probe succeeded."""
    return _connected


def _probe(client: Client, table: str) -> None:
    client.table(table).select("id").limit(1).execute()


async def connect_database() -> bool:
    """
    Create the client and probe the users table once.

    Failures are logged, never raised: the catalog endpoints keep
    working without the user store.

    Returns:
        True if the probe succeeded
    """
    global _connected
    settings = get_settings()

    try:
        client = get_supabase_client()
        await asyncio.to_thread(_probe, client, settings.users_table)
    except Exception as e:
        _connected = False
        logger.error("User store connection error: %s", e)
        return False

    _connected = True
    logger.info("Connected to user store at %s", settings.supabase_url)
    return True


async def _retry_connect(delay: float) -> None:
    await asyncio.sleep(delay)
    if await connect_database():
        logger.info("Reconnected to user store")
    else:
        logger.error("User store reconnection failed; auth endpoints will return errors")


async def bootstrap_database(delay: Optional[float] = None) -> Optional[asyncio.Task]:
    """
    Connect to the user store, scheduling exactly one retry on failure.

    Args:
        delay: Seconds to wait before the retry (defaults to settings)

    Returns:
        The scheduled retry task, or None if the first attempt succeeded
    """
    if await connect_database():
        return None

    if delay is None:
        delay = get_settings().db_retry_delay_seconds
    logger.info("Retrying user store connection in %s seconds...", delay)
    return asyncio.create_task(_retry_connect(delay))


def reset_client_cache() -> None:
    """
    Reset the cached database client.

    Useful for testing or when configuration changes.
    """
    global _service_client, _connected
    _service_client = None
    _connected = False
