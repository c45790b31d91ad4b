"""
Supabase client initialization.
Single point of database connection.
"""

import asyncio
import concurrent.futures
import logging
from functools import wraps
from typing import Optional

import httpx
from postgrest.exceptions import APIError
from supabase import create_client, Client, AuthApiError

from config.settings import settings
from config.features import features
from core.domain.errors import BackendError, BackendNotConfigured

logger = logging.getLogger(__name__)

_supabase: Optional[Client] = None


def _create(key: str) -> Client:
    if not settings.supabase_url or not key:
        raise BackendNotConfigured(
            "Supabase credentials not configured! "
            "Required env vars: SUPABASE_URL, SUPABASE_SERVICE_KEY (or SUPABASE_KEY). "
            f"SUPABASE_URL: {'set' if settings.supabase_url else 'MISSING'}, "
            f"SUPABASE_KEY: {'set' if key else 'MISSING'}"
        )

    # Schema isolation: staging can point at a non-public schema
    if settings.db_schema != "public":
        from supabase.lib.client_options import ClientOptions
        return create_client(
            settings.supabase_url, key,
            options=ClientOptions(schema=settings.db_schema)
        )
    return create_client(settings.supabase_url, key)


def get_supabase() -> Client:
    """Shared client for data queries, created on first use"""
    global _supabase
    if _supabase is None:
        _supabase = _create(settings.data_key)
        logger.info(f"Supabase client ready (schema={settings.db_schema})")
    return _supabase


def new_auth_client() -> Client:
    """
    Fresh client for one password sign-in. The signed-in session stays on
    this client and never leaks into the shared data client.
    """
    return _create(settings.supabase_key or settings.supabase_service_key)


# Bounded pool for the blocking SDK calls, separate from the default executor
_db_executor = concurrent.futures.ThreadPoolExecutor(
    max_workers=10,
    thread_name_prefix="supabase-db",
)


def _describe(exc: Exception) -> str:
    return getattr(exc, "message", None) or str(exc)


def run_sync(func):
    """
    Decorator to run synchronous Supabase operations in async context.
    Supabase Python SDK is synchronous, so we need this wrapper.
    Uses a dedicated bounded thread pool instead of the default executor.
    SDK and transport errors come out as BackendError carrying the service message.
    """
    @wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        try:
            result = await loop.run_in_executor(_db_executor, lambda: func(*args, **kwargs))
        except (APIError, AuthApiError, httpx.HTTPError) as e:
            logger.error(f"[SUPABASE] {func.__name__} failed: {_describe(e)}")
            raise BackendError(_describe(e)) from e
        if features.LOG_BACKEND_RESPONSES:
            logger.debug(f"[SUPABASE] {func.__name__} -> {result!r}")
        return result
    return wrapper
