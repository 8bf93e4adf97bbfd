"""
Pooled HTTP client for the sentiment backend.

Every analysis request goes through one AsyncClient so connections to the
inference host are reused. Redirects are followed: hosted models and
self-hosted analyzers commonly answer a missing or extra trailing slash
with 307/308, and httpx replays the POST body on those. The bearer token
is not stored here; ProviderClient sends it with each call.
"""

import logging

import httpx

from app.config import settings

logger = logging.getLogger(__name__)

_client: httpx.AsyncClient | None = None


def build_ai_http_client(transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    """Create a client with the AI timeout, pool limits and redirect policy."""
    return httpx.AsyncClient(
        transport=transport,
        timeout=httpx.Timeout(settings.ai_timeout_seconds, connect=5.0),
        limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
        follow_redirects=True,
    )


def get_ai_http_client() -> httpx.AsyncClient:
    """Shared client, recreated after shutdown closed it."""
    global _client
    if _client is None or _client.is_closed:
        _client = build_ai_http_client()
        logger.debug("Opened AI backend client (timeout=%ss)", settings.ai_timeout_seconds)
    return _client


async def close_ai_http_client() -> None:
    """Release pooled connections; called from the app lifespan."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
        _client = None
        logger.debug("Closed AI backend client")
