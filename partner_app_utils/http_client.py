"""
Standardized HTTP client configuration with proper timeouts.

Provides consistent timeout, header and session management for every
request the partner client layer sends. Sessions should be created with
these utilities instead of constructing ``aiohttp.ClientSession`` directly.

Usage:
    from partner_app_utils.http_client import create_client_session

    # For context manager usage:
    async with create_client_session() as session:
        await session.get(url)

    # For a session shared by several facades:
    session = create_client_session()
    try:
        admin = AdminAppApi(session=session)
        ...
    finally:
        await session.close()
"""

from __future__ import annotations

from typing import Mapping, Optional

import aiohttp
from aiohttp import ClientTimeout

__all__ = [
    "DEFAULT_HEADERS",
    "DEFAULT_TIMEOUT",
    "build_headers",
    "create_client_session",
]

DEFAULT_HEADERS: dict[str, str] = {"Content-Type": "application/json"}

# Sessions impose no limits; RequestOptions.timeout is the only per-attempt deadline
DEFAULT_TIMEOUT = ClientTimeout(total=None, connect=None, sock_read=None, sock_connect=None)


def build_headers(extra: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Merge caller-supplied headers over the JSON defaults."""
    headers = dict(DEFAULT_HEADERS)
    if extra:
        headers.update(extra)
    return headers


def create_client_session(
    timeout: ClientTimeout | None = None,
    **kwargs,
) -> aiohttp.ClientSession:
    """Create an aiohttp ClientSession with proper timeout configuration.

    Args:
        timeout: Optional custom timeout. Defaults to DEFAULT_TIMEOUT (no limits).
        **kwargs: Additional arguments passed to ClientSession.

    Returns:
        Configured aiohttp.ClientSession.
    """
    if timeout is None:
        timeout = DEFAULT_TIMEOUT
    return aiohttp.ClientSession(timeout=timeout, **kwargs)
