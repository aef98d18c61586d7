"""
Generic API client for making requests to the partner backend services.

A request goes through two layers:

1. ``execute_request`` performs exactly one attempt under a deadline and
   classifies the outcome into a ``RequestResult`` (data, or one of
   ``TransportError``, ``RequestTimeoutError``, ``ProtocolError``,
   ``DecodeError``). It never raises.
2. ``fetch_result`` runs the executor under ``resilience.with_retry``.

The public helpers (``make_app_request`` and friends) collapse the final
result into the absence signal: decoded JSON on success, ``None`` otherwise.

Usage:
    from partner_app_utils.api_client import make_app_request, post_app_request

    organizations = await make_app_request(f"{base_url}/api/organizations")
    ack = await post_app_request(f"{base_url}/api/vendors/7/approve", {})
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Optional

import aiohttp

from partner_app_utils.exceptions import (
    DecodeError,
    ProtocolError,
    RequestFailure,
    RequestTimeoutError,
    TransportError,
)
from partner_app_utils.http_client import build_headers, create_client_session
from partner_app_utils.logging_config import get_logger
from partner_app_utils.models import HEALTH_CHECK_TIMEOUT, RequestOptions, RequestResult
from partner_app_utils.resilience import with_retry

logger = get_logger(__name__)

__all__ = [
    "execute_request",
    "fetch_result",
    "make_app_request",
    "post_app_request",
    "put_app_request",
    "delete_app_request",
    "check_health",
]


async def _send(session: aiohttp.ClientSession, url: str, options: RequestOptions) -> Any:
    """Send one request and decode the JSON body of a 2xx response."""
    kwargs: dict[str, Any] = {"headers": build_headers(options.headers)}
    if options.body is not None:
        kwargs["data"] = json.dumps(options.body)

    async with session.request(options.method, url, **kwargs) as response:
        if not 200 <= response.status < 300:
            raise ProtocolError(url, response.status)
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise DecodeError(url, f"invalid JSON body: {e}") from e


async def execute_request(
    url: str,
    options: Optional[RequestOptions] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> RequestResult:
    """Perform a single request attempt with an enforced deadline.

    The deadline covers connecting, sending and reading the body. When it
    expires the in-flight request is cancelled.

    Args:
        url: Absolute URL.
        options: Request settings. Defaults to ``RequestOptions()``.
        session: Session to send on. A short-lived one is created if omitted.

    Returns:
        RequestResult holding the decoded JSON or the classified failure.
    """
    options = options or RequestOptions()
    try:
        if session is None:
            async with create_client_session() as own_session:
                data = await asyncio.wait_for(_send(own_session, url, options), options.timeout)
        else:
            data = await asyncio.wait_for(_send(session, url, options), options.timeout)
    # TimeoutError subclasses OSError, so it has to be matched first
    except asyncio.TimeoutError:
        failure: RequestFailure = RequestTimeoutError(url, options.timeout)
    except RequestFailure as e:
        failure = e
    except (aiohttp.ClientError, OSError, ValueError) as e:
        failure = TransportError(url, f"{type(e).__name__}: {e}")
    else:
        return RequestResult.success(data)

    logger.debug(
        "Request attempt failed",
        url=url,
        method=options.method,
        failure=failure.kind,
        reason=failure.reason,
    )
    return RequestResult.failure(failure)


async def fetch_result(
    url: str,
    options: Optional[RequestOptions] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> RequestResult:
    """Execute a request with retries and return the final tagged result."""
    options = options or RequestOptions()
    return await with_retry(
        lambda: execute_request(url, options, session=session),
        options.max_retries,
        options.retry_delay,
        description=url,
    )


async def make_app_request(
    url: str,
    options: Optional[RequestOptions] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> Any:
    """Make a request with retry logic.

    Returns:
        Decoded JSON, or None when every attempt failed.
    """
    result = await fetch_result(url, options, session=session)
    return result.data if result.ok else None


async def post_app_request(
    url: str,
    data: Any,
    options: Optional[RequestOptions] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> Any:
    """Make a POST request with ``data`` as the JSON body."""
    options = (options or RequestOptions()).with_overrides(method="POST", body=data)
    return await make_app_request(url, options, session=session)


async def put_app_request(
    url: str,
    data: Any,
    options: Optional[RequestOptions] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> Any:
    """Make a PUT request with ``data`` as the JSON body."""
    options = (options or RequestOptions()).with_overrides(method="PUT", body=data)
    return await make_app_request(url, options, session=session)


async def delete_app_request(
    url: str,
    options: Optional[RequestOptions] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> Any:
    options = (options or RequestOptions()).with_overrides(method="DELETE", body=None)
    return await make_app_request(url, options, session=session)


async def check_health(
    base_url: str,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> bool:
    """Check if a service is healthy.

    Probes ``{base_url}/health`` once with a short deadline and no retries,
    so transient failures are reported instead of hidden behind retry delay.
    Never raises.
    """
    options = RequestOptions(timeout=HEALTH_CHECK_TIMEOUT, max_retries=0)
    url = f"{base_url}/health"
    try:
        response = await make_app_request(url, options, session=session)
        return response is not None
    except Exception as e:
        logger.warning("Health probe raised", url=url, error=f"{type(e).__name__}: {e}")
        return False
