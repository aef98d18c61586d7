"""
Retry control for service requests.

Wraps a single request attempt with a bounded number of retries and a fixed
delay between attempts. There is no exponential backoff and no jitter: the
dashboards prefer a predictable worst-case latency over spreading load.

Usage:
    from partner_app_utils.resilience import RetryPolicy, with_retry

    policy = RetryPolicy(max_retries=2, retry_delay=1.0)
    result = await with_retry(
        lambda: execute_request(url, options),
        policy.max_retries,
        policy.retry_delay,
        description=url,
    )
    if result.ok:
        use(result.data)
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Awaitable, Callable

if TYPE_CHECKING:
    from partner_app_utils.models import RequestResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_RETRIES = 2
DEFAULT_RETRY_DELAY = 1.0  # seconds


@dataclass(frozen=True)
class RetryPolicy:
    """Retry settings for one logical call.

    Attributes:
        max_retries: Retries after the initial attempt (0 disables retrying).
        retry_delay: Fixed pause in seconds between consecutive attempts.
    """

    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")
        if self.retry_delay < 0:
            raise ValueError("retry_delay must be non-negative")

    @property
    def total_attempts(self) -> int:
        """Initial attempt plus retries."""
        return self.max_retries + 1


async def with_retry(
    attempt: Callable[[], Awaitable["RequestResult"]],
    max_retries: int = DEFAULT_MAX_RETRIES,
    retry_delay: float = DEFAULT_RETRY_DELAY,
    *,
    description: str = "request",
) -> "RequestResult":
    """Run ``attempt`` until it succeeds or the retry budget is spent.

    Attempts are strictly sequential. The first successful result is returned
    immediately; after a failed attempt that is not the last one, the
    controller sleeps ``retry_delay`` seconds.

    Args:
        attempt: Zero-argument coroutine factory performing one attempt.
        max_retries: Number of retries after the initial attempt.
        retry_delay: Seconds to wait between attempts.
        description: Label used in log messages (usually the URL).

    Returns:
        The first successful RequestResult, or the last failed one.
    """
    policy = RetryPolicy(max_retries=max_retries, retry_delay=retry_delay)
    total = policy.total_attempts

    attempt_number = 1
    result = await attempt()
    while not result.ok:
        logger.warning(
            f"Failed to fetch from {description} (attempt {attempt_number}/{total}): "
            f"{result.error}"
        )
        if attempt_number == total:
            logger.error(f"All retries failed for {description}: {result.error}")
            break
        await asyncio.sleep(policy.retry_delay)
        attempt_number += 1
        result = await attempt()

    return result


__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_DELAY",
    "RetryPolicy",
    "with_retry",
]
