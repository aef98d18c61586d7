"""
Health aggregation across the admin, market and buyer services.

Each service is probed independently and concurrently. The join waits for
every probe to settle, so one slow or failing service never changes the
outcome reported for the others. Health checks never fall back to mock data.

Usage:
    from partner_app_utils.health import check_all_apps_health, get_health_summary

    health = await check_all_apps_health(config)
    if not health.market_app:
        ...

    summary = await get_health_summary(config)
    print(f"{summary.healthy}/{summary.total} services up")
"""

from __future__ import annotations

import asyncio
from typing import Optional

import aiohttp

from partner_app_utils.api_client import check_health
from partner_app_utils.config import get_app_config
from partner_app_utils.logging_config import LogContext, get_logger
from partner_app_utils.models import HealthCheckResult, HealthSummary, MultiAppConfig

logger = get_logger(__name__)

SERVICE_COUNT = 3

__all__ = [
    "SERVICE_COUNT",
    "check_all_apps_health",
    "are_all_apps_healthy",
    "get_health_summary",
]


async def _probe(name: str, base_url: str, session: Optional[aiohttp.ClientSession]) -> bool:
    with LogContext(service=name):
        healthy = await check_health(base_url, session=session)
        logger.debug("Health probe settled", base_url=base_url, healthy=healthy)
        return healthy


async def check_all_apps_health(
    config: Optional[MultiAppConfig] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> HealthCheckResult:
    """Check the health status of all services.

    A service counts as healthy only if its probe completed and returned
    True; exceptions and False both map to unhealthy.
    """
    config = config or get_app_config()
    names = [name for name, _ in config.services()]

    outcomes = await asyncio.gather(
        *(_probe(name, service.base_url, session) for name, service in config.services()),
        return_exceptions=True,
    )

    status: dict[str, bool] = {}
    for name, outcome in zip(names, outcomes):
        if isinstance(outcome, BaseException):
            logger.warning(
                "Health probe failed", service=name, error=f"{type(outcome).__name__}: {outcome}"
            )
        status[name] = outcome is True

    return HealthCheckResult(**status)


async def are_all_apps_healthy(
    config: Optional[MultiAppConfig] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> bool:
    health = await check_all_apps_health(config, session=session)
    return health.all_healthy


async def get_health_summary(
    config: Optional[MultiAppConfig] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
) -> HealthSummary:
    """Get healthy/unhealthy counts alongside the per-service detail."""
    details = await check_all_apps_health(config, session=session)
    healthy = details.healthy_count
    return HealthSummary(
        healthy=healthy,
        unhealthy=SERVICE_COUNT - healthy,
        total=SERVICE_COUNT,
        details=details,
    )
