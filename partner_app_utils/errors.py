"""
Degraded-service response envelope for route handlers.

Routes that catch an unexpected error while serving dashboard data use
``handle_api_error`` to tell the UI that it is looking at cached data rather
than failing hard.

Usage:
    from partner_app_utils.errors import handle_api_error

    async def organizations(request):
        try:
            ...
        except Exception as e:
            return handle_api_error(e)
"""

from __future__ import annotations


from aiohttp import web

from partner_app_utils.logging_config import get_logger
from partner_app_utils.models import ApiErrorResponse

logger = get_logger(__name__)

SERVICE_UNAVAILABLE_STATUS = 503

SERVICE_UNAVAILABLE_BODY: ApiErrorResponse = {
    "error": "Service temporarily unavailable",
    "message": "Using cached data",
}

__all__ = [
    "SERVICE_UNAVAILABLE_STATUS",
    "SERVICE_UNAVAILABLE_BODY",
    "handle_api_error",
]


def handle_api_error(error: BaseException) -> web.Response:
    """Log ``error`` and build the fixed 503 degraded-service response."""
    logger.error(f"API Error: {type(error).__name__}: {error}")
    return web.json_response(dict(SERVICE_UNAVAILABLE_BODY), status=SERVICE_UNAVAILABLE_STATUS)
