"""
Buyer service client: buyers, orders and buyer analytics.
"""

from __future__ import annotations

from typing import Any, Optional

import aiohttp

from partner_app_utils.api_client import make_app_request, post_app_request
from partner_app_utils.config import get_app_config
from partner_app_utils.logging_config import get_logger
from partner_app_utils.mock_data import (
    EMPTY_BUYER_ANALYTICS,
    MOCK_BUYERS,
    MOCK_ORDERS,
    find_by_id,
    mock_copy,
    mock_list,
)
from partner_app_utils.models import (
    Buyer,
    BuyerAnalytics,
    MutationAck,
    Order,
    RequestOptions,
    ServiceConfig,
)

logger = get_logger(__name__)


class BuyerAppApi:
    """Client for the buyer service."""

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        options: Optional[RequestOptions] = None,
    ):
        self.config = config or get_app_config().buyer_app
        self.base_url = self.config.base_url
        self._session = session
        self._options = options or RequestOptions()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def _get(self, path: str) -> Any:
        return await make_app_request(self._url(path), self._options, session=self._session)

    async def _post(self, path: str, body: Any) -> Any:
        return await post_app_request(self._url(path), body, self._options, session=self._session)

    async def get_buyers(self) -> list[Buyer]:
        data = await self._get("/api/buyers")
        if data is None:
            logger.info("Buyer service unavailable, serving mock data", resource="buyers")
            return mock_list(MOCK_BUYERS)
        return data

    async def get_buyer(self, buyer_id: str) -> Optional[Buyer]:
        data = await self._get(f"/api/buyers/{buyer_id}")
        if data is None:
            return find_by_id(MOCK_BUYERS, buyer_id)
        return data

    async def get_orders(self) -> list[Order]:
        data = await self._get("/api/orders")
        if data is None:
            logger.info("Buyer service unavailable, serving mock data", resource="orders")
            return mock_list(MOCK_ORDERS)
        return data

    async def get_order(self, order_id: str) -> Optional[Order]:
        data = await self._get(f"/api/orders/{order_id}")
        if data is None:
            return find_by_id(MOCK_ORDERS, order_id)
        return data

    async def get_buyer_orders(self, buyer_id: str) -> list[Order]:
        """Orders placed by one buyer.

        The mock orders carry no buyer id, so the fallback matches on the
        mock buyer's name. An unknown buyer yields an empty list.
        """
        data = await self._get(f"/api/buyers/{buyer_id}/orders")
        if data is not None:
            return data

        buyer = find_by_id(MOCK_BUYERS, buyer_id)
        if buyer is None:
            return []
        return mock_list(order for order in MOCK_ORDERS if order["buyerName"] == buyer["name"])

    async def update_order_status(self, order_id: str, status: str) -> MutationAck:
        data = await self._post(f"/api/orders/{order_id}/status", {"status": status})
        if data is None:
            logger.warning(
                "Order status update not confirmed, reporting success",
                order_id=order_id,
                status=status,
            )
            return {"success": True}
        return data

    async def get_buyer_analytics(self, buyer_id: str) -> BuyerAnalytics:
        data = await self._get(f"/api/buyers/{buyer_id}/analytics")
        if data is None:
            return mock_copy(EMPTY_BUYER_ANALYTICS)
        return data


def create_buyer_app_api(
    config: Optional[ServiceConfig] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
    options: Optional[RequestOptions] = None,
) -> BuyerAppApi:
    """Create a new instance of the buyer service client."""
    return BuyerAppApi(config, session=session, options=options)
