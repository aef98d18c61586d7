"""
Market service client: vendors, products and vendor analytics.
"""

from __future__ import annotations

from typing import Any, Optional

import aiohttp

from partner_app_utils.api_client import make_app_request, post_app_request
from partner_app_utils.config import get_app_config
from partner_app_utils.logging_config import get_logger
from partner_app_utils.mock_data import (
    EMPTY_VENDOR_ANALYTICS,
    MOCK_PRODUCTS,
    MOCK_VENDORS,
    find_by_id,
    mock_copy,
    mock_list,
)
from partner_app_utils.models import (
    MutationAck,
    Product,
    RequestOptions,
    ServiceConfig,
    Vendor,
    VendorAnalytics,
)

logger = get_logger(__name__)


class MarketAppApi:
    """Client for the market service.

    Reads fall back to mock vendors and products, analytics to a zero-value
    shape, and product moderation to an optimistic acknowledgement.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        options: Optional[RequestOptions] = None,
    ):
        self.config = config or get_app_config().market_app
        self.base_url = self.config.base_url
        self._session = session
        self._options = options or RequestOptions()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def _get(self, path: str) -> Any:
        return await make_app_request(self._url(path), self._options, session=self._session)

    async def _post(self, path: str, body: Any) -> Any:
        return await post_app_request(self._url(path), body, self._options, session=self._session)

    async def get_vendors(self) -> list[Vendor]:
        data = await self._get("/api/vendors")
        if data is None:
            logger.info("Market service unavailable, serving mock data", resource="vendors")
            return mock_list(MOCK_VENDORS)
        return data

    async def get_vendor(self, vendor_id: str) -> Optional[Vendor]:
        data = await self._get(f"/api/vendors/{vendor_id}")
        if data is None:
            return find_by_id(MOCK_VENDORS, vendor_id)
        return data

    async def get_products(self) -> list[Product]:
        data = await self._get("/api/products")
        if data is None:
            logger.info("Market service unavailable, serving mock data", resource="products")
            return mock_list(MOCK_PRODUCTS)
        return data

    async def get_product(self, product_id: str) -> Optional[Product]:
        data = await self._get(f"/api/products/{product_id}")
        if data is None:
            return find_by_id(MOCK_PRODUCTS, product_id)
        return data

    async def approve_product(self, product_id: str) -> MutationAck:
        data = await self._post(f"/api/products/{product_id}/approve", {})
        if data is None:
            logger.warning(
                "Product approval not confirmed, reporting success", product_id=product_id
            )
            return {"success": True}
        return data

    async def reject_product(self, product_id: str, reason: str) -> MutationAck:
        data = await self._post(f"/api/products/{product_id}/reject", {"reason": reason})
        if data is None:
            logger.warning(
                "Product rejection not confirmed, reporting success", product_id=product_id
            )
            return {"success": True}
        return data

    async def get_vendor_analytics(self, vendor_id: str) -> VendorAnalytics:
        """Sales analytics for one vendor; all zeros when unavailable."""
        data = await self._get(f"/api/vendors/{vendor_id}/analytics")
        if data is None:
            return mock_copy(EMPTY_VENDOR_ANALYTICS)
        return data


def create_market_app_api(
    config: Optional[ServiceConfig] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
    options: Optional[RequestOptions] = None,
) -> MarketAppApi:
    """Create a new instance of the market service client."""
    return MarketAppApi(config, session=session, options=options)
