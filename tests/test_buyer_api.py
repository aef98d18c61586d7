"""Tests for the buyer service facade."""

import json

import aiohttp
import pytest

from partner_app_utils.buyer_api import BuyerAppApi, create_buyer_app_api
from partner_app_utils.mock_data import MOCK_BUYERS, MOCK_ORDERS
from partner_app_utils.models import RequestOptions, ServiceConfig
from tests.utils import make_response, make_session, requested_urls

BASE = "http://buyer.test"


@pytest.fixture
def offline_api():
    """Buyer facade whose service always refuses connections."""
    session = make_session(aiohttp.ClientConnectionError("Connection refused"))
    return BuyerAppApi(
        ServiceConfig(base_url=BASE, port=3003),
        session=session,
        options=RequestOptions(max_retries=0),
    )


def _online(payload, status=200):
    session = make_session(make_response(status, payload))
    api = BuyerAppApi(
        ServiceConfig(base_url=BASE, port=3003),
        session=session,
        options=RequestOptions(max_retries=0),
    )
    return api, session


class TestBuyers:
    """Tests for buyer reads."""

    def test_factory_uses_development_port(self, monkeypatch):
        monkeypatch.setenv("PARTNER_APP_ENV", "development")
        api = create_buyer_app_api()
        assert api.base_url == "http://localhost:3003"
        assert api.config.port == 3003

    @pytest.mark.asyncio
    async def test_buyers_remote(self):
        api, session = _online([{"id": "b1"}])

        assert await api.get_buyers() == [{"id": "b1"}]
        assert requested_urls(session) == [f"{BASE}/api/buyers"]

    @pytest.mark.asyncio
    async def test_buyers_fallback(self, offline_api):
        assert await offline_api.get_buyers() == list(MOCK_BUYERS)

    @pytest.mark.asyncio
    async def test_buyer_lookup(self, offline_api):
        buyer = await offline_api.get_buyer("2")
        assert buyer["name"] == "Sarah Johnson"

    @pytest.mark.asyncio
    async def test_buyer_lookup_miss(self, offline_api):
        assert await offline_api.get_buyer("3") is None


class TestOrders:
    """Tests for order reads."""

    @pytest.mark.asyncio
    async def test_orders_fallback(self, offline_api):
        orders = await offline_api.get_orders()
        assert [o["id"] for o in orders] == ["ORD-001", "ORD-002", "ORD-003"]

    @pytest.mark.asyncio
    async def test_order_remote(self):
        api, session = _online({"id": "ORD-100"})

        assert await api.get_order("ORD-100") == {"id": "ORD-100"}
        assert requested_urls(session) == [f"{BASE}/api/orders/ORD-100"]

    @pytest.mark.asyncio
    async def test_order_lookup(self, offline_api):
        assert await offline_api.get_order("ORD-002") == MOCK_ORDERS[1]

    @pytest.mark.asyncio
    async def test_order_lookup_miss(self, offline_api):
        assert await offline_api.get_order("ORD-999") is None

    @pytest.mark.asyncio
    async def test_buyer_orders_remote(self):
        api, session = _online([])

        assert await api.get_buyer_orders("1") == []
        assert requested_urls(session) == [f"{BASE}/api/buyers/1/orders"]

    @pytest.mark.asyncio
    async def test_buyer_orders_fallback_matches_by_name(self, offline_api):
        orders = await offline_api.get_buyer_orders("1")

        assert [o["id"] for o in orders] == ["ORD-001", "ORD-003"]
        assert all(o["buyerName"] == "John Smith" for o in orders)

    @pytest.mark.asyncio
    async def test_buyer_orders_fallback_unknown_buyer(self, offline_api):
        assert await offline_api.get_buyer_orders("404") == []


class TestOrderStatus:
    """Tests for order status updates."""

    @pytest.mark.asyncio
    async def test_update_remote(self):
        api, session = _online({"success": True, "status": "shipped"})

        result = await api.update_order_status("ORD-002", "shipped")

        assert result == {"success": True, "status": "shipped"}
        assert session.request.call_args.args == ("POST", f"{BASE}/api/orders/ORD-002/status")
        assert json.loads(session.request.call_args.kwargs["data"]) == {"status": "shipped"}

    @pytest.mark.asyncio
    async def test_update_optimistic(self, offline_api):
        assert await offline_api.update_order_status("ORD-002", "shipped") == {"success": True}


class TestBuyerAnalytics:
    """Tests for buyer analytics."""

    @pytest.mark.asyncio
    async def test_remote(self):
        api, session = _online({"totalSpent": "$5"})

        assert await api.get_buyer_analytics("2") == {"totalSpent": "$5"}
        assert requested_urls(session) == [f"{BASE}/api/buyers/2/analytics"]

    @pytest.mark.asyncio
    async def test_zero_value_shape(self, offline_api):
        assert await offline_api.get_buyer_analytics("2") == {
            "totalSpent": "$0",
            "totalOrders": 0,
            "averageOrderValue": "$0",
            "lastOrderDate": None,
        }
