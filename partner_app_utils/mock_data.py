"""
Static fallback datasets served when a backend service is unreachable.

The records are module-level constants and must never be mutated. Use
``mock_copy`` to hand a caller something it can own.
"""

from __future__ import annotations

import copy
from typing import Iterable, Optional, TypeVar

from partner_app_utils.models import (
    Buyer,
    BuyerAnalytics,
    Order,
    Organization,
    Product,
    Vendor,
    VendorAnalytics,
    VendorApplication,
)

T = TypeVar("T")

# =============================================================================
# Admin service
# =============================================================================

MOCK_ORGANIZATIONS: tuple[Organization, ...] = (
    {
        "id": "1",
        "name": "Acme Vendors Inc",
        "status": "active",
        "vendorCount": 12,
        "productCount": 145,
        "monthlyRevenue": "$12,450",
    },
    {
        "id": "2",
        "name": "Global Marketplace Co",
        "status": "pending",
        "vendorCount": 8,
        "productCount": 89,
        "monthlyRevenue": "$8,720",
    },
    {
        "id": "3",
        "name": "Tech Partners Ltd",
        "status": "active",
        "vendorCount": 15,
        "productCount": 203,
        "monthlyRevenue": "$18,900",
    },
)

MOCK_VENDOR_APPLICATIONS: tuple[VendorApplication, ...] = (
    {
        "id": "1",
        "vendorName": "Tech Gadgets Pro",
        "orgId": "1",
        "appliedDate": "2024-09-01",
        "status": "pending",
        "email": "contact@techgadgets.com",
    },
    {
        "id": "2",
        "vendorName": "Home Decor Plus",
        "orgId": "2",
        "appliedDate": "2024-09-05",
        "status": "pending",
        "email": "info@homedecor.com",
    },
)

# =============================================================================
# Market service
# =============================================================================

MOCK_VENDORS: tuple[Vendor, ...] = (
    {
        "id": "1",
        "name": "Tech Solutions Pro",
        "email": "contact@techsolutions.com",
        "status": "active",
        "productCount": 24,
        "totalSales": "$5,240",
        "joinDate": "2024-08-15",
    },
    {
        "id": "2",
        "name": "Fashion Hub",
        "email": "info@fashionhub.com",
        "status": "active",
        "productCount": 18,
        "totalSales": "$3,890",
        "joinDate": "2024-08-20",
    },
)

MOCK_PRODUCTS: tuple[Product, ...] = (
    {
        "id": "1",
        "title": "Wireless Bluetooth Headphones",
        "vendor": "Tech Solutions Pro",
        "status": "published",
        "price": "$89.99",
        "addedDate": "2024-09-08",
    },
    {
        "id": "2",
        "title": "Smart Watch Series 5",
        "vendor": "Tech Solutions Pro",
        "status": "published",
        "price": "$199.99",
        "addedDate": "2024-09-10",
    },
    {
        "id": "3",
        "title": "Designer Leather Handbag",
        "vendor": "Fashion Hub",
        "status": "pending",
        "price": "$149.99",
        "addedDate": "2024-09-12",
    },
)

EMPTY_VENDOR_ANALYTICS: VendorAnalytics = {
    "totalSales": "$0",
    "totalOrders": 0,
    "averageOrderValue": "$0",
    "topProducts": [],
}

# =============================================================================
# Buyer service
# =============================================================================

MOCK_BUYERS: tuple[Buyer, ...] = (
    {
        "id": "1",
        "name": "John Smith",
        "email": "john.smith@example.com",
        "company": "ABC Corp",
        "status": "active",
        "totalOrders": 12,
        "totalSpent": "$2,450",
        "lastOrder": "2024-09-05",
    },
    {
        "id": "2",
        "name": "Sarah Johnson",
        "email": "sarah.j@techcorp.com",
        "company": "Tech Corp",
        "status": "active",
        "totalOrders": 8,
        "totalSpent": "$1,890",
        "lastOrder": "2024-09-10",
    },
)

MOCK_ORDERS: tuple[Order, ...] = (
    {
        "id": "ORD-001",
        "buyerName": "John Smith",
        "company": "ABC Corp",
        "amount": "$145.50",
        "status": "delivered",
        "orderDate": "2024-09-05",
        "items": 3,
    },
    {
        "id": "ORD-002",
        "buyerName": "Sarah Johnson",
        "company": "Tech Corp",
        "amount": "$299.99",
        "status": "processing",
        "orderDate": "2024-09-10",
        "items": 2,
    },
    {
        "id": "ORD-003",
        "buyerName": "John Smith",
        "company": "ABC Corp",
        "amount": "$89.99",
        "status": "shipped",
        "orderDate": "2024-09-12",
        "items": 1,
    },
)

EMPTY_BUYER_ANALYTICS: BuyerAnalytics = {
    "totalSpent": "$0",
    "totalOrders": 0,
    "averageOrderValue": "$0",
    "lastOrderDate": None,
}


# =============================================================================
# Helpers
# =============================================================================


def mock_copy(value: T) -> T:
    """Deep copy of a mock constant, safe to hand to callers."""
    return copy.deepcopy(value)


def mock_list(records: Iterable[T]) -> list[T]:
    return [copy.deepcopy(record) for record in records]


def find_by_id(records: Iterable[T], record_id: str) -> Optional[T]:
    """Linear id lookup returning a copy, or None when absent."""
    for record in records:
        if record["id"] == record_id:  # type: ignore[index]
            return copy.deepcopy(record)
    return None
