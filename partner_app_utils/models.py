"""
Data model for the partner client layer.

Two kinds of types live here:

- Control records (``ServiceConfig``, ``MultiAppConfig``, ``RequestOptions``,
  ``RequestResult``, health results) implemented as dataclasses.
- Transport payloads (``Organization``, ``Vendor``, ...) declared as
  ``TypedDict``s. Decoded JSON from the backends is passed through verbatim,
  so the payload types keep the camelCase keys the services send.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Iterator, Optional, TypedDict

from partner_app_utils.exceptions import RequestFailure
from partner_app_utils.resilience import DEFAULT_MAX_RETRIES, DEFAULT_RETRY_DELAY, RetryPolicy

DEFAULT_REQUEST_TIMEOUT = 5.0  # seconds
HEALTH_CHECK_TIMEOUT = 3.0  # seconds


# =============================================================================
# Configuration
# =============================================================================


@dataclass(frozen=True)
class ServiceConfig:
    """Location of one backend service."""

    base_url: str
    port: int


@dataclass(frozen=True)
class MultiAppConfig:
    """Resolved locations of the admin, market and buyer services."""

    admin_app: ServiceConfig
    market_app: ServiceConfig
    buyer_app: ServiceConfig

    def services(self) -> Iterator[tuple[str, ServiceConfig]]:
        """Yield ``(name, config)`` pairs in admin, market, buyer order."""
        yield "admin_app", self.admin_app
        yield "market_app", self.market_app
        yield "buyer_app", self.buyer_app


@dataclass
class ConfigValidation:
    """Outcome of validating the environment-provided configuration."""

    valid: bool
    errors: list[str] = field(default_factory=list)


# =============================================================================
# Requests
# =============================================================================


@dataclass(frozen=True)
class RequestOptions:
    """Per-call request settings.

    Attributes:
        timeout: Deadline in seconds for a single attempt.
        max_retries: Retries after the initial attempt.
        retry_delay: Fixed pause in seconds between attempts.
        headers: Extra headers merged over ``Content-Type: application/json``.
        method: HTTP method.
        body: JSON-serialisable payload, or None for no body.
    """

    timeout: float = DEFAULT_REQUEST_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    headers: dict[str, str] = field(default_factory=dict)
    method: str = "GET"
    body: Any = None

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")
        if self.retry_delay < 0:
            raise ValueError("retry_delay must be non-negative")

    @property
    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(max_retries=self.max_retries, retry_delay=self.retry_delay)

    def with_overrides(self, **changes: Any) -> RequestOptions:
        """Create a new options object with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class RequestResult:
    """Tagged outcome of a request: either ``data`` or an ``error``."""

    data: Any = None
    error: Optional[RequestFailure] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, data: Any) -> RequestResult:
        return cls(data=data)

    @classmethod
    def failure(cls, error: RequestFailure) -> RequestResult:
        return cls(error=error)


# =============================================================================
# Health
# =============================================================================


@dataclass(frozen=True)
class HealthCheckResult:
    """Point-in-time reachability of the three services."""

    admin_app: bool
    market_app: bool
    buyer_app: bool

    @property
    def healthy_count(self) -> int:
        return sum((self.admin_app, self.market_app, self.buyer_app))

    @property
    def all_healthy(self) -> bool:
        return self.admin_app and self.market_app and self.buyer_app

    def to_dict(self) -> dict[str, bool]:
        return {
            "adminApp": self.admin_app,
            "marketApp": self.market_app,
            "buyerApp": self.buyer_app,
        }


@dataclass(frozen=True)
class HealthSummary:
    """Counts of healthy and unhealthy services plus the detail map."""

    healthy: int
    unhealthy: int
    total: int
    details: HealthCheckResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "healthy": self.healthy,
            "unhealthy": self.unhealthy,
            "total": self.total,
            "details": self.details.to_dict(),
        }


# =============================================================================
# Transport Payloads
# =============================================================================


class Organization(TypedDict):
    id: str
    name: str
    status: str
    vendorCount: int
    productCount: int
    monthlyRevenue: str


class VendorApplication(TypedDict):
    id: str
    vendorName: str
    orgId: str
    appliedDate: str
    status: str
    email: str


class Vendor(TypedDict):
    id: str
    name: str
    email: str
    status: str
    productCount: int
    totalSales: str
    joinDate: str


class Product(TypedDict):
    id: str
    title: str
    vendor: str
    status: str
    price: str
    addedDate: str


class Buyer(TypedDict):
    id: str
    name: str
    email: str
    company: str
    status: str
    totalOrders: int
    totalSpent: str
    lastOrder: str


class Order(TypedDict):
    id: str
    buyerName: str
    company: str
    amount: str
    status: str
    orderDate: str
    items: int


class VendorAnalytics(TypedDict):
    totalSales: str
    totalOrders: int
    averageOrderValue: str
    topProducts: list[Any]


class BuyerAnalytics(TypedDict):
    totalSpent: str
    totalOrders: int
    averageOrderValue: str
    lastOrderDate: Optional[str]


class MutationAck(TypedDict):
    success: bool


class ApiErrorResponse(TypedDict):
    error: str
    message: str


__all__ = [
    "DEFAULT_REQUEST_TIMEOUT",
    "HEALTH_CHECK_TIMEOUT",
    "ServiceConfig",
    "MultiAppConfig",
    "ConfigValidation",
    "RequestOptions",
    "RequestResult",
    "HealthCheckResult",
    "HealthSummary",
    "Organization",
    "VendorApplication",
    "Vendor",
    "Product",
    "Buyer",
    "Order",
    "VendorAnalytics",
    "BuyerAnalytics",
    "MutationAck",
    "ApiErrorResponse",
]
