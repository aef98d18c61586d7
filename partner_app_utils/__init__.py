"""
partner-app-utils: resilient clients for the partner marketplace services.

The partner dashboard aggregates data from three backend services (admin,
market, buyer). This package is the client layer those dashboards use:

- Request execution with a per-attempt deadline, fixed-delay retries and a
  single absence signal (``None``) for every kind of failure
- Service facades that substitute static mock data when a service is down
- Concurrent health probes with an all-settled join
- Environment-driven service configuration with startup validation

Usage:
    from partner_app_utils import create_admin_app_api, check_all_apps_health

    admin = create_admin_app_api()
    organizations = await admin.get_organizations()  # remote or mock data

    health = await check_all_apps_health()
    health.to_dict()  # {"adminApp": True, "marketApp": False, "buyerApp": True}
"""

from partner_app_utils.__version__ import __version__
from partner_app_utils.admin_api import AdminAppApi, create_admin_app_api
from partner_app_utils.api_client import (
    check_health,
    delete_app_request,
    execute_request,
    fetch_result,
    make_app_request,
    post_app_request,
    put_app_request,
)
from partner_app_utils.buyer_api import BuyerAppApi, create_buyer_app_api
from partner_app_utils.config import (
    ensure_valid_config,
    get_app_config,
    is_development,
    validate_config,
)
from partner_app_utils.errors import handle_api_error
from partner_app_utils.exceptions import (
    ConfigurationError,
    DecodeError,
    PartnerAppError,
    ProtocolError,
    RequestFailure,
    RequestTimeoutError,
    TransportError,
)
from partner_app_utils.health import (
    are_all_apps_healthy,
    check_all_apps_health,
    get_health_summary,
)
from partner_app_utils.market_api import MarketAppApi, create_market_app_api
from partner_app_utils.models import (
    ApiErrorResponse,
    Buyer,
    BuyerAnalytics,
    ConfigValidation,
    HealthCheckResult,
    HealthSummary,
    MultiAppConfig,
    MutationAck,
    Order,
    Organization,
    Product,
    RequestOptions,
    RequestResult,
    ServiceConfig,
    Vendor,
    VendorAnalytics,
    VendorApplication,
)
from partner_app_utils.resilience import RetryPolicy, with_retry

__all__ = [
    "__version__",
    # Configuration
    "get_app_config",
    "validate_config",
    "ensure_valid_config",
    "is_development",
    # Requests
    "execute_request",
    "fetch_result",
    "make_app_request",
    "post_app_request",
    "put_app_request",
    "delete_app_request",
    "check_health",
    "RetryPolicy",
    "with_retry",
    # Service facades
    "AdminAppApi",
    "create_admin_app_api",
    "MarketAppApi",
    "create_market_app_api",
    "BuyerAppApi",
    "create_buyer_app_api",
    # Health
    "check_all_apps_health",
    "are_all_apps_healthy",
    "get_health_summary",
    # Errors
    "handle_api_error",
    "PartnerAppError",
    "ConfigurationError",
    "RequestFailure",
    "TransportError",
    "RequestTimeoutError",
    "ProtocolError",
    "DecodeError",
    # Types
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
