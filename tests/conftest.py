"""
Shared pytest fixtures for the partner-app-utils test suite.
"""

import pytest

from partner_app_utils.models import MultiAppConfig, RequestOptions, ServiceConfig


@pytest.fixture
def dev_environ():
    """Environment mapping selecting the localhost development defaults."""
    return {"PARTNER_APP_ENV": "development"}


@pytest.fixture
def prod_environ():
    """Production environment mapping with all three URLs set."""
    return {
        "PARTNER_APP_ENV": "production",
        "ADMIN_APP_URL": "https://admin.example.com",
        "MARKET_APP_URL": "https://market.example.com",
        "BUYER_APP_URL": "https://buyer.example.com",
    }


@pytest.fixture
def app_config():
    return MultiAppConfig(
        admin_app=ServiceConfig(base_url="http://admin.test", port=3001),
        market_app=ServiceConfig(base_url="http://market.test", port=3002),
        buyer_app=ServiceConfig(base_url="http://buyer.test", port=3003),
    )


@pytest.fixture
def fast_options():
    """Request options with retries but no meaningful delay."""
    return RequestOptions(timeout=1.0, max_retries=2, retry_delay=0.0)

