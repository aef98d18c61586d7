"""
Service location configuration.

Resolves the base URL and port of the admin, market and buyer services.
In development the services run on fixed localhost ports; anywhere else the
base URLs come from environment variables.

Resolve once at process start and pass the result into the facades instead
of letting every component read the environment:

    from partner_app_utils.config import ensure_valid_config
    from partner_app_utils.admin_api import AdminAppApi

    config = ensure_valid_config()  # raises ConfigurationError when incomplete
    admin = AdminAppApi(config.admin_app)

Environment variables:
    PARTNER_APP_ENV: "development" selects the localhost defaults
        (NODE_ENV is honoured when PARTNER_APP_ENV is unset)
    ADMIN_APP_URL, MARKET_APP_URL, BUYER_APP_URL: production base URLs
"""

from __future__ import annotations

import os
from typing import Mapping, Optional

from partner_app_utils.exceptions import ConfigurationError
from partner_app_utils.models import ConfigValidation, MultiAppConfig, ServiceConfig

DEVELOPMENT = "development"

ADMIN_APP_PORT = 3001
MARKET_APP_PORT = 3002
BUYER_APP_PORT = 3003

# (field name, environment variable, development port), in reporting order
SERVICE_ENV_VARS: tuple[tuple[str, str, int], ...] = (
    ("admin_app", "ADMIN_APP_URL", ADMIN_APP_PORT),
    ("market_app", "MARKET_APP_URL", MARKET_APP_PORT),
    ("buyer_app", "BUYER_APP_URL", BUYER_APP_PORT),
)


def _environ(environ: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def get_environment(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the deployment environment name (empty string when unset)."""
    env = _environ(environ)
    return env.get("PARTNER_APP_ENV") or env.get("NODE_ENV") or ""


def is_development(environ: Optional[Mapping[str, str]] = None) -> bool:
    return get_environment(environ) == DEVELOPMENT


def get_app_config(environ: Optional[Mapping[str, str]] = None) -> MultiAppConfig:
    """Resolve the three service locations.

    Args:
        environ: Mapping to read variables from. Defaults to ``os.environ``.

    Returns:
        MultiAppConfig. Outside development, unset URLs resolve to "".
    """
    env = _environ(environ)
    dev = is_development(env)

    services: dict[str, ServiceConfig] = {}
    for name, var, port in SERVICE_ENV_VARS:
        if dev:
            base_url = f"http://localhost:{port}"
        else:
            base_url = env.get(var, "").rstrip("/")
        services[name] = ServiceConfig(base_url=base_url, port=port)

    return MultiAppConfig(**services)


def validate_config(environ: Optional[Mapping[str, str]] = None) -> ConfigValidation:
    """Check that every production base URL is set.

    Development is always valid. Otherwise one error string is produced per
    missing variable, in admin, market, buyer order.
    """
    env = _environ(environ)
    if is_development(env):
        return ConfigValidation(valid=True, errors=[])

    errors = [f"{var} is required in production" for _, var, _ in SERVICE_ENV_VARS if not env.get(var)]
    return ConfigValidation(valid=not errors, errors=errors)


def ensure_valid_config(environ: Optional[Mapping[str, str]] = None) -> MultiAppConfig:
    """Validate and resolve configuration, for use at process startup.

    Raises:
        ConfigurationError: If any required base URL is missing.
    """
    validation = validate_config(environ)
    if not validation.valid:
        raise ConfigurationError(validation.errors)
    return get_app_config(environ)


__all__ = [
    "DEVELOPMENT",
    "ADMIN_APP_PORT",
    "MARKET_APP_PORT",
    "BUYER_APP_PORT",
    "SERVICE_ENV_VARS",
    "get_environment",
    "is_development",
    "get_app_config",
    "validate_config",
    "ensure_valid_config",
]
