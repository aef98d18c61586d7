"""
Operator commands for the partner services.

Usage:
    python -m partner_app_utils health              # Probe all services
    python -m partner_app_utils health --json
    python -m partner_app_utils validate-config     # Check production env vars
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Optional, Sequence

from partner_app_utils.__version__ import PACKAGE_NAME, __version__
from partner_app_utils.config import get_app_config, get_environment, validate_config
from partner_app_utils.health import get_health_summary
from partner_app_utils.logging_config import configure_logging

SERVICE_LABELS = {
    "admin_app": "Admin App",
    "market_app": "Market App",
    "buyer_app": "Buyer App",
}


def cmd_health(args: argparse.Namespace) -> int:
    """Probe every service; exit 0 only when all are healthy."""
    config = get_app_config()
    summary = asyncio.run(get_health_summary(config))

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        details = summary.details
        for name, service in config.services():
            state = "running" if getattr(details, name) else "offline"
            print(f"{SERVICE_LABELS[name]:<12} {state:<8} {service.base_url or '(unset)'}")
        print(f"\n{summary.healthy}/{summary.total} services healthy")

    return 0 if summary.unhealthy == 0 else 1


def cmd_validate_config(args: argparse.Namespace) -> int:
    """Report missing configuration; exit 1 when invalid."""
    validation = validate_config()

    if args.json:
        print(json.dumps({"valid": validation.valid, "errors": validation.errors}, indent=2))
    elif validation.valid:
        print(f"Configuration OK (environment: {get_environment() or 'production'})")
    else:
        for error in validation.errors:
            print(f"error: {error}", file=sys.stderr)

    return 0 if validation.valid else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="partner_app_utils",
        description="Health and configuration checks for the partner services",
    )
    parser.add_argument("--version", action="version", version=f"{PACKAGE_NAME} {__version__}")
    parser.add_argument("--log-level", default="WARNING", help="Log level (default: WARNING)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    health = subparsers.add_parser("health", help="Probe the admin, market and buyer services")
    health.add_argument("--json", action="store_true", help="Print the summary as JSON")
    health.set_defaults(func=cmd_health)

    validate = subparsers.add_parser("validate-config", help="Check required environment variables")
    validate.add_argument("--json", action="store_true", help="Print the result as JSON")
    validate.set_defaults(func=cmd_validate_config)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, json_output=False)
    return args.func(args)
