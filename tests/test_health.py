"""
Tests for health aggregation.

Tests cover:
- Per-service isolation of failures
- Independence from settle order
- Summary counts and the all-healthy helper
"""

import asyncio
from unittest.mock import patch

import pytest

from partner_app_utils.health import (
    are_all_apps_healthy,
    check_all_apps_health,
    get_health_summary,
)
from partner_app_utils.logging_config import get_context
from partner_app_utils.models import HealthCheckResult


def _fake_probe(outcomes: dict, delays: dict | None = None):
    """check_health replacement keyed by base URL.

    An outcome may be a bool or an exception to raise.
    """
    delays = delays or {}

    async def probe(base_url, *, session=None):
        await asyncio.sleep(delays.get(base_url, 0))
        outcome = outcomes[base_url]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    return probe


class TestCheckAllAppsHealth:
    """Tests for check_all_apps_health."""

    @pytest.mark.asyncio
    async def test_all_healthy(self, app_config):
        probe = _fake_probe(
            {"http://admin.test": True, "http://market.test": True, "http://buyer.test": True}
        )
        with patch("partner_app_utils.health.check_health", side_effect=probe):
            result = await check_all_apps_health(app_config)

        assert result == HealthCheckResult(admin_app=True, market_app=True, buyer_app=True)

    @pytest.mark.asyncio
    async def test_only_market_healthy(self, app_config):
        probe = _fake_probe(
            {"http://admin.test": False, "http://market.test": True, "http://buyer.test": False}
        )
        with patch("partner_app_utils.health.check_health", side_effect=probe):
            result = await check_all_apps_health(app_config)

        assert result.to_dict() == {"adminApp": False, "marketApp": True, "buyerApp": False}

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "delays",
        [
            {"http://admin.test": 0.03, "http://market.test": 0.0, "http://buyer.test": 0.01},
            {"http://admin.test": 0.0, "http://market.test": 0.03, "http://buyer.test": 0.01},
            {"http://admin.test": 0.01, "http://market.test": 0.02, "http://buyer.test": 0.0},
        ],
    )
    async def test_result_independent_of_settle_order(self, app_config, delays):
        probe = _fake_probe(
            {
                "http://admin.test": ConnectionError("down"),
                "http://market.test": True,
                "http://buyer.test": False,
            },
            delays,
        )
        with patch("partner_app_utils.health.check_health", side_effect=probe):
            result = await check_all_apps_health(app_config)

        assert result.to_dict() == {"adminApp": False, "marketApp": True, "buyerApp": False}

    @pytest.mark.asyncio
    async def test_raising_probe_isolated(self, app_config):
        """One probe raising does not affect the others."""
        probe = _fake_probe(
            {
                "http://admin.test": True,
                "http://market.test": RuntimeError("boom"),
                "http://buyer.test": True,
            }
        )
        with patch("partner_app_utils.health.check_health", side_effect=probe):
            result = await check_all_apps_health(app_config)

        assert result == HealthCheckResult(admin_app=True, market_app=False, buyer_app=True)

    @pytest.mark.asyncio
    async def test_truthy_non_bool_is_unhealthy(self, app_config):
        """Only an exact True counts as healthy."""
        probe = _fake_probe(
            {"http://admin.test": 1, "http://market.test": "yes", "http://buyer.test": True}
        )
        with patch("partner_app_utils.health.check_health", side_effect=probe):
            result = await check_all_apps_health(app_config)

        assert result == HealthCheckResult(admin_app=False, market_app=False, buyer_app=True)

    @pytest.mark.asyncio
    async def test_probes_run_concurrently(self, app_config):
        """Three 0.1s probes settle in well under 0.3s."""
        probe = _fake_probe(
            {"http://admin.test": True, "http://market.test": True, "http://buyer.test": True},
            {"http://admin.test": 0.1, "http://market.test": 0.1, "http://buyer.test": 0.1},
        )
        loop = asyncio.get_running_loop()
        with patch("partner_app_utils.health.check_health", side_effect=probe):
            start = loop.time()
            await check_all_apps_health(app_config)
            elapsed = loop.time() - start

        assert elapsed < 0.25

    @pytest.mark.asyncio
    async def test_probe_runs_with_service_log_context(self, app_config):
        seen = {}

        async def probe(base_url, *, session=None):
            seen[base_url] = get_context().get("service")
            return True

        with patch("partner_app_utils.health.check_health", side_effect=probe):
            await check_all_apps_health(app_config)

        assert seen == {
            "http://admin.test": "admin_app",
            "http://market.test": "market_app",
            "http://buyer.test": "buyer_app",
        }

    @pytest.mark.asyncio
    async def test_uses_environment_config_by_default(self, monkeypatch):
        monkeypatch.setenv("PARTNER_APP_ENV", "development")
        probed = []

        async def probe(base_url, *, session=None):
            probed.append(base_url)
            return False

        with patch("partner_app_utils.health.check_health", side_effect=probe):
            await check_all_apps_health()

        assert sorted(probed) == [
            "http://localhost:3001",
            "http://localhost:3002",
            "http://localhost:3003",
        ]


class TestHealthHelpers:
    """Tests for are_all_apps_healthy and get_health_summary."""

    @pytest.mark.asyncio
    async def test_all_healthy_true(self, app_config):
        probe = _fake_probe(
            {"http://admin.test": True, "http://market.test": True, "http://buyer.test": True}
        )
        with patch("partner_app_utils.health.check_health", side_effect=probe):
            assert await are_all_apps_healthy(app_config) is True

    @pytest.mark.asyncio
    async def test_all_healthy_false(self, app_config):
        probe = _fake_probe(
            {"http://admin.test": True, "http://market.test": True, "http://buyer.test": False}
        )
        with patch("partner_app_utils.health.check_health", side_effect=probe):
            assert await are_all_apps_healthy(app_config) is False

    @pytest.mark.asyncio
    async def test_summary_counts(self, app_config):
        probe = _fake_probe(
            {"http://admin.test": True, "http://market.test": False, "http://buyer.test": True}
        )
        with patch("partner_app_utils.health.check_health", side_effect=probe):
            summary = await get_health_summary(app_config)

        assert summary.healthy == 2
        assert summary.unhealthy == 1
        assert summary.total == 3
        assert summary.to_dict() == {
            "healthy": 2,
            "unhealthy": 1,
            "total": 3,
            "details": {"adminApp": True, "marketApp": False, "buyerApp": True},
        }

    @pytest.mark.asyncio
    async def test_summary_all_down(self, app_config):
        probe = _fake_probe(
            {
                "http://admin.test": False,
                "http://market.test": False,
                "http://buyer.test": TimeoutError(),
            }
        )
        with patch("partner_app_utils.health.check_health", side_effect=probe):
            summary = await get_health_summary(app_config)

        assert (summary.healthy, summary.unhealthy, summary.total) == (0, 3, 3)
