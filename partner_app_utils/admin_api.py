"""
Admin service client: organizations and vendor applications.

Reads fall back to the static mock datasets when the service is
unreachable. Approve/reject fall back to an optimistic acknowledgement;
organization creation reports absence instead, since there is no sensible
identity to fabricate for a new organization.
"""

from __future__ import annotations

from typing import Any, Optional

import aiohttp

from partner_app_utils.api_client import make_app_request, post_app_request
from partner_app_utils.config import get_app_config
from partner_app_utils.logging_config import get_logger
from partner_app_utils.mock_data import (
    MOCK_ORGANIZATIONS,
    MOCK_VENDOR_APPLICATIONS,
    find_by_id,
    mock_list,
)
from partner_app_utils.models import (
    MutationAck,
    Organization,
    RequestOptions,
    ServiceConfig,
    VendorApplication,
)

logger = get_logger(__name__)


class AdminAppApi:
    """Client for the admin service.

    Args:
        config: Location of the admin service. Resolved from the environment
            when omitted.
        session: Optional shared aiohttp session.
        options: Default request options for every call.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        options: Optional[RequestOptions] = None,
    ):
        self.config = config or get_app_config().admin_app
        self.base_url = self.config.base_url
        self._session = session
        self._options = options or RequestOptions()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    async def _get(self, path: str) -> Any:
        return await make_app_request(self._url(path), self._options, session=self._session)

    async def _post(self, path: str, body: Any) -> Any:
        return await post_app_request(self._url(path), body, self._options, session=self._session)

    async def get_organizations(self) -> list[Organization]:
        data = await self._get("/api/organizations")
        if data is None:
            logger.info("Admin service unavailable, serving mock data", resource="organizations")
            return mock_list(MOCK_ORGANIZATIONS)
        return data

    async def get_organization(self, org_id: str) -> Optional[Organization]:
        """Get an organization by id, or None when neither source has it."""
        data = await self._get(f"/api/organizations/{org_id}")
        if data is None:
            return find_by_id(MOCK_ORGANIZATIONS, org_id)
        return data

    async def get_vendor_applications(self) -> list[VendorApplication]:
        data = await self._get("/api/vendor-applications")
        if data is None:
            logger.info(
                "Admin service unavailable, serving mock data", resource="vendor_applications"
            )
            return mock_list(MOCK_VENDOR_APPLICATIONS)
        return data

    async def approve_vendor(self, vendor_id: str) -> MutationAck:
        data = await self._post(f"/api/vendors/{vendor_id}/approve", {})
        if data is None:
            logger.warning("Vendor approval not confirmed, reporting success", vendor_id=vendor_id)
            return {"success": True}
        return data

    async def reject_vendor(self, vendor_id: str, reason: str) -> MutationAck:
        data = await self._post(f"/api/vendors/{vendor_id}/reject", {"reason": reason})
        if data is None:
            logger.warning("Vendor rejection not confirmed, reporting success", vendor_id=vendor_id)
            return {"success": True}
        return data

    async def create_organization(self, org_data: dict[str, Any]) -> Optional[Organization]:
        """Create an organization.

        Returns:
            The created organization, or None when the service could not be
            reached. No mock record is fabricated.
        """
        return await self._post("/api/organizations", org_data)


def create_admin_app_api(
    config: Optional[ServiceConfig] = None,
    *,
    session: Optional[aiohttp.ClientSession] = None,
    options: Optional[RequestOptions] = None,
) -> AdminAppApi:
    """Create a new instance of the admin service client."""
    return AdminAppApi(config, session=session, options=options)
