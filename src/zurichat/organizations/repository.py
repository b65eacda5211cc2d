"""
Organization repository.

One coroutine per organization endpoint of the Zuri core API. Payloads are
returned raw, as unwrapped from the ``{"data": ...}`` envelope.
"""

import asyncio
from os import PathLike
from pathlib import Path
from typing import Any
from urllib.parse import quote

from zurichat.core.api_client import ApiResponse
from zurichat.core.failures import translate_failures
from zurichat.core.repository import BaseRepository
from zurichat.organizations.constants import (
    LOGO_CONTENT_TYPE,
    LOGO_DIMENSION,
    LOGO_FIELD_NAME,
    OrganizationEndpoint,
)
from zurichat.utils.logger import logger


async def build_logo_form(
    image_path: str | PathLike[str],
) -> tuple[dict[str, int], dict[str, tuple[str, bytes, str]]]:
    """
    Build the multipart form for a logo upload.

    The file is read in a worker thread.

    Args:
        image_path: Path of the image file to upload

    Returns:
        Tuple of (form fields, files) as accepted by httpx
    """
    path = Path(image_path)
    fields = {"height": LOGO_DIMENSION, "width": LOGO_DIMENSION}
    content = await asyncio.to_thread(path.read_bytes)
    files = {LOGO_FIELD_NAME: (path.name, content, LOGO_CONTENT_TYPE)}
    return fields, files


def _segment(value: str) -> str:
    return quote(value, safe="@.")


def _unwrap(response: ApiResponse) -> Any:
    if isinstance(response.data, dict):
        return response.data.get("data")
    return None


def _is_ok(response: ApiResponse) -> bool:
    return response.status_code == 200


class OrganizationRepo(BaseRepository):
    """Data access for organizations and their members."""

    @translate_failures("fetch_list_of_organizations")
    async def fetch_list_of_organizations(self) -> list[dict[str, Any]]:
        """
        Fetch every organization in the Zuri database.

        This does not filter by membership; use get_joined_organizations
        for the organizations a user belongs to.
        """
        res = await self.api_client.get(
            OrganizationEndpoint.ORGANIZATIONS.value, headers=self.headers
        )
        logger.info("Fetched organizations", response=res.data)
        return _unwrap(res)

    @translate_failures("get_joined_organizations")
    async def get_joined_organizations(self, email: str) -> list[dict[str, Any]]:
        """Fetch the organizations the user with ``email`` has joined."""
        res = await self.api_client.get(
            OrganizationEndpoint.USER_ORGANIZATIONS.value.format(
                email=_segment(email)
            ),
            headers=self.headers,
        )
        logger.info("Fetched joined organizations", email=email, response=res.data)
        return _unwrap(res)

    @translate_failures("fetch_organization_info")
    async def fetch_organization_info(self, org_id: str) -> dict[str, Any]:
        res = await self.api_client.get(
            OrganizationEndpoint.ORGANIZATION.value.format(org_id=org_id),
            headers=self.headers,
        )
        logger.info("Fetched organization", org_id=org_id, response=res.data)
        return _unwrap(res)

    @translate_failures("fetch_organization_by_url")
    async def fetch_organization_by_url(self, url: str) -> dict[str, Any]:
        """
        Fetch the organization whose workspace URL is ``url``.

        The returned map carries ``id`` copied from ``_id``.

        Args:
            url: Workspace URL, e.g. ``zurichat-fsp1856.zurichat.com``
        """
        res = await self.api_client.get(
            OrganizationEndpoint.ORGANIZATION_BY_URL.value.format(url=_segment(url)),
            headers=self.headers,
        )
        logger.info("Fetched organization by url", url=url, response=res.data)

        organization = _unwrap(res)
        organization["id"] = organization["_id"]
        return organization

    @translate_failures("join_organization")
    async def join_organization(self, org_id: str, email: str) -> bool:
        """Add the user with ``email`` to the organization."""
        res = await self.api_client.post(
            OrganizationEndpoint.MEMBERS.value.format(org_id=org_id),
            body={"user_email": email},
            headers=self.headers,
        )
        logger.info("Join organization", org_id=org_id, status_code=res.status_code)
        return _is_ok(res)

    @translate_failures("create_organization")
    async def create_organization(self, email: str) -> str:
        """
        Create an organization owned by ``email``.

        Returns:
            str: ID of the new organization
        """
        res = await self.api_client.post(
            OrganizationEndpoint.ORGANIZATIONS.value,
            body={"creator_email": email},
            headers=self.headers,
        )
        logger.info("Created organization", response=res.data)
        return _unwrap(res)["organization_id"]

    @translate_failures("update_org_url")
    async def update_org_url(self, org_id: str, url: str) -> bool:
        """Update the workspace URL. ``url`` must not start with a scheme."""
        res = await self.api_client.patch(
            OrganizationEndpoint.URL.value.format(org_id=org_id),
            body={"url": url},
            headers=self.headers,
        )
        logger.info("Update organization url", org_id=org_id, status_code=res.status_code)
        return _is_ok(res)

    @translate_failures("update_org_name")
    async def update_org_name(self, org_id: str, name: str) -> bool:
        res = await self.api_client.patch(
            OrganizationEndpoint.NAME.value.format(org_id=org_id),
            body={"organization_name": name},
            headers=self.headers,
        )
        logger.info("Update organization name", org_id=org_id, status_code=res.status_code)
        return _is_ok(res)

    @translate_failures("update_org_logo")
    async def update_org_logo(
        self, org_id: str, image_path: str | PathLike[str]
    ) -> bool:
        """Upload a new logo; the server resizes it to 300x300."""
        fields, files = await build_logo_form(image_path)
        # multipart requests set their own content type
        res = await self.api_client.patch(
            OrganizationEndpoint.LOGO.value.format(org_id=org_id),
            body=fields,
            headers=self.auth_headers,
            files=files,
        )
        logger.info("Update organization logo", org_id=org_id, status_code=res.status_code)
        return _is_ok(res)

    @translate_failures("add_member_to_organization")
    async def add_member_to_organization(self, org_id: str, email: str) -> bool:
        """Add a member, either on invitation or directly by an admin."""
        res = await self.api_client.post(
            OrganizationEndpoint.MEMBERS.value.format(org_id=org_id),
            body={"user_email": email},
            headers=self.headers,
        )
        logger.info("Add organization member", org_id=org_id, status_code=res.status_code)
        return _is_ok(res)

    @translate_failures("fetch_members_in_organization")
    async def fetch_members_in_organization(self, org_id: str) -> list[dict[str, Any]]:
        res = await self._get_members(org_id)
        return _unwrap(res)

    @translate_failures("fetch_members_response")
    async def fetch_members_response(self, org_id: str) -> ApiResponse:
        """Fetch the members endpoint, keeping the full response envelope."""
        return await self._get_members(org_id)

    async def _get_members(self, org_id: str) -> ApiResponse:
        res = await self.api_client.get(
            OrganizationEndpoint.MEMBERS.value.format(org_id=org_id),
            headers=self.headers,
        )
        logger.info("Fetched organization members", org_id=org_id, response=res.data)
        return res

    @translate_failures("invite_to_organization_with_normal_mail")
    async def invite_to_organization_with_normal_mail(
        self, org_id: str, emails: list[str]
    ) -> None:
        """Email an invitation to each address in ``emails``."""
        res = await self.api_client.post(
            OrganizationEndpoint.SEND_INVITE.value.format(org_id=org_id),
            body={"emails": emails},
            headers=self.headers,
        )
        logger.info("Sent organization invites", org_id=org_id, response=res.data)
