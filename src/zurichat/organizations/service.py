"""
Organization service layer.

Sits between the UI and OrganizationRepo: resolves the signed-in user's email
and maps raw API payloads to typed models.
"""

import warnings
from os import PathLike
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from zurichat.core.failures import UnknownFailure
from zurichat.core.session import UserContext
from zurichat.organizations.repository import OrganizationRepo
from zurichat.organizations.schemas import (
    Organization,
    OrganizationMember,
    OrganizationMemberList,
)
from zurichat.utils.logger import logger

ModelT = TypeVar("ModelT", bound=BaseModel)


def _parse(model: type[ModelT], payload: Any) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Failed to parse {model.__name__} response", error=str(e))
        raise UnknownFailure(error_message=str(e)) from e


def _parse_list(model: type[ModelT], payload: Any) -> list[ModelT]:
    """Parse a list payload; a missing list is treated as empty."""
    try:
        return TypeAdapter(list[model]).validate_python(payload or [])
    except ValidationError as e:
        logger.error(f"Failed to parse {model.__name__} list response", error=str(e))
        raise UnknownFailure(error_message=str(e)) from e


class OrganizationApiService:
    """Service class for organization operations."""

    def __init__(self, org_repo: OrganizationRepo, user_context: UserContext):
        """
        Initialize the organization service.

        Args:
            org_repo: The organization repository to delegate to
            user_context: Provider of the signed-in user's email
        """
        self.org_repo = org_repo
        self.user_context = user_context

    async def __aenter__(self) -> "OrganizationApiService":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the repository's HTTP client."""
        await self.org_repo.close()

    async def fetch_list_of_organizations(self) -> list[Organization]:
        """Fetch every organization, joined or not."""
        raw = await self.org_repo.fetch_list_of_organizations()
        return _parse_list(Organization, raw)

    async def get_joined_organizations(self) -> list[Organization]:
        """Fetch the organizations the signed-in user has joined."""
        email = self.user_context.user_email
        raw = await self.org_repo.get_joined_organizations(email)
        return _parse_list(Organization, raw)

    async def fetch_organization_info(self, org_id: str) -> Organization:
        raw = await self.org_repo.fetch_organization_info(org_id)
        return _parse(Organization, raw)

    async def fetch_organization_by_url(self, url: str) -> Organization:
        raw = await self.org_repo.fetch_organization_by_url(url)
        return _parse(Organization, raw)

    async def join_organization(self, org_id: str) -> bool:
        """Join ``org_id`` as the signed-in user."""
        email = self.user_context.user_email
        return await self.org_repo.join_organization(org_id, email)

    async def create_organization(self, email: str) -> str:
        org_id = await self.org_repo.create_organization(email)
        logger.info("Organization created", org_id=org_id)
        return org_id

    async def update_org_url(self, org_id: str, url: str) -> bool:
        return await self.org_repo.update_org_url(org_id, url)

    async def update_org_name(self, org_id: str, name: str) -> bool:
        return await self.org_repo.update_org_name(org_id, name)

    async def update_org_logo(
        self, org_id: str, image_path: str | PathLike[str]
    ) -> bool:
        return await self.org_repo.update_org_logo(org_id, image_path)

    async def add_member_to_organization(self, org_id: str, email: str) -> bool:
        return await self.org_repo.add_member_to_organization(org_id, email)

    async def fetch_members_in_organization(
        self, org_id: str
    ) -> list[OrganizationMember]:
        raw = await self.org_repo.fetch_members_in_organization(org_id)
        return _parse_list(OrganizationMember, raw)

    async def invite_to_organization_with_normal_mail(
        self, org_id: str, emails: list[str]
    ) -> None:
        await self.org_repo.invite_to_organization_with_normal_mail(org_id, emails)

    async def get_organization_member_list(
        self, org_id: str
    ) -> OrganizationMemberList:
        """
        Fetch the members of ``org_id`` with the full response envelope.

        Deprecated: use fetch_members_in_organization instead.
        """
        warnings.warn(
            "get_organization_member_list is deprecated, "
            "use fetch_members_in_organization instead",
            DeprecationWarning,
            stacklevel=2,
        )
        res = await self.org_repo.fetch_members_response(org_id)
        return _parse(OrganizationMemberList, res.data or {})
