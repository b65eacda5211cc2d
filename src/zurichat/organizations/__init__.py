"""
Organizations package.

Repository and service for listing, creating, joining and updating Zuri
organizations and their members.
"""

from .repository import OrganizationRepo, build_logo_form
from .schemas import Organization, OrganizationMember, OrganizationMemberList
from .service import OrganizationApiService

__all__ = [
    "Organization",
    "OrganizationApiService",
    "OrganizationMember",
    "OrganizationMemberList",
    "OrganizationRepo",
    "build_logo_form",
]
