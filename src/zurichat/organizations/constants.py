"""
Organization API constants and enums.

Endpoint values are path templates filled with ``str.format``.
"""

from enum import Enum


class OrganizationEndpoint(str, Enum):
    """Zuri core API organization endpoints."""

    ORGANIZATIONS = "/organizations"
    USER_ORGANIZATIONS = "/users/{email}/organizations"
    ORGANIZATION = "/organizations/{org_id}"
    ORGANIZATION_BY_URL = "/organizations/url/{url}"
    MEMBERS = "/organizations/{org_id}/members"
    URL = "/organizations/{org_id}/url"
    NAME = "/organizations/{org_id}/name"
    LOGO = "/organizations/{org_id}/logo"
    SEND_INVITE = "/organizations/{org_id}/send-invite"


# Logo uploads are resized server-side to this square size
LOGO_DIMENSION = 300
LOGO_FIELD_NAME = "image"
LOGO_CONTENT_TYPE = "image/jpeg"

# Type aliases for better readability
OrganizationId = str
