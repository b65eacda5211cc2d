"""
Organization-specific Pydantic schemas.

The API uses Mongo-style ``_id`` keys; models accept either ``_id`` or ``id``.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from zurichat.organizations.constants import OrganizationId


class Organization(BaseModel):
    """Organization (workspace) information."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: OrganizationId = Field(
        ...,
        validation_alias=AliasChoices("_id", "id"),
        description="Unique ID of the organization",
    )
    name: str = Field("", description="Display name of the organization")
    workspace_url: str | None = Field(None, description="URL slug of the workspace")
    logo_url: str | None = Field(None, description="URL of the organization logo")
    creator_email: str | None = Field(None, description="Email of the creator")
    creator_id: str | None = Field(None, description="User ID of the creator")
    members: int | None = Field(None, description="Number of members")
    admins: list[str] = Field(default_factory=list, description="Admin user IDs")

    @field_validator("admins", mode="before")
    @classmethod
    def validate_admins(cls, v: list[str] | None) -> list[str]:
        """Validate admins - null from the API becomes an empty list."""
        return v or []


class OrganizationMember(BaseModel):
    """A user's membership in an organization."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str = Field(
        ...,
        validation_alias=AliasChoices("_id", "id"),
        description="Unique ID of the member",
    )
    email: str = Field(..., description="Email of the member")
    user_name: str | None = Field(None, description="Username of the member")
    first_name: str | None = Field(None, description="First name")
    last_name: str | None = Field(None, description="Last name")
    display_name: str | None = Field(None, description="Name shown in the workspace")
    image_url: str | None = Field(None, description="Profile picture URL")
    role: str | None = Field(None, description="Role within the organization")
    org_id: OrganizationId | None = Field(None, description="Organization ID")


class OrganizationMemberList(BaseModel):
    """Full response envelope of the members endpoint."""

    model_config = ConfigDict(extra="ignore")

    status: int | None = Field(None, description="Status reported by the server")
    message: str | None = Field(None, description="Message reported by the server")
    data: list[OrganizationMember] = Field(
        default_factory=list, description="Members of the organization"
    )

    @field_validator("data", mode="before")
    @classmethod
    def validate_data(cls, v: list | None) -> list:
        return v or []
