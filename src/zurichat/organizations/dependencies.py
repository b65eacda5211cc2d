"""
Factories wiring the organization service together.

Each factory takes its collaborators as optional arguments so callers and
tests can substitute their own.
"""

from zurichat.config import ZuriSettings, get_zuri_settings
from zurichat.core.api_client import ApiClient
from zurichat.core.session import SessionStorage, StorageUserContext, UserContext
from zurichat.organizations.repository import OrganizationRepo
from zurichat.organizations.service import OrganizationApiService


def get_api_client(settings: ZuriSettings | None = None) -> ApiClient:
    """
    Get an API client scoped to the Zuri core API.

    Args:
        settings: Settings to use; the global settings when omitted

    Returns:
        ApiClient: The configured client
    """
    settings = settings or get_zuri_settings()
    return ApiClient(base_url=settings.core_base_url, timeout=settings.timeout)


def get_organization_repo(
    storage: SessionStorage, api_client: ApiClient | None = None
) -> OrganizationRepo:
    return OrganizationRepo(api_client or get_api_client(), storage)


def get_organization_service(
    storage: SessionStorage,
    api_client: ApiClient | None = None,
    user_context: UserContext | None = None,
) -> OrganizationApiService:
    """
    Get the organization service.

    Args:
        storage: Session storage holding the token and the user's email
        api_client: Client to use; a new one from settings when omitted
        user_context: User context; one backed by ``storage`` when omitted

    Returns:
        OrganizationApiService: The organization service instance
    """
    org_repo = get_organization_repo(storage, api_client)
    return OrganizationApiService(org_repo, user_context or StorageUserContext(storage))
