"""
Zuri chat organization client.

Data access for Zuri organizations (workspaces) over the core REST API.
"""

from .core.api_client import ApiClient, ApiResponse
from .core.failures import (
    AuthFailure,
    Failure,
    ForbiddenFailure,
    InputFailure,
    NetworkFailure,
    NotFoundFailure,
    RateLimitFailure,
    ServerFailure,
    TimeoutFailure,
    UnknownFailure,
)
from .core.session import InMemorySessionStorage, StorageKeys, StorageUserContext
from .organizations import (
    Organization,
    OrganizationApiService,
    OrganizationMember,
    OrganizationMemberList,
    OrganizationRepo,
)

__all__ = [
    "ApiClient",
    "ApiResponse",
    "AuthFailure",
    "Failure",
    "ForbiddenFailure",
    "InMemorySessionStorage",
    "InputFailure",
    "NetworkFailure",
    "NotFoundFailure",
    "Organization",
    "OrganizationApiService",
    "OrganizationMember",
    "OrganizationMemberList",
    "OrganizationRepo",
    "RateLimitFailure",
    "ServerFailure",
    "StorageKeys",
    "StorageUserContext",
    "TimeoutFailure",
    "UnknownFailure",
]
