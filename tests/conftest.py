"""Shared fixtures for the organization client tests."""

from unittest.mock import AsyncMock

import pytest

from zurichat.core.api_client import ApiClient, ApiResponse
from zurichat.core.session import InMemorySessionStorage, StorageKeys
from zurichat.organizations.repository import OrganizationRepo

TEST_TOKEN = "test-session-token"
TEST_EMAIL = "ada@zuri.chat"


@pytest.fixture
def storage():
    """Session storage with a signed-in user."""
    return InMemorySessionStorage(
        {
            StorageKeys.CURRENT_SESSION_TOKEN: TEST_TOKEN,
            StorageKeys.CURRENT_USER_EMAIL: TEST_EMAIL,
        }
    )


@pytest.fixture
def api_client():
    """ApiClient double; get/post/patch are AsyncMocks."""
    return AsyncMock(spec=ApiClient)


@pytest.fixture
def org_repo(api_client, storage):
    return OrganizationRepo(api_client, storage)


def envelope(data, status_code: int = 200) -> ApiResponse:
    """Build a response carrying ``data`` in the API envelope."""
    return ApiResponse(status_code=status_code, data={"status": status_code, "data": data})
