"""Tests for session storage, user context and repository headers."""

from enum import Enum
from unittest.mock import AsyncMock

import pytest

from zurichat.core.api_client import ApiClient
from zurichat.core.failures import AuthFailure
from zurichat.core.repository import BaseRepository
from zurichat.core.session import (
    InMemorySessionStorage,
    StorageKeys,
    StorageUserContext,
)


class TestInMemorySessionStorage:
    def test_set_get_remove(self):
        storage = InMemorySessionStorage()

        assert storage.get_string(StorageKeys.CURRENT_SESSION_TOKEN) is None

        storage.set_string(StorageKeys.CURRENT_SESSION_TOKEN, "t0k3n")
        assert storage.get_string(StorageKeys.CURRENT_SESSION_TOKEN) == "t0k3n"

        storage.remove(StorageKeys.CURRENT_SESSION_TOKEN)
        storage.remove(StorageKeys.CURRENT_SESSION_TOKEN)
        assert storage.get_string(StorageKeys.CURRENT_SESSION_TOKEN) is None

    def test_initial_values_are_copied(self):
        initial = {StorageKeys.CURRENT_USER_ID: "user-1"}
        storage = InMemorySessionStorage(initial)
        storage.set_string(StorageKeys.CURRENT_USER_ID, "user-2")

        assert initial[StorageKeys.CURRENT_USER_ID] == "user-1"

    def test_keys_match_plain_strings(self):
        storage = InMemorySessionStorage({"app_session_token": "t0k3n"})

        assert isinstance(StorageKeys.CURRENT_SESSION_TOKEN, Enum)
        assert StorageKeys.CURRENT_SESSION_TOKEN == "app_session_token"
        assert storage.get_string(StorageKeys.CURRENT_SESSION_TOKEN) == "t0k3n"


class TestStorageUserContext:
    def test_user_email(self, storage):
        context = StorageUserContext(storage)

        assert context.user_email == "ada@zuri.chat"

    def test_user_id(self):
        storage = InMemorySessionStorage({StorageKeys.CURRENT_USER_ID: "user-1"})

        assert StorageUserContext(storage).user_id == "user-1"

    def test_signed_out_user_raises_auth_failure(self):
        context = StorageUserContext(InMemorySessionStorage())

        with pytest.raises(AuthFailure):
            context.user_email


class TestBaseRepositoryHeaders:
    def test_headers_carry_bearer_token(self, storage):
        repo = BaseRepository(AsyncMock(spec=ApiClient), storage)

        assert repo.token == "test-session-token"
        assert repo.headers == {
            "Authorization": "Bearer test-session-token",
            "Content-Type": "application/json",
        }
        assert repo.auth_headers == {"Authorization": "Bearer test-session-token"}

    def test_token_is_read_per_request(self, storage):
        repo = BaseRepository(AsyncMock(spec=ApiClient), storage)
        storage.set_string(StorageKeys.CURRENT_SESSION_TOKEN, "refreshed")

        assert repo.auth_headers == {"Authorization": "Bearer refreshed"}

    def test_no_token_no_authorization_header(self):
        repo = BaseRepository(AsyncMock(spec=ApiClient), InMemorySessionStorage())

        assert repo.headers == {"Content-Type": "application/json"}

    @pytest.mark.asyncio
    async def test_close_closes_api_client(self, storage):
        api_client = AsyncMock(spec=ApiClient)
        repo = BaseRepository(api_client, storage)

        await repo.close()

        api_client.close.assert_awaited_once_with()
