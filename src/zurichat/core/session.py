"""
Session storage and user context collaborators.

Repositories and services receive these at construction instead of looking
up process-wide singletons.
"""

from enum import Enum
from typing import Protocol

from zurichat.core.failures import AuthFailure


class StorageKeys(str, Enum):
    """Keys used in session storage."""

    CURRENT_SESSION_TOKEN = "app_session_token"
    CURRENT_USER_EMAIL = "app_current_user_email"
    CURRENT_USER_ID = "app_current_user_id"


class SessionStorage(Protocol):
    """Key-value store holding the signed-in user's session."""

    def get_string(self, key: str) -> str | None: ...

    def set_string(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class UserContext(Protocol):
    """Provides information about the signed-in user."""

    @property
    def user_email(self) -> str: ...


class InMemorySessionStorage:
    """Dict-backed SessionStorage."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get_string(self, key: str) -> str | None:
        return self._values.get(key)

    def set_string(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove(self, key: str) -> None:
        self._values.pop(key, None)


class StorageUserContext:
    """UserContext backed by session storage."""

    def __init__(self, storage: SessionStorage) -> None:
        self.storage = storage

    @property
    def user_email(self) -> str:
        """Email of the signed-in user.

        Raises:
            AuthFailure: If no user is signed in
        """
        email = self.storage.get_string(StorageKeys.CURRENT_USER_EMAIL)
        if not email:
            raise AuthFailure("No signed-in user")
        return email

    @property
    def user_id(self) -> str | None:
        return self.storage.get_string(StorageKeys.CURRENT_USER_ID)
