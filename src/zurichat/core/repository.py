"""Base class for repositories talking to the Zuri core API."""

from zurichat.core.api_client import ApiClient
from zurichat.core.session import SessionStorage, StorageKeys


class BaseRepository:
    """Shared API client and request headers for repositories."""

    def __init__(self, api_client: ApiClient, storage: SessionStorage) -> None:
        """
        Initialize the repository.

        Args:
            api_client: Client scoped to the core API base URL
            storage: Session storage holding the bearer token
        """
        self.api_client = api_client
        self.storage = storage

    @property
    def token(self) -> str | None:
        return self.storage.get_string(StorageKeys.CURRENT_SESSION_TOKEN)

    @property
    def auth_headers(self) -> dict[str, str]:
        token = self.token
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}

    @property
    def headers(self) -> dict[str, str]:
        return {**self.auth_headers, "Content-Type": "application/json"}

    async def close(self) -> None:
        """Close the underlying API client."""
        await self.api_client.close()
