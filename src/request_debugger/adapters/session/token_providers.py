# adapters/session/token_providers.py

from typing import Optional

from request_debugger.common.storage import KeyValueStorage
from request_debugger.config.constants import DEFAULT_TOKEN_STORAGE_KEY
from request_debugger.domain.ports.session_token_provider import SessionTokenProvider


class StorageTokenProvider(SessionTokenProvider):
    """Reads the token the host's auth layer keeps in the shared storage."""

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_TOKEN_STORAGE_KEY):
        self.storage = storage
        self.key = key

    def get_token(self) -> Optional[str]:
        token = self.storage.get(self.key)
        return token or None


class StaticTokenProvider(SessionTokenProvider):
    """Fixed token, e.g. from configuration."""

    def __init__(self, token: Optional[str] = None):
        self.token = token

    def get_token(self) -> Optional[str]:
        return self.token or None
