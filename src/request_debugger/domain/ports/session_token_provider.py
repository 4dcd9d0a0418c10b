# domain/ports/session_token_provider.py

from abc import ABC, abstractmethod
from typing import Optional


class SessionTokenProvider(ABC):
    """Read-only access to the host application's bearer token."""

    @abstractmethod
    def get_token(self) -> Optional[str]:
        """Return the current token, or None when no session is established."""
        pass
