# common/storage/storage_interface.py

from abc import ABC, abstractmethod
from typing import Optional, List


class KeyValueStorage(ABC):
    """Synchronous string key/value store scoped to one debugger installation.

    Plays the role a browser's local storage plays for the web console: a
    single namespace, whole-value reads and writes, no partial updates.
    """

    @abstractmethod
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Retrieve a stored value

        Args:
            key: Storage key
            default: Returned when the key is absent or unreadable

        Returns:
            Stored string or default
        """
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> bool:
        """
        Store a value, replacing any previous one

        Args:
            key: Storage key
            value: Serialized value

        Returns:
            True if written, False on failure (never raises for I/O errors)
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete key; True if it existed"""
        pass

    @abstractmethod
    def exists(self, key: str) -> bool:
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        pass

    @abstractmethod
    def clear(self) -> bool:
        """Remove every key; True if successful"""
        pass
