# common/storage/storage_factory.py

from typing import Any
from enum import Enum

from .storage_interface import KeyValueStorage
from .in_memory_storage import InMemoryStorage
from .file_storage import FileStorage
from ..logger import LoggerFactory


class StorageType(Enum):
    """Available storage backends"""

    MEMORY = "memory"
    FILE = "file"


class StorageFactory:
    """Factory for storage backends"""

    @classmethod
    def create_storage(
        cls, storage_type: StorageType = StorageType.FILE, **kwargs: Any
    ) -> KeyValueStorage:
        """
        Create a storage backend, falling back to memory if it cannot be built

        Args:
            storage_type: Backend to create
            **kwargs: Backend constructor arguments (``storage_dir`` for FILE)

        Returns:
            Storage instance
        """
        if isinstance(storage_type, str):
            storage_type = StorageType(storage_type.lower())

        if storage_type == StorageType.MEMORY:
            return InMemoryStorage()

        logger = LoggerFactory.get_logger(name="storage.factory")
        try:
            storage = FileStorage(**kwargs)
            logger.info(f"Using file storage at {storage.storage_dir}")
            return storage
        except OSError as e:
            logger.error(f"Failed to create file storage: {e}")
            logger.warning("Falling back to in-memory storage; drafts will not survive restart")
            return InMemoryStorage()
