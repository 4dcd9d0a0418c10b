from request_debugger.common.storage.storage_interface import KeyValueStorage
from request_debugger.common.storage.in_memory_storage import InMemoryStorage
from request_debugger.common.storage.file_storage import FileStorage
from request_debugger.common.storage.storage_factory import StorageFactory, StorageType

__all__ = [
    "KeyValueStorage",
    "InMemoryStorage",
    "FileStorage",
    "StorageFactory",
    "StorageType",
]
