# common/storage/in_memory_storage.py

import threading
from typing import Optional, Dict, List

from .storage_interface import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Thread-safe process-local storage; contents vanish with the process"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self._lock = threading.RLock()

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        with self._lock:
            return self._data.get(key, default)

    def set(self, key: str, value: str) -> bool:
        if not isinstance(value, str):
            return False
        with self._lock:
            self._data[key] = value
            return True

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def exists(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._data.keys())

    def clear(self) -> bool:
        with self._lock:
            self._data.clear()
            return True
