# common/storage/file_storage.py

import os
import re
import threading
from pathlib import Path
from typing import Optional, List

from .storage_interface import KeyValueStorage
from ..logger import LoggerFactory


class FileStorage(KeyValueStorage):
    """Directory-backed storage: one UTF-8 file per key, written atomically"""

    def __init__(self, storage_dir: str = ".request_debugger", file_extension: str = ".json"):
        """
        Initialize file storage

        Args:
            storage_dir: Directory holding one file per key (created if missing)
            file_extension: Suffix appended to every key file
        """
        self.storage_dir = Path(storage_dir).resolve()
        self.file_extension = (
            file_extension if file_extension.startswith(".") else f".{file_extension}"
        )
        self._lock = threading.RLock()
        self.logger = LoggerFactory.get_logger(name="storage.file")

        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _get_file_path(self, key: str) -> Path:
        safe_key = re.sub(r"[^\w\-.]", "_", key)
        return self.storage_dir / f"{safe_key}{self.file_extension}"

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        with self._lock:
            file_path = self._get_file_path(key)
            if not file_path.exists():
                return default
            try:
                return file_path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                self.logger.warning(f"Could not read {file_path}: {e}")
                return default

    def set(self, key: str, value: str) -> bool:
        with self._lock:
            file_path = self._get_file_path(key)
            temp_path = file_path.with_suffix(f"{self.file_extension}.tmp")
            try:
                temp_path.write_text(value, encoding="utf-8")
                os.replace(temp_path, file_path)
                return True
            except (OSError, TypeError, UnicodeEncodeError) as e:
                self.logger.warning(f"Could not write {file_path}: {e}")
                return False

    def delete(self, key: str) -> bool:
        with self._lock:
            file_path = self._get_file_path(key)
            try:
                file_path.unlink()
                return True
            except FileNotFoundError:
                return False
            except OSError as e:
                self.logger.warning(f"Could not delete {file_path}: {e}")
                return False

    def exists(self, key: str) -> bool:
        with self._lock:
            return self._get_file_path(key).exists()

    def keys(self) -> List[str]:
        with self._lock:
            return sorted(path.stem for path in self.storage_dir.glob(f"*{self.file_extension}"))

    def clear(self) -> bool:
        with self._lock:
            ok = True
            for path in self.storage_dir.glob(f"*{self.file_extension}"):
                try:
                    path.unlink()
                except OSError as e:
                    self.logger.warning(f"Could not delete {path}: {e}")
                    ok = False
            return ok
