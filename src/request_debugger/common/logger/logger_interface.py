# common/logger/logger_interface.py

from abc import ABC, abstractmethod
from typing import Any
from enum import Enum


class LogLevel(Enum):
    """Log level enumeration"""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    @classmethod
    def parse(cls, value: str) -> "LogLevel":
        """Resolve a level name from configuration, defaulting to INFO"""
        try:
            return cls(value.strip().upper())
        except (ValueError, AttributeError):
            return cls.INFO


class LoggerInterface(ABC):
    """Abstract base interface for the debugger's loggers"""

    @abstractmethod
    def debug(self, message: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def info(self, message: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def error(self, message: str, *args, **kwargs) -> None:
        pass

    @abstractmethod
    def log(self, level: LogLevel, message: str, *args, **kwargs) -> None:
        """Log message with specified level"""
        pass

    @abstractmethod
    def add_context(self, **context: Any) -> None:
        """Attach key/value pairs to every following record"""
        pass

    @abstractmethod
    def clear_context(self) -> None:
        pass
