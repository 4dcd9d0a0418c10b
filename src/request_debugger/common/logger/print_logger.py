import sys
from typing import Any, Dict
from datetime import datetime

from .logger_interface import LoggerInterface, LogLevel


class PrintLogger(LoggerInterface):
    """Plain print-based logger, used when loguru sinks are unwanted (e.g. in tests)"""

    LEVEL_ORDER = {
        LogLevel.DEBUG: 0,
        LogLevel.INFO: 1,
        LogLevel.WARNING: 2,
        LogLevel.ERROR: 3,
        LogLevel.CRITICAL: 4,
    }

    def __init__(self, name: str = "print-logger", level: LogLevel = LogLevel.INFO):
        self.name = name
        self.level = level
        self.context: Dict[str, Any] = {}

    def _emit(self, level: LogLevel, message: str, *args) -> None:
        if self.LEVEL_ORDER[level] < self.LEVEL_ORDER[self.level]:
            return
        if args:
            message = message % args

        timestamp = datetime.now().strftime("%H:%M:%S.%f")[:-3]
        line = f"{timestamp} [{level.value:8}] {self.name}: {message}"
        if self.context:
            line += " | " + ", ".join(f"{k}={v}" for k, v in self.context.items())

        stream = sys.stderr if level in (LogLevel.ERROR, LogLevel.CRITICAL) else sys.stdout
        print(line, file=stream)

    def debug(self, message: str, *args, **kwargs) -> None:
        self._emit(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args, **kwargs) -> None:
        self._emit(LogLevel.INFO, message, *args)

    def warning(self, message: str, *args, **kwargs) -> None:
        self._emit(LogLevel.WARNING, message, *args)

    def error(self, message: str, *args, **kwargs) -> None:
        self._emit(LogLevel.ERROR, message, *args)

    def log(self, level: LogLevel, message: str, *args, **kwargs) -> None:
        self._emit(level, message, *args)

    def add_context(self, **context: Any) -> None:
        self.context.update(context)

    def clear_context(self) -> None:
        self.context.clear()
