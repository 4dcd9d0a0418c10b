from typing import Optional, Dict
from enum import Enum

from .logger_interface import LoggerInterface, LogLevel
from .standard_logger import StandardLogger
from .print_logger import PrintLogger


class LoggerType(Enum):
    """Available logger types"""

    STANDARD = "standard"
    PRINT = "print"


class LoggerFactory:
    """Factory for named, cached logger instances"""

    _instances: Dict[str, LoggerInterface] = {}

    # Process-wide defaults, overridden once by the bootstrap from settings
    _default_type: LoggerType = LoggerType.STANDARD
    _default_level: LogLevel = LogLevel.INFO
    _log_file: Optional[str] = None

    @classmethod
    def configure(
        cls,
        logger_type: LoggerType = LoggerType.STANDARD,
        level: LogLevel = LogLevel.INFO,
        log_file: Optional[str] = None,
    ) -> None:
        """Set the defaults used by loggers created after this call"""
        cls._default_type = logger_type
        cls._default_level = level
        cls._log_file = log_file

    @classmethod
    def get_logger(
        cls,
        name: str = "request-debugger",
        logger_type: Optional[LoggerType] = None,
        level: Optional[LogLevel] = None,
    ) -> LoggerInterface:
        """
        Get or create a logger instance

        Args:
            name: Logger name, dotted by component (e.g. ``store.tabs``)
            logger_type: Type of logger to create (configured default if None)
            level: Minimum level (configured default if None)

        Returns:
            Logger instance
        """
        logger_type = logger_type or cls._default_type
        cache_key = f"{name}_{logger_type.value}"

        if cache_key not in cls._instances:
            level = level or cls._default_level
            if logger_type == LoggerType.STANDARD:
                logger = StandardLogger(name=name, level=level, log_file=cls._log_file)
            elif logger_type == LoggerType.PRINT:
                logger = PrintLogger(name=name, level=level)
            else:
                raise ValueError(f"Unknown logger type: {logger_type}")
            cls._instances[cache_key] = logger

        return cls._instances[cache_key]

    @classmethod
    def clear_cache(cls) -> None:
        """Drop cached instances, detaching loguru sinks"""
        for logger in cls._instances.values():
            if isinstance(logger, StandardLogger):
                logger.close()
        cls._instances.clear()
