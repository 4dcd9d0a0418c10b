from request_debugger.common.logger.logger_interface import LoggerInterface, LogLevel
from request_debugger.common.logger.standard_logger import StandardLogger
from request_debugger.common.logger.print_logger import PrintLogger
from request_debugger.common.logger.logger_factory import LoggerFactory, LoggerType

__all__ = [
    "LoggerInterface",
    "LogLevel",
    "StandardLogger",
    "PrintLogger",
    "LoggerFactory",
    "LoggerType",
]
