# config/settings.py

from typing import Optional
from pydantic_settings import BaseSettings

from request_debugger.config.constants import (
    DEFAULT_STORAGE_KEY,
    DEFAULT_TOKEN_STORAGE_KEY,
)


class Settings(BaseSettings):
    """Global application settings."""

    # Application info
    APP_NAME: str = "Request Debugger"
    APP_VERSION: str = "0.1.0"

    # Debug mode; also enables the debugger unless ENABLE_API_DEBUGGER says otherwise
    DEBUG: bool = False
    ENABLE_API_DEBUGGER: Optional[bool] = None

    # Target backend: relative draft paths resolve against this
    API_BASE_URL: str = "http://localhost:8000"
    # None keeps the HTTP client's own timeout behaviour
    REQUEST_TIMEOUT: Optional[float] = None

    # Draft persistence
    STORAGE_BACKEND: str = "file"  # Options: file, memory
    STORAGE_DIR: str = ".request_debugger"
    STORAGE_KEY: str = DEFAULT_STORAGE_KEY

    # Session token used to pre-fill the Authorization header
    TOKEN_STORAGE_KEY: str = DEFAULT_TOKEN_STORAGE_KEY
    SESSION_TOKEN: Optional[str] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Server settings
    HOST: str = "127.0.0.1"
    PORT: int = 8010

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def debugger_enabled(self) -> bool:
        """Feature gate deciding whether the debugger routes are served."""
        if self.ENABLE_API_DEBUGGER is not None:
            return self.ENABLE_API_DEBUGGER
        return self.DEBUG


# Create global settings instance
settings = Settings()
