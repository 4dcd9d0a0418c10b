# infra/di/container.py

from typing import Optional

from dependency_injector import containers, providers
from fastapi import Depends

from request_debugger.adapters.session import StaticTokenProvider, StorageTokenProvider
from request_debugger.application.services.debugger_service import DebuggerService
from request_debugger.application.services.tab_store import TabStore
from request_debugger.common.storage import KeyValueStorage, StorageFactory
from request_debugger.config.settings import Settings
from request_debugger.domain.ports.session_token_provider import SessionTokenProvider
from request_debugger.tools.request_executor import RequestExecutorTool


def build_token_provider(
    storage: KeyValueStorage, token_key: str, static_token: Optional[str] = None
) -> SessionTokenProvider:
    """A configured token wins over the one the host keeps in storage."""
    if static_token:
        return StaticTokenProvider(static_token)
    return StorageTokenProvider(storage, key=token_key)


class Container(containers.DeclarativeContainer):
    """Dependency injection container for the debugger."""

    config = providers.Configuration()

    storage: providers.Singleton[KeyValueStorage] = providers.Singleton(
        StorageFactory.create_storage,
        storage_type=config.storage.backend,
        storage_dir=config.storage.dir,
    )

    token_provider: providers.Singleton[SessionTokenProvider] = providers.Singleton(
        build_token_provider,
        storage=storage,
        token_key=config.session.token_key,
        static_token=config.session.token,
    )

    tab_store: providers.Singleton[TabStore] = providers.Singleton(
        TabStore,
        storage=storage,
        token_provider=token_provider,
        storage_key=config.storage.key,
    )

    request_executor: providers.Singleton[RequestExecutorTool] = providers.Singleton(
        RequestExecutorTool,
        base_url=config.api.base_url,
        timeout=config.api.timeout,
        verbose=config.debug,
    )

    debugger_service: providers.Singleton[DebuggerService] = providers.Singleton(
        DebuggerService,
        tab_store=tab_store,
        executor=request_executor,
    )


def configure_container(container: Container, app_settings: Settings) -> Container:
    container.config.from_dict(
        {
            "debug": app_settings.DEBUG,
            "storage": {
                "backend": app_settings.STORAGE_BACKEND,
                "dir": app_settings.STORAGE_DIR,
                "key": app_settings.STORAGE_KEY,
            },
            "session": {
                "token_key": app_settings.TOKEN_STORAGE_KEY,
                "token": app_settings.SESSION_TOKEN,
            },
            "api": {
                "base_url": app_settings.API_BASE_URL,
                "timeout": app_settings.REQUEST_TIMEOUT,
            },
        }
    )
    return container


# Global container instance
_container: Optional[Container] = None


def get_container() -> Container:
    """Get the configured container instance."""
    global _container
    if _container is None:
        from request_debugger.config.settings import settings

        _container = configure_container(Container(), settings)
    return _container


def set_container(container: Optional[Container]) -> None:
    """Install (or reset with None) the process-wide container."""
    global _container
    _container = container


def get_debugger_service() -> DebuggerService:
    """Get DebuggerService instance from DI container."""
    return get_container().debugger_service()


debugger_service_dependency = Depends(get_debugger_service)
