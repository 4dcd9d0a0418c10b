import json
from typing import Callable, List

import httpx
import pytest

from request_debugger.adapters.session import StorageTokenProvider
from request_debugger.application.services.tab_store import TabStore
from request_debugger.common.logger import LoggerFactory, LoggerType, LogLevel
from request_debugger.common.storage import InMemoryStorage
from request_debugger.config.constants import DEFAULT_STORAGE_KEY
from request_debugger.tools.request_executor import RequestExecutorTool


@pytest.fixture(autouse=True, scope="session")
def quiet_loggers():
    LoggerFactory.configure(logger_type=LoggerType.PRINT, level=LogLevel.WARNING)
    yield
    LoggerFactory.clear_cache()


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def token_provider(storage) -> StorageTokenProvider:
    return StorageTokenProvider(storage)


@pytest.fixture
def store(storage, token_provider) -> TabStore:
    tab_store = TabStore(storage, token_provider=token_provider)
    tab_store.load()
    return tab_store


@pytest.fixture
def saved_blob(storage) -> Callable[[], List[dict]]:
    """Decode whatever the store last wrote."""

    def _read() -> List[dict]:
        return json.loads(storage.get(DEFAULT_STORAGE_KEY))

    return _read


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_executor(recorded_requests):
    """Executor whose transport answers with ``handler`` and records requests."""

    def _make(handler, base_url: str = "http://backend.test") -> RequestExecutorTool:
        def _recording(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return RequestExecutorTool(
            base_url=base_url, transport=httpx.MockTransport(_recording)
        )

    return _make
