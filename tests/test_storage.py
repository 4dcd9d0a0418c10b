from request_debugger.adapters.session import StaticTokenProvider, StorageTokenProvider
from request_debugger.application.services.tab_store import TabStore
from request_debugger.common.logger import LoggerFactory, LoggerType, LogLevel
from request_debugger.common.storage import (
    FileStorage,
    InMemoryStorage,
    StorageFactory,
    StorageType,
)


class TestFileStorage:
    def test_set_get_delete(self, tmp_path):
        storage = FileStorage(storage_dir=str(tmp_path))

        assert storage.get("apiDebuggerTabs") is None
        assert storage.set("apiDebuggerTabs", '[{"id": "tab-1"}]')
        assert storage.get("apiDebuggerTabs") == '[{"id": "tab-1"}]'
        assert storage.exists("apiDebuggerTabs")
        assert storage.keys() == ["apiDebuggerTabs"]

        assert storage.delete("apiDebuggerTabs")
        assert storage.delete("apiDebuggerTabs") is False
        assert storage.get("apiDebuggerTabs", "fallback") == "fallback"

    def test_overwrite_leaves_no_temp_files(self, tmp_path):
        storage = FileStorage(storage_dir=str(tmp_path))
        storage.set("k", "one")
        storage.set("k", "two")

        assert storage.get("k") == "two"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["k.json"]

    def test_drafts_survive_a_new_process(self, tmp_path):
        first = TabStore(FileStorage(storage_dir=str(tmp_path)))
        first.load()
        first.edit(path="/api/persisted")
        first.rename(first.active_id, "Saved")

        second = TabStore(FileStorage(storage_dir=str(tmp_path)))
        drafts, _ = second.load()

        assert drafts[0].name == "Saved"
        assert drafts[0].path == "/api/persisted"

    def test_clear(self, tmp_path):
        storage = FileStorage(storage_dir=str(tmp_path))
        storage.set("a", "1")
        storage.set("b", "2")

        assert storage.clear()
        assert storage.keys() == []


class TestStorageFactory:
    def test_memory_backend(self):
        assert isinstance(StorageFactory.create_storage(StorageType.MEMORY), InMemoryStorage)

    def test_backend_from_string(self, tmp_path):
        storage = StorageFactory.create_storage("file", storage_dir=str(tmp_path / "d"))
        assert isinstance(storage, FileStorage)

    def test_unusable_directory_falls_back_to_memory(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("file in the way")

        storage = StorageFactory.create_storage(
            StorageType.FILE, storage_dir=str(blocker / "nested")
        )

        assert isinstance(storage, InMemoryStorage)

    def test_logging_follows_configuration_made_after_import(self, tmp_path, capsys):
        LoggerFactory.clear_cache()
        LoggerFactory.configure(logger_type=LoggerType.PRINT, level=LogLevel.INFO)
        try:
            StorageFactory.create_storage(StorageType.FILE, storage_dir=str(tmp_path))
            assert "Using file storage at" in capsys.readouterr().out
        finally:
            LoggerFactory.clear_cache()
            LoggerFactory.configure(logger_type=LoggerType.PRINT, level=LogLevel.WARNING)


class TestTokenProviders:
    def test_storage_provider_reads_host_token(self):
        storage = InMemoryStorage({"token": "Bearer abc"})
        assert StorageTokenProvider(storage).get_token() == "Bearer abc"

    def test_empty_token_counts_as_missing(self):
        assert StorageTokenProvider(InMemoryStorage({"token": ""})).get_token() is None
        assert StaticTokenProvider("").get_token() is None

    def test_static_provider(self):
        assert StaticTokenProvider("Bearer x").get_token() == "Bearer x"
