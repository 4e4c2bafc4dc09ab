from pathlib import Path

from meeting_analysis.config.settings import Settings
from meeting_analysis.database.connection import init_pool
from meeting_analysis.storage.base import KeyValueStore, ReportRepository
from meeting_analysis.storage.file_store import FileKeyValueStore
from meeting_analysis.storage.memory_store import InMemoryKeyValueStore
from meeting_analysis.storage.postgres_store import PostgresKeyValueStore
from meeting_analysis.storage.report_repository import KeyValueReportRepository


class KeyValueStoreFactory:
    """Creates the key-value backend named by ``Settings.storage_backend``."""

    BACKENDS = ("memory", "file", "postgres")

    @classmethod
    def create(cls, settings: Settings) -> KeyValueStore:
        backend = settings.storage_backend.strip().lower()
        if backend == "memory":
            return InMemoryKeyValueStore()
        if backend == "file":
            return FileKeyValueStore(Path(settings.storage_dir))
        if backend == "postgres":
            init_pool(settings)
            store = PostgresKeyValueStore(settings.storage_table)
            store.ensure_table()
            return store
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )


def build_report_repository(settings: Settings) -> ReportRepository:
    """Build the report repository on top of the configured backend."""
    store = KeyValueStoreFactory.create(settings)
    return KeyValueReportRepository(store, key=settings.storage_key)
