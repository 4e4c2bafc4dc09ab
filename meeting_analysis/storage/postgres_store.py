import psycopg
from psycopg import sql

from meeting_analysis.database.connection import get_connection
from meeting_analysis.storage.base import KeyValueStore
from meeting_analysis.storage.exceptions import StorageError


class PostgresKeyValueStore(KeyValueStore):
    """Key-value rows in a two-column PostgreSQL table.

    Requires the connection pool to be initialized (``init_pool``).
    """

    def __init__(self, table: str = "kv_entries") -> None:
        self._table = sql.Identifier(table)

    def ensure_table(self) -> None:
        """Create the backing table if it does not exist yet."""
        query = sql.SQL(
            "CREATE TABLE IF NOT EXISTS {} (key TEXT PRIMARY KEY, value TEXT NOT NULL)"
        ).format(self._table)
        try:
            with get_connection() as conn:
                conn.execute(query)
                conn.commit()
        except (psycopg.Error, RuntimeError) as exc:
            raise StorageError(f"Failed to create key-value table: {exc}") from exc

    def get(self, key: str) -> str | None:
        query = sql.SQL("SELECT value FROM {} WHERE key = %s").format(self._table)
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(query, (key,))
                    row = cur.fetchone()
        except (psycopg.Error, RuntimeError) as exc:
            raise StorageError(f"Failed to read key '{key}': {exc}") from exc
        if row is None:
            return None
        value: str = row[0]
        return value

    def set(self, key: str, value: str) -> None:
        query = sql.SQL(
            """
            INSERT INTO {} (key, value)
            VALUES (%s, %s)
            ON CONFLICT (key) DO UPDATE SET value = EXCLUDED.value
            """
        ).format(self._table)
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(query, (key, value))
                conn.commit()
        except (psycopg.Error, RuntimeError) as exc:
            raise StorageError(f"Failed to write key '{key}': {exc}") from exc
