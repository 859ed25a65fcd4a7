"""
Database Connection Manager
===========================
SQLite-backed document store: keyed JSON documents grouped in collections.
"""
import json
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Generator, Iterable, Iterator, Optional, Tuple

from interleave.config import config
from interleave.config.constants import Collection, COUNTER_FIELD, TRANSLATION_COUNTER_KEY
from interleave.utils.logging import get_logger


class Database:
    """
    Thread-safe SQLite document store.

    Each thread gets its own connection. Documents are JSON objects stored
    under a (collection, key) primary key.
    """

    _instance: Optional['Database'] = None
    _lock = threading.Lock()

    def __init__(self, db_path: Path = None):
        self.db_path = Path(db_path or config.paths.db_path)
        self.logger = get_logger().db_logger
        self._local = threading.local()
        self._initialized = False

        # Ensure directory exists
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_instance(cls, db_path: Path = None) -> 'Database':
        """Get singleton instance."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls(db_path)
            return cls._instance

    @property
    def connection(self) -> sqlite3.Connection:
        """Get thread-local connection."""
        if getattr(self._local, 'connection', None) is None:
            self._local.connection = self._create_connection()
        return self._local.connection

    def _create_connection(self) -> sqlite3.Connection:
        """Create a new database connection."""
        conn = sqlite3.connect(
            str(self.db_path),
            timeout=config.store.db_timeout
        )
        conn.row_factory = sqlite3.Row

        # WAL lets readers proceed while a writer holds the lock
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA synchronous=NORMAL")

        return conn

    def initialize(self) -> None:
        """Initialize database schema."""
        if self._initialized:
            return

        with self._lock:
            if self._initialized:
                return

            self._create_tables()
            if config.store.seed_counter:
                self._seed_counter()
            self._initialized = True

            self.logger.info(f"Database initialized: {self.db_path}")

    def _create_tables(self) -> None:
        """Create database tables."""
        with self.connection:
            self.connection.execute("""
                CREATE TABLE IF NOT EXISTS documents (
                    collection TEXT NOT NULL,
                    key TEXT NOT NULL,
                    data TEXT NOT NULL,
                    PRIMARY KEY (collection, key)
                )
            """)

    def _seed_counter(self) -> None:
        """Create the translation counter if it does not exist yet."""
        with self.connection:
            cursor = self.connection.execute(
                "INSERT OR IGNORE INTO documents (collection, key, data) VALUES (?, ?, ?)",
                (Collection.COUNTERS.value,
                 TRANSLATION_COUNTER_KEY,
                 json.dumps({COUNTER_FIELD: 0}))
            )
            if cursor.rowcount:
                self.logger.info("Seeded translation counter at 0")

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """Context manager for database transactions."""
        conn = self.connection
        try:
            yield conn
            conn.commit()
        except Exception as e:
            conn.rollback()
            self.logger.error(f"Transaction rolled back: {e}")
            raise

    def get(self, collection: str, key: str) -> Optional[Dict[str, Any]]:
        """Fetch one document, or None if absent."""
        row = self.connection.execute(
            "SELECT data FROM documents WHERE collection = ? AND key = ?",
            (collection, key)
        ).fetchone()
        return json.loads(row['data']) if row else None

    def set(self, collection: str, key: str, data: Dict[str, Any]) -> None:
        """Create or overwrite one document."""
        with self.transaction() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO documents (collection, key, data) VALUES (?, ?, ?)",
                (collection, key, json.dumps(data))
            )

    def set_many(self, collection: str, documents: Iterable[Tuple[str, Dict[str, Any]]]) -> int:
        """Create or overwrite a batch of documents in one transaction."""
        rows = [(collection, key, json.dumps(data)) for key, data in documents]
        with self.transaction() as conn:
            conn.executemany(
                "INSERT OR REPLACE INTO documents (collection, key, data) VALUES (?, ?, ?)",
                rows
            )
        return len(rows)

    def delete(self, collection: str, key: str) -> bool:
        """Delete one document. Returns False if it did not exist."""
        with self.transaction() as conn:
            cursor = conn.execute(
                "DELETE FROM documents WHERE collection = ? AND key = ?",
                (collection, key)
            )
            return cursor.rowcount > 0

    def iter_documents(self, collection: str) -> Iterator[Tuple[str, str]]:
        """Yield (key, raw JSON) pairs in the table's natural order."""
        cursor = self.connection.execute(
            "SELECT key, data FROM documents WHERE collection = ?",
            (collection,)
        )
        for row in cursor:
            yield row['key'], row['data']

    def increment(self, collection: str, key: str, field_name: str) -> Optional[int]:
        """
        Atomically add one to an integer field and return the new value.

        Returns None when the document is missing or the field is not an
        integer; nothing is written in that case.
        """
        path = f'$.{field_name}'
        with self.transaction() as conn:
            rows = conn.execute("""
                UPDATE documents
                SET data = json_set(data, ?, json_extract(data, ?) + 1)
                WHERE collection = ? AND key = ? AND json_type(data, ?) = 'integer'
                RETURNING json_extract(data, ?) AS value
            """, (path, path, collection, key, path, path)).fetchall()
        return rows[0]['value'] if rows else None

    def ping(self) -> bool:
        """Check that the database answers queries."""
        try:
            self.connection.execute("SELECT 1").fetchone()
            return True
        except sqlite3.Error as e:
            self.logger.warning(f"Database ping failed: {e}")
            return False

    def close(self) -> None:
        """Close thread-local connection."""
        if getattr(self._local, 'connection', None) is not None:
            self._local.connection.close()
            self._local.connection = None


# Global accessor
_database: Optional[Database] = None


def get_database() -> Database:
    """Get database singleton."""
    global _database
    if _database is None:
        _database = Database.get_instance()
        _database.initialize()
    return _database


def reset_database() -> None:
    """Reset database singleton (for testing)."""
    global _database
    if _database:
        _database.close()
    _database = None
    Database._instance = None
