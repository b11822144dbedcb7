"""
Record Store - durable key-value persistence.

Every application record (the item collection, the settings singleton) is
stored as a JSON value under a stable string key. Backends are swappable
without touching the repositories that sit on top of them.

Failure contract:
- Reads never raise. A missing key, or a record that cannot be read or
  decoded, yields None and the caller treats it as "no data".
- Writes never raise. A failed write is logged and reported through a
  False return; the caller's in-memory result stands.
"""

import json
import logging
import os
import sqlite3
import uuid
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Generator, List, Optional

from ..config import Config
from ..exceptions import StorageError

logger = logging.getLogger(__name__)


class StorageKeys:
    """Keys owned by the application."""

    ITEMS = "phraser"
    SETTINGS = "phraser-settings"

    @classmethod
    def all(cls) -> List[str]:
        return [cls.ITEMS, cls.SETTINGS]


class RecordStore(ABC):
    """
    Abstract base class for key-value record stores.

    Subclasses implement the raw text I/O (_read/_write/_delete/_list_keys)
    and may raise StorageError from them; the public methods handle
    serialization and apply the never-raise contract.
    """

    @abstractmethod
    def _read(self, key: str) -> Optional[str]:
        """Return the raw JSON text for key, or None if absent."""
        pass

    @abstractmethod
    def _write(self, key: str, payload: str) -> None:
        """Persist raw JSON text under key."""
        pass

    @abstractmethod
    def _delete(self, key: str) -> bool:
        """Delete key. Returns True if something was removed."""
        pass

    @abstractmethod
    def _list_keys(self) -> List[str]:
        """List stored keys."""
        pass

    def get(self, key: str) -> Optional[Any]:
        """
        Read and decode the value stored under key.

        Args:
            key: Record key

        Returns:
            Decoded value, or None if missing, unreadable or corrupt
        """
        try:
            payload = self._read(key)
        except StorageError as e:
            logger.warning("Error reading record %r: %s", key, e)
            return None

        if payload is None:
            return None

        try:
            return json.loads(payload)
        except (ValueError, RecursionError) as e:
            logger.warning("Corrupt record %r ignored: %s", key, e)
            return None

    def set(self, key: str, value: Any) -> bool:
        """
        Encode and persist value under key.

        Args:
            key: Record key
            value: JSON-serializable value

        Returns:
            True if persisted, False if the write failed (already logged)
        """
        try:
            payload = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.error("Cannot serialize record %r: %s", key, e)
            return False

        try:
            self._write(key, payload)
            return True
        except StorageError as e:
            logger.error("Error saving record %r: %s", key, e)
            return False

    def remove(self, key: str) -> bool:
        """Remove key. Returns False if absent or the delete failed."""
        try:
            return self._delete(key)
        except StorageError as e:
            logger.error("Error removing record %r: %s", key, e)
            return False

    def clear(self) -> None:
        """Remove all application records."""
        for key in StorageKeys.all():
            self.remove(key)

    def keys(self) -> List[str]:
        """List stored keys (empty if the store cannot be listed)."""
        try:
            return sorted(self._list_keys())
        except StorageError as e:
            logger.warning("Error listing records: %s", e)
            return []


class MemoryStore(RecordStore):
    """
    In-process store.

    Values are kept as JSON text so they round-trip through serialization
    exactly as they would in a durable store.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        """
        Initialize memory store.

        Args:
            initial: Raw JSON text per key, used to seed (possibly corrupt) records
        """
        self._records: Dict[str, str] = dict(initial or {})

    def _read(self, key: str) -> Optional[str]:
        return self._records.get(key)

    def _write(self, key: str, payload: str) -> None:
        self._records[key] = payload

    def _delete(self, key: str) -> bool:
        return self._records.pop(key, None) is not None

    def _list_keys(self) -> List[str]:
        return list(self._records)


class JSONFileStore(RecordStore):
    """
    Directory-backed store, one UTF-8 JSON file per key.

    Writes are atomic (temp file + rename), so a crash mid-write leaves the
    previous record intact.
    """

    SUFFIX = ".json"

    def __init__(self, directory: Optional[str] = None):
        """
        Initialize JSON file store.

        Args:
            directory: Folder holding the record files
        """
        self.directory = Path(directory or Config.STORE_PATH)

    def _path_for(self, key: str) -> Path:
        return self.directory / f"{key}{self.SUFFIX}"

    def _read(self, key: str) -> Optional[str]:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"{path}: {e}") from e

    def _write(self, key: str, payload: str) -> None:
        path = self._path_for(key)
        temp_file = path.with_name(f"{path.name}.{uuid.uuid4().hex[:8]}.tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(temp_file, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(temp_file, path)
        except OSError as e:
            # Clean up temp file on failure
            if temp_file.exists():
                try:
                    temp_file.unlink()
                except OSError:
                    logger.debug("Could not remove temp file %s", temp_file)
            raise StorageError(f"{path}: {e}") from e

    def _delete(self, key: str) -> bool:
        path = self._path_for(key)
        if not path.exists():
            return False
        try:
            path.unlink()
            return True
        except OSError as e:
            raise StorageError(f"{path}: {e}") from e

    def _list_keys(self) -> List[str]:
        if not self.directory.exists():
            return []
        try:
            return [p.name[:-len(self.SUFFIX)] for p in self.directory.glob(f"*{self.SUFFIX}")]
        except OSError as e:
            raise StorageError(f"{self.directory}: {e}") from e


class SQLiteStore(RecordStore):
    """
    SQLite-backed store with a single key/value table.

    Each record is one row holding JSON text; a write replaces the row.
    """

    def __init__(self, db_path: Optional[str] = None):
        """
        Initialize SQLite store.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = Path(db_path or Config.STORE_PATH)
        self._schema_ready = False

    @contextmanager
    def _get_connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Get database connection with context manager."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self.db_path))
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"{self.db_path}: {e}") from e
        try:
            if not self._schema_ready:
                self._init_schema(conn)
            yield conn
        except sqlite3.Error as e:
            raise StorageError(f"{self.db_path}: {e}") from e
        finally:
            conn.close()

    def _init_schema(self, conn: sqlite3.Connection) -> None:
        """Initialize database schema."""
        conn.execute("""
            CREATE TABLE IF NOT EXISTS records (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        conn.commit()
        self._schema_ready = True

    def _read(self, key: str) -> Optional[str]:
        with self._get_connection() as conn:
            row = conn.execute("SELECT value FROM records WHERE key = ?", (key,)).fetchone()
            return row[0] if row else None

    def _write(self, key: str, payload: str) -> None:
        with self._get_connection() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO records (key, value) VALUES (?, ?)",
                (key, payload)
            )
            conn.commit()

    def _delete(self, key: str) -> bool:
        with self._get_connection() as conn:
            cursor = conn.execute("DELETE FROM records WHERE key = ?", (key,))
            conn.commit()
            return cursor.rowcount > 0

    def _list_keys(self) -> List[str]:
        with self._get_connection() as conn:
            return [row[0] for row in conn.execute("SELECT key FROM records")]


def create_store(backend: Optional[str] = None, path: Optional[str] = None) -> RecordStore:
    """
    Create a record store for the configured backend.

    Args:
        backend: "json", "sqlite" or "memory" (defaults to Config.STORE_BACKEND)
        path: Store location (defaults to Config.STORE_PATH)

    Returns:
        RecordStore instance
    """
    backend = (backend or Config.STORE_BACKEND).lower()

    # Config.STORE_PATH is shaped for the configured backend only
    if path is None and backend != Config.STORE_BACKEND:
        path = str(Path(Config.DATA_DIR) / ("phraser.db" if backend == "sqlite" else "store"))

    if backend == "json":
        return JSONFileStore(path)
    if backend == "sqlite":
        return SQLiteStore(path)
    if backend == "memory":
        return MemoryStore()

    raise ValueError(f"Unknown store backend: {backend!r}")
