"""Database manager for the cfgtree resource store."""

import sqlite3
from pathlib import Path
from typing import final, Any

from cfgtree.platform.logging.config import logger
from cfgtree.config.paths import default_db_path


@final
class DatabaseManager:
    """Database manager for the cfgtree resource store."""

    db_path: str | Path
    conn: sqlite3.Connection | None

    def __init__(self, db_path: Path | str | None = None) -> None:
        """Initialize database manager.

        Args:
            db_path: Path to database file. If None, use default path in project's data directory.
                   If ":memory:", use in-memory database.
        """
        if db_path == ":memory:":
            self.db_path = ":memory:"
        elif db_path is None:
            self.db_path = default_db_path()
        else:
            self.db_path = Path(db_path) if isinstance(db_path, str) else db_path
        self.conn = None

    def connect(self) -> None:
        """Connect to database and initialize schema."""
        try:
            if isinstance(self.db_path, Path):
                try:
                    self.db_path.parent.mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    raise PermissionError(f"Unable to open database at {self.db_path}") from e

            try:
                self.conn = sqlite3.connect(
                    self.db_path,
                    timeout=30.0,  # Wait up to 30 seconds for locks
                    isolation_level="IMMEDIATE",  # Acquire write lock immediately
                )
            except sqlite3.OperationalError as e:
                if "unable to open database file" in str(e):
                    raise PermissionError(f"Unable to open database at {self.db_path}") from e
                raise

            _ = self.conn.execute("PRAGMA foreign_keys = ON")
            _ = self.conn.execute("PRAGMA synchronous = NORMAL")
            _ = self.conn.execute("PRAGMA busy_timeout = 30000")  # 30 seconds in milliseconds

            self._init_schema()

        except sqlite3.Error as e:
            logger.error("Failed to connect to database: %s", e)
            raise

    def _init_schema(self) -> None:
        """Initialize database schema."""
        if self.conn is None:
            return

        try:
            cursor = self.conn.cursor()

            _ = cursor.execute(
                """
                SELECT name FROM sqlite_master
                WHERE type='table' AND name IN ('resources', 'resource_properties')
                """
            )
            existing_tables = {row[0] for row in cursor.fetchall()}
            if existing_tables == {"resources", "resource_properties"}:
                logger.debug("Tables already exist, skipping schema initialization")
                return

            # Node tree; children are listed in creation (id) order
            _ = cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS resources (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    parent_id INTEGER,
                    name TEXT NOT NULL,
                    path TEXT NOT NULL UNIQUE,
                    resource_type TEXT NOT NULL,
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
                    updated_at DATETIME DEFAULT CURRENT_TIMESTAMP,
                    FOREIGN KEY (parent_id) REFERENCES resources (id) ON DELETE CASCADE
                )
                """
            )

            # JSON-encoded property values
            _ = cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS resource_properties (
                    resource_id INTEGER NOT NULL,
                    name TEXT NOT NULL,
                    value TEXT NOT NULL,
                    PRIMARY KEY (resource_id, name),
                    FOREIGN KEY (resource_id) REFERENCES resources (id) ON DELETE CASCADE
                )
                """
            )

            _ = cursor.execute("CREATE INDEX IF NOT EXISTS idx_resources_parent ON resources(parent_id)")

            # Root node
            _ = cursor.execute(
                """
                INSERT OR IGNORE INTO resources (parent_id, name, path, resource_type)
                VALUES (NULL, '', '/', 'root')
                """
            )

            self.conn.commit()
            logger.info("Successfully initialized database schema")

        except sqlite3.Error as e:
            logger.error("Failed to initialize schema: %s", e)
            if self.conn:
                self.conn.rollback()
            raise

    def close(self) -> None:
        """Close database connection."""
        if self.conn:
            try:
                self.conn.close()
                self.conn = None
            except sqlite3.Error as e:
                logger.error("Failed to close database connection: %s", e)

    def __enter__(self) -> "DatabaseManager":
        """Enter context manager."""
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any | None,
    ) -> None:
        """Exit context manager."""
        self.close()

    def commit_transaction(self) -> None:
        """Commit the current transaction."""
        if self.conn:
            self.conn.commit()

    def rollback_transaction(self) -> None:
        """Rollback the current transaction."""
        if self.conn:
            self.conn.rollback()
