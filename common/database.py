import os
import sqlite3
from contextlib import contextmanager
from typing import Optional
from common.config import config
from common.errors import StoreError
from common.logging.logger import get_logger

logger = get_logger("database")


class Database:
    def __init__(self, db_path: Optional[str] = None, timeout: Optional[float] = None):
        if db_path is None:
            # Convert to absolute path so worker threads resolve the same file
            raw_path = config.get("database.sqlite_path")
            self.db_path = os.path.abspath(raw_path)
        else:
            self.db_path = os.path.abspath(db_path)
        self.timeout = timeout if timeout is not None else float(config.get("database.timeout_seconds"))
        self._init_db()

    def get_connection(self):
        return sqlite3.connect(self.db_path, timeout=self.timeout)

    @contextmanager
    def connection(self):
        """Context manager that provides a connection with automatic commit/rollback."""
        conn = self.get_connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def _init_db(self):
        """Initialize the database schema."""
        schema = """
        -- One row per unique content hash; rows are never updated in place
        CREATE TABLE IF NOT EXISTS analyses (
            id TEXT PRIMARY KEY,
            content_hash TEXT NOT NULL UNIQUE,
            content TEXT NOT NULL,
            platform TEXT NOT NULL,
            post_id TEXT,
            author TEXT,
            score INTEGER NOT NULL,
            confidence REAL NOT NULL,
            label TEXT NOT NULL,
            llm_score INTEGER,
            heuristic_score INTEGER NOT NULL,
            signals JSON NOT NULL,
            created_at TIMESTAMP NOT NULL
        );

        CREATE INDEX IF NOT EXISTS idx_analyses_created_at ON analyses(created_at);
        CREATE INDEX IF NOT EXISTS idx_analyses_author ON analyses(author);
        """

        directory = os.path.dirname(self.db_path)
        try:
            if directory:
                os.makedirs(directory, exist_ok=True)
            with self.connection() as conn:
                conn.execute("PRAGMA journal_mode=WAL")
                conn.executescript(schema)
            logger.info(f"Database initialized at {self.db_path}")
        except (OSError, sqlite3.Error) as e:
            logger.error(f"Failed to initialize database: {e}")
            raise StoreError("init", str(e)) from e


db = Database()
