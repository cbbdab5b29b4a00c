"""
Repository layer for persisted analyses.

The repository accepts an optional Database instance, defaulting to the
module-level singleton when not provided.
Thread-safe: each method opens its own connection via db.get_connection(),
so the async cache can call it from worker threads.

The analyses table is append-only from the pipeline's point of view;
rows are never updated or deleted.
"""

import sqlite3
from typing import List, Optional

from common.database import db as _default_db
from common.errors import StoreError
from common.logging.logger import get_logger
from common.models import AnalysisRecord

logger = get_logger("repositories")

_SELECT = f"SELECT {AnalysisRecord.COLUMNS} FROM analyses"


class AnalysisRepository:
    """Cache lookups, insert-if-absent writes, and history reads."""

    def __init__(self, database=None):
        self._db = database or _default_db

    # ---- reads ----

    def find_by_hash(self, content_hash: str) -> Optional[AnalysisRecord]:
        conn = self._connect("find_by_hash")
        try:
            cursor = conn.cursor()
            cursor.execute(f"{_SELECT} WHERE content_hash = ?", (content_hash,))
            row = cursor.fetchone()
            return AnalysisRecord.from_row(row) if row else None
        except sqlite3.Error as e:
            raise self._fail("find_by_hash", e)
        finally:
            conn.close()

    def get_history(
        self,
        limit: int = 20,
        offset: int = 0,
        author: Optional[str] = None,
    ) -> List[AnalysisRecord]:
        """Most recent first; insertion order breaks created_at ties."""
        conn = self._connect("get_history")
        try:
            cursor = conn.cursor()
            query = _SELECT
            params: list = []

            if author is not None:
                query += " WHERE author = ?"
                params.append(author)

            query += " ORDER BY created_at DESC, rowid DESC LIMIT ? OFFSET ?"
            params.extend([limit, offset])

            cursor.execute(query, params)
            return [AnalysisRecord.from_row(row) for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise self._fail("get_history", e)
        finally:
            conn.close()

    def get_count(self, author: Optional[str] = None) -> int:
        conn = self._connect("get_count")
        try:
            cursor = conn.cursor()
            if author is not None:
                cursor.execute("SELECT COUNT(*) FROM analyses WHERE author = ?", (author,))
            else:
                cursor.execute("SELECT COUNT(*) FROM analyses")
            return cursor.fetchone()[0]
        except sqlite3.Error as e:
            raise self._fail("get_count", e)
        finally:
            conn.close()

    def get_authors(self) -> List[str]:
        conn = self._connect("get_authors")
        try:
            cursor = conn.cursor()
            cursor.execute("""
                SELECT DISTINCT author FROM analyses
                WHERE author IS NOT NULL
                ORDER BY author
            """)
            return [row[0] for row in cursor.fetchall()]
        except sqlite3.Error as e:
            raise self._fail("get_authors", e)
        finally:
            conn.close()

    # ---- writes ----

    def insert_if_absent(self, record: AnalysisRecord) -> AnalysisRecord:
        """
        Insert *record* unless a row with the same content hash exists.

        Returns the stored row: *record* itself when this call won, otherwise
        the row committed earlier by whoever won.
        """
        conn = self._connect("insert")
        try:
            cursor = conn.cursor()
            cursor.execute(f"""
                INSERT OR IGNORE INTO analyses ({AnalysisRecord.COLUMNS})
                VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """, record.to_row())
            inserted = cursor.rowcount == 1
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise self._fail("insert", e)
        finally:
            conn.close()

        if inserted:
            return record

        logger.info(f"Content {record.content_hash[:12]} already stored, returning existing row")
        existing = self.find_by_hash(record.content_hash)
        if existing is None:
            raise StoreError("insert", f"row for {record.content_hash} vanished after conflict")
        return existing

    # ---- helpers ----

    def _connect(self, operation: str):
        try:
            return self._db.get_connection()
        except sqlite3.Error as e:
            raise self._fail(operation, e)

    @staticmethod
    def _fail(operation: str, error: Exception) -> StoreError:
        logger.error(f"SQLite {operation} failed: {error}")
        return StoreError(operation, str(error))
