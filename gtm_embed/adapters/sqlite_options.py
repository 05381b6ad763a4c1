"""
SQLite adapter for named options.

Stores each option as one row in an ``options`` table keyed by name. The
store is bound to a single option name so it satisfies OptionStorePort.
"""

from __future__ import annotations

import sqlite3
from typing import Any

from gtm_embed.domain.entities import CONTAINER_ID_OPTION

SCHEMA = """
CREATE TABLE IF NOT EXISTS options (
    option_name TEXT PRIMARY KEY,
    option_value TEXT NOT NULL
)
"""


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


class SQLiteOptionStore:
    """SQLite adapter for a single named option."""

    def __init__(self, db_path: str, option_name: str = CONTAINER_ID_OPTION):
        self.db_path = db_path
        self.option_name = option_name
        self._ensure_schema()

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(SCHEMA)
            conn.commit()
        finally:
            conn.close()

    def get(self) -> str:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT option_value FROM options WHERE option_name = ?",
                (self.option_name,),
            ).fetchone()
            if not row:
                return ""
            return str(row["option_value"])
        finally:
            conn.close()

    def set(self, value: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO options (option_name, option_value) VALUES (?, ?)
                ON CONFLICT(option_name) DO UPDATE SET
                    option_value=excluded.option_value
            """,
                (self.option_name, value),
            )
            conn.commit()
        finally:
            conn.close()

    def delete(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute("DELETE FROM options WHERE option_name = ?", (self.option_name,))
            conn.commit()
        finally:
            conn.close()

    def exists(self) -> bool:
        conn = self._get_conn()
        try:
            row = conn.execute(
                "SELECT 1 AS found FROM options WHERE option_name = ?",
                (self.option_name,),
            ).fetchone()
            return row is not None
        finally:
            conn.close()
