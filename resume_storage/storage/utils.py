from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

QUERIES_PATH: Path = Path(__file__).parent / "queries"


logger: logging.Logger = logging.getLogger(__package__)


def create_schema(conn: sqlite3.Connection) -> None:
    """Создает схему БД, если ее еще нет"""
    exists = conn.execute(
        "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = 'resume'"
    ).fetchone()

    conn.executescript(
        (QUERIES_PATH / "schema.sql").read_text(encoding="utf-8")
    )

    if exists:
        logger.debug("Database schema is up to date")
    else:
        logger.info("Database schema created")
