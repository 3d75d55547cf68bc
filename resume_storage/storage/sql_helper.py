from __future__ import annotations

import logging
import sqlite3
from contextlib import closing, contextmanager
from dataclasses import dataclass
from os import PathLike
from typing import Any, Callable, Iterable, Iterator, Mapping, Sequence, TypeVar

from .errors import StorageAccessError

T = TypeVar("T")

ConnectionFactory = Callable[[], sqlite3.Connection]

logger = logging.getLogger(__package__)


def connect(database: str | PathLike) -> sqlite3.Connection:
    # isolation_level=None: вне явного BEGIN каждая команда коммитится сама
    conn = sqlite3.connect(database, isolation_level=None)
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@dataclass
class Statement:
    """Курсор, привязанный к одному SQL-запросу."""

    cursor: sqlite3.Cursor
    sql: str

    def execute(
        self, params: Sequence[Any] | Mapping[str, Any] = ()
    ) -> sqlite3.Cursor:
        logger.debug("%s %r", self.sql, params)
        return self.cursor.execute(self.sql, params)

    def executemany(
        self, seq_of_params: Iterable[Sequence[Any]]
    ) -> sqlite3.Cursor:
        logger.debug("%s (batch)", self.sql)
        return self.cursor.executemany(self.sql, seq_of_params)


class SqlHelper:
    def __init__(self, connection_factory: ConnectionFactory):
        self.connection_factory = connection_factory

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = self.connection_factory()
        except sqlite3.Error as ex:
            raise StorageAccessError(f"Could not connect: {ex}") from ex
        with closing(conn):
            conn.row_factory = sqlite3.Row
            yield conn

    @contextmanager
    def prepare(self, conn: sqlite3.Connection, sql: str) -> Iterator[Statement]:
        with closing(conn.cursor()) as cursor:
            yield Statement(cursor, sql)

    def execute(self, sql: str, body: Callable[[Statement], T]) -> T:
        try:
            with self.connection() as conn, self.prepare(conn, sql) as stmt:
                return body(stmt)
        except sqlite3.Error as ex:
            raise StorageAccessError(f"Database error: {ex}") from ex

    def transactional_execute(
        self, body: Callable[[sqlite3.Connection], T]
    ) -> T:
        with self.connection() as conn:
            try:
                conn.execute("BEGIN")
                result = body(conn)
                conn.commit()
                return result
            except BaseException as ex:
                self._rollback(conn)
                if isinstance(ex, sqlite3.Error):
                    raise StorageAccessError(f"Database error: {ex}") from ex
                raise
            finally:
                # Соединение не должно уйти закрываться с открытой транзакцией
                if conn.in_transaction:
                    self._rollback(conn)

    @staticmethod
    def _rollback(conn: sqlite3.Connection) -> None:
        try:
            if conn.in_transaction:
                conn.rollback()
        except sqlite3.Error:
            # Ошибка отката не должна скрыть исходную ошибку
            logger.warning("Rollback failed", exc_info=True)
