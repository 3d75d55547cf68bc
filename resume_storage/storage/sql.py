from __future__ import annotations

import logging
import sqlite3
from functools import partial

from .base import Storage
from .errors import (
    AlreadyExistsError,
    NotFoundError,
    StorageAccessError,
    wrap_db_errors,
)
from .models import (
    LIST_DELIMITER,
    ContactType,
    ListSection,
    Resume,
    Section,
    SectionType,
    TextSection,
)
from .sql_helper import ConnectionFactory, SqlHelper, Statement, connect
from .utils import create_schema

SQLITE_URL_PREFIX = "sqlite:///"

TAGS: dict[str, ContactType | SectionType] = {
    **{t.name: t for t in ContactType},
    **{t.name: t for t in SectionType},
}

logger = logging.getLogger(__package__)


def resolve_tag(tag: str) -> ContactType | SectionType:
    try:
        return TAGS[tag]
    except KeyError:
        # Неизвестный тип означает, что схема разошлась с кодом
        raise StorageAccessError(
            f"Unknown contact or section type: {tag!r}"
        ) from None


def encode_section(section_type: SectionType, section: Section) -> str:
    if isinstance(section, ListSection):
        return LIST_DELIMITER.join(section.items)
    return section.content


def decode_section(section_type: SectionType, value: str) -> Section:
    if section_type.is_list:
        return ListSection(value.split(LIST_DELIMITER) if value else [])
    return TextSection(value)


def add_row_value(resume: Resume, tag: str | None, value: str | None) -> None:
    # LEFT JOIN для резюме без контактов дает одну строку с NULL
    if value is None:
        return
    match resolve_tag(tag):
        case ContactType() as contact_type:
            resume.add_contact(contact_type, value)
        case SectionType() as section_type:
            resume.add_section(section_type, decode_section(section_type, value))


def contact_rows(resume: Resume) -> list[tuple[str, str, str]]:
    resume.check_content()
    rows = [(resume.uuid, k.name, v) for k, v in resume.contacts.items()]
    rows += [
        (resume.uuid, k.name, encode_section(k, v))
        for k, v in resume.sections.items()
    ]
    return rows


class SqlStorage(Storage):
    """Хранилище резюме в SQLite: таблицы resume и contact."""

    def __init__(
        self,
        connection_factory: ConnectionFactory,
        *,
        init_schema: bool = True,
    ):
        self.sql_helper = SqlHelper(connection_factory)
        if init_schema:
            self.init_schema()

    @classmethod
    def from_url(
        cls,
        db_url: str,
        user: str | None = None,
        password: str | None = None,
        **kwargs,
    ) -> SqlStorage:
        """Принимает `sqlite:///path/to/db` или просто путь до файла."""
        database = db_url.removeprefix(SQLITE_URL_PREFIX)
        if "://" in database:
            raise ValueError(f"Unsupported database url: {db_url}")
        if database in ("", ":memory:"):
            # Каждая операция открывает новое соединение, а с ним новую БД
            raise ValueError("In-memory database is not supported")
        if user or password:
            logger.debug("SQLite ignores user and password")
        return cls(partial(connect, database), **kwargs)

    @wrap_db_errors
    def init_schema(self) -> None:
        with self.sql_helper.connection() as conn:
            create_schema(conn)

    def _insert_contacts(
        self, conn: sqlite3.Connection, rows: list[tuple[str, str, str]]
    ) -> None:
        if not rows:
            return
        with self.sql_helper.prepare(
            conn,
            "INSERT INTO contact (resume_uuid, type, value) VALUES (?, ?, ?)",
        ) as stmt:
            stmt.executemany(rows)

    def save(self, resume: Resume) -> None:
        # Кодируем заранее: ValueError должен случиться до записи
        rows = contact_rows(resume)

        def body(conn: sqlite3.Connection) -> None:
            with self.sql_helper.prepare(
                conn,
                "INSERT INTO resume (uuid, full_name) VALUES (:uuid, :full_name)",
            ) as stmt:
                try:
                    stmt.execute(resume.to_db())
                except sqlite3.IntegrityError as ex:
                    if ex.sqlite_errorcode in (
                        sqlite3.SQLITE_CONSTRAINT_PRIMARYKEY,
                        sqlite3.SQLITE_CONSTRAINT_UNIQUE,
                    ):
                        raise AlreadyExistsError(resume.uuid) from ex
                    raise
            self._insert_contacts(conn, rows)

        self.sql_helper.transactional_execute(body)

    def get(self, uuid: str) -> Resume:
        def body(stmt: Statement) -> Resume:
            rows = stmt.execute((uuid,)).fetchall()
            if not rows:
                raise NotFoundError(uuid)
            resume = Resume.from_db(dict(rows[0]))
            for row in rows:
                add_row_value(resume, row["type"], row["value"])
            return resume

        return self.sql_helper.execute(
            "SELECT r.uuid, r.full_name, c.type, c.value"
            " FROM resume r"
            " LEFT JOIN contact c ON r.uuid = c.resume_uuid"
            " WHERE r.uuid = ?",
            body,
        )

    def update(self, resume: Resume) -> None:
        rows = contact_rows(resume)

        def body(conn: sqlite3.Connection) -> None:
            with self.sql_helper.prepare(
                conn, "UPDATE resume SET full_name = :full_name WHERE uuid = :uuid"
            ) as stmt:
                if stmt.execute(resume.to_db()).rowcount == 0:
                    raise NotFoundError(resume.uuid)
            with self.sql_helper.prepare(
                conn, "DELETE FROM contact WHERE resume_uuid = ?"
            ) as stmt:
                stmt.execute((resume.uuid,))
            self._insert_contacts(conn, rows)

        self.sql_helper.transactional_execute(body)

    def delete(self, uuid: str) -> None:
        def body(conn: sqlite3.Connection) -> None:
            # Не полагаемся на ON DELETE CASCADE: внешние ключи в SQLite
            # работают, только если их включили для соединения
            with self.sql_helper.prepare(
                conn, "DELETE FROM contact WHERE resume_uuid = ?"
            ) as stmt:
                stmt.execute((uuid,))
            with self.sql_helper.prepare(
                conn, "DELETE FROM resume WHERE uuid = ?"
            ) as stmt:
                if stmt.execute((uuid,)).rowcount == 0:
                    raise NotFoundError(uuid)

        self.sql_helper.transactional_execute(body)

    def size(self) -> int:
        return self.sql_helper.execute(
            "SELECT count(*) FROM resume",
            lambda stmt: stmt.execute().fetchone()[0],
        )

    def clear(self) -> None:
        def body(conn: sqlite3.Connection) -> None:
            for query in ("DELETE FROM contact", "DELETE FROM resume"):
                with self.sql_helper.prepare(conn, query) as stmt:
                    stmt.execute()

        self.sql_helper.transactional_execute(body)

    def get_all_sorted(self) -> list[Resume]:
        def body(conn: sqlite3.Connection) -> list[Resume]:
            resumes: dict[str, Resume] = {}
            with self.sql_helper.prepare(
                conn, "SELECT uuid, full_name FROM resume"
            ) as stmt:
                for row in stmt.execute():
                    resumes[row["uuid"]] = Resume.from_db(dict(row))
            with self.sql_helper.prepare(
                conn, "SELECT resume_uuid, type, value FROM contact"
            ) as stmt:
                for row in stmt.execute():
                    try:
                        resume = resumes[row["resume_uuid"]]
                    except KeyError:
                        raise StorageAccessError(
                            f"Contact row references missing resume"
                            f" {row['resume_uuid']!r}"
                        ) from None
                    add_row_value(resume, row["type"], row["value"])
            return sorted(resumes.values(), key=Resume.sort_key)

        return self.sql_helper.transactional_execute(body)
