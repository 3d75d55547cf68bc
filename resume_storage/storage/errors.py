from __future__ import annotations

import sqlite3
from functools import wraps

__all__ = (
    "StorageError",
    "NotFoundError",
    "AlreadyExistsError",
    "StorageFullError",
    "StorageAccessError",
    "wrap_db_errors",
)


class StorageError(Exception):
    def __init__(self, message: str, uuid: str | None = None) -> None:
        super().__init__(message)
        self.uuid = uuid


class NotFoundError(StorageError):
    def __init__(self, uuid: str) -> None:
        super().__init__(f"Resume {uuid!r} not found", uuid)


class AlreadyExistsError(StorageError):
    def __init__(self, uuid: str) -> None:
        super().__init__(f"Resume {uuid!r} already exists", uuid)


class StorageFullError(StorageError):
    def __init__(self, uuid: str | None = None, limit: int | None = None):
        super().__init__(f"Storage is full (limit: {limit})", uuid)
        self.limit = limit


class StorageAccessError(StorageError):
    pass


def wrap_db_errors(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except sqlite3.Error as e:
            raise StorageAccessError(
                f"Database error in {func.__name__}: {e}"
            ) from e

    return wrapper
