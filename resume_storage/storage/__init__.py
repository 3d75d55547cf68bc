from .array import ArrayStorage
from .base import Storage
from .errors import (
    AlreadyExistsError,
    NotFoundError,
    StorageAccessError,
    StorageError,
    StorageFullError,
)
from .models import ContactType, ListSection, Resume, SectionType, TextSection
from .sql import SqlStorage
from .sql_helper import SqlHelper, connect

__all__ = [
    "ArrayStorage",
    "Storage",
    "SqlStorage",
    "SqlHelper",
    "connect",
    "AlreadyExistsError",
    "NotFoundError",
    "StorageAccessError",
    "StorageError",
    "StorageFullError",
    "ContactType",
    "ListSection",
    "Resume",
    "SectionType",
    "TextSection",
]
