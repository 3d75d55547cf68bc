from .storage import (
    AlreadyExistsError,
    ArrayStorage,
    ContactType,
    ListSection,
    NotFoundError,
    Resume,
    SectionType,
    SqlStorage,
    Storage,
    StorageAccessError,
    StorageError,
    StorageFullError,
    TextSection,
)

__all__ = [
    "AlreadyExistsError",
    "ArrayStorage",
    "ContactType",
    "ListSection",
    "NotFoundError",
    "Resume",
    "SectionType",
    "SqlStorage",
    "Storage",
    "StorageAccessError",
    "StorageError",
    "StorageFullError",
    "TextSection",
]
