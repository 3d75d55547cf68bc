from .base import BaseModel, mapped
from .resume import (
    LIST_DELIMITER,
    ContactType,
    ListSection,
    Resume,
    Section,
    SectionType,
    TextSection,
)

__all__ = [
    "LIST_DELIMITER",
    "BaseModel",
    "mapped",
    "ContactType",
    "ListSection",
    "Resume",
    "Section",
    "SectionType",
    "TextSection",
]
