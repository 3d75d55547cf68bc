from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping, Union
from uuid import uuid4

from .base import BaseModel, mapped


@dataclass
class TextSection:
    content: str

    def to_dict(self) -> str:
        return self.content


@dataclass
class ListSection:
    items: list[str] = field(default_factory=list)

    def to_dict(self) -> list[str]:
        return list(self.items)


Section = Union[TextSection, ListSection]

# Разделитель элементов списочных секций в БД. Сами элементы его содержать не
# могут, а список из одной пустой строки неотличим от пустого списка
LIST_DELIMITER = "\n"


class ContactType(enum.Enum):
    ADDRESS = "Адрес"
    PHONE = "Телефон"
    SKYPE = "Skype"
    MAIL = "Почта"
    LINKEDIN = "Профиль LinkedIn"
    GITHUB = "Профиль GitHub"
    STACKOVERFLOW = "Профиль Stackoverflow"

    @property
    def title(self) -> str:
        return self.value


class SectionType(enum.Enum):
    OBJECTIVE = ("Позиция", TextSection)
    PERSONAL = ("Личные качества", TextSection)
    ACHIEVEMENT = ("Достижения", ListSection)
    QUALIFICATIONS = ("Квалификация", ListSection)

    def __init__(self, title: str, section_class: type[Section]):
        self.title = title
        # Форма содержимого задается типом секции, а не значением
        self.section_class = section_class

    @property
    def is_list(self) -> bool:
        return self.section_class is ListSection


class Resume(BaseModel):
    """Резюме: идентификатор, ФИО, контакты и секции."""

    uuid: str = mapped(default_factory=lambda: str(uuid4()))
    full_name: str
    contacts: dict[ContactType, str] = mapped(column=False, default_factory=dict)
    sections: dict[SectionType, Section] = mapped(
        column=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        if not self.uuid:
            raise ValueError("resume uuid must not be empty")
        for section_type, section in self.sections.items():
            self._check_section(section_type, section)

    @staticmethod
    def _check_section(section_type: SectionType, section: Section) -> None:
        if not isinstance(section, section_type.section_class):
            raise TypeError(
                f"{section_type.name} expects"
                f" {section_type.section_class.__name__},"
                f" got {type(section).__name__}"
            )

    def check_content(self) -> None:
        """Списочные секции должны одинаково читаться из любого хранилища."""
        for section_type, section in self.sections.items():
            if not isinstance(section, ListSection):
                continue
            if section.items == [""]:
                raise ValueError(
                    f"{section_type.name} must not consist of a single empty item"
                )
            for item in section.items:
                if LIST_DELIMITER in item:
                    raise ValueError(
                        f"{section_type.name} item must not contain"
                        f" {LIST_DELIMITER!r}: {item!r}"
                    )

    def sort_key(self) -> tuple[str, str]:
        return self.full_name, self.uuid

    def __lt__(self, other: Resume) -> bool:
        if not isinstance(other, Resume):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def add_contact(self, contact_type: ContactType, value: str) -> None:
        self.contacts[contact_type] = value

    def add_section(self, section_type: SectionType, section: Section) -> None:
        self._check_section(section_type, section)
        self.sections[section_type] = section

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "full_name": self.full_name,
            "contacts": {k.name: v for k, v in self.contacts.items()},
            "sections": {k.name: v.to_dict() for k, v in self.sections.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Resume:
        """Создает резюме из словаря вида, который возвращает `to_dict`."""
        if not data.get("full_name"):
            raise ValueError("full_name is required")
        try:
            contacts = {
                ContactType[k]: str(v)
                for k, v in (data.get("contacts") or {}).items()
            }
            sections = {}
            for k, v in (data.get("sections") or {}).items():
                section_type = SectionType[k]
                if section_type.is_list:
                    if isinstance(v, str):
                        raise ValueError(f"{k} expects a list of strings")
                    sections[section_type] = ListSection([str(i) for i in v])
                else:
                    sections[section_type] = TextSection(str(v))
        except KeyError as ex:
            raise ValueError(f"unknown contact or section type: {ex}") from ex
        kwargs: dict[str, Any] = {}
        if data.get("uuid"):
            kwargs["uuid"] = str(data["uuid"])
        return cls(
            full_name=str(data["full_name"]),
            contacts=contacts,
            sections=sections,
            **kwargs,
        )
