"""Pytest configuration and fixtures."""

from functools import partial

import pytest

from resume_storage.storage import (
    ArrayStorage,
    ContactType,
    ListSection,
    Resume,
    SectionType,
    SqlStorage,
    TextSection,
    connect,
)


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "resumes.sqlite3"


@pytest.fixture
def connection_factory(db_path):
    return partial(connect, db_path)


@pytest.fixture
def sql_storage(connection_factory):
    return SqlStorage(connection_factory)


@pytest.fixture
def array_storage():
    return ArrayStorage()


@pytest.fixture(params=["array", "sql"])
def storage(request):
    """Каждый тест контракта прогоняется на обоих бэкендах."""
    return request.getfixturevalue(f"{request.param}_storage")


@pytest.fixture
def make_resume():
    def factory(uuid="uuid-1", full_name="Иван Иванов", **kwargs):
        return Resume(uuid=uuid, full_name=full_name, **kwargs)

    return factory


@pytest.fixture
def full_resume(make_resume):
    """Резюме со всеми видами контактов и секций."""
    return make_resume(
        uuid="uuid-full",
        full_name="Григорий Кислин",
        contacts={
            ContactType.PHONE: "+7(921) 855-0482",
            ContactType.SKYPE: "grigory.kislin",
            ContactType.MAIL: "gkislin@yandex.ru",
            ContactType.GITHUB: "https://github.com/gkislin",
        },
        sections={
            SectionType.OBJECTIVE: TextSection(
                "Ведущий стажировок и корпоративного обучения"
            ),
            SectionType.PERSONAL: TextSection("Аналитический склад ума"),
            SectionType.ACHIEVEMENT: ListSection(["A", "B", "C"]),
            SectionType.QUALIFICATIONS: ListSection(
                ["Python, SQL", "Git, Docker"]
            ),
        },
    )
