from __future__ import annotations

import abc

from .errors import NotFoundError
from .models import Resume


class Storage(abc.ABC):
    """Общий контракт хранилищ резюме.

    `save` падает с `AlreadyExistsError`, если резюме с таким uuid уже есть;
    `get`, `update` и `delete` падают с `NotFoundError`, если его нет.
    """

    @abc.abstractmethod
    def save(self, resume: Resume) -> None: ...

    @abc.abstractmethod
    def get(self, uuid: str) -> Resume: ...

    @abc.abstractmethod
    def update(self, resume: Resume) -> None: ...

    @abc.abstractmethod
    def delete(self, uuid: str) -> None: ...

    @abc.abstractmethod
    def size(self) -> int: ...

    @abc.abstractmethod
    def clear(self) -> None: ...

    @abc.abstractmethod
    def get_all_sorted(self) -> list[Resume]:
        """Все резюме, отсортированные по ФИО, а затем по uuid."""

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, uuid: object) -> bool:
        if not isinstance(uuid, str):
            return False
        try:
            self.get(uuid)
        except NotFoundError:
            return False
        return True
