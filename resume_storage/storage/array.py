from __future__ import annotations

import logging
from copy import deepcopy

from .base import Storage
from .errors import AlreadyExistsError, NotFoundError, StorageFullError
from .models import Resume

STORAGE_LIMIT = 10_000

logger = logging.getLogger(__package__)


class ArrayStorage(Storage):
    """Хранилище на массиве фиксированного размера.

    Поиск линейный, поэтому годится для тестов и небольших объемов. Не
    потокобезопасно: вызывать из одного потока или под внешней блокировкой.
    Хранит и отдает копии, как и SQL-хранилище: изменения объекта после
    `save` не попадают в хранилище без `update`.
    """

    def __init__(self, limit: int = STORAGE_LIMIT):
        self._storage: list[Resume | None] = [None] * limit
        self._size = 0

    @property
    def limit(self) -> int:
        return len(self._storage)

    def _find_index(self, uuid: str) -> int:
        for i in range(self._size):
            if self._storage[i].uuid == uuid:
                return i
        return -1

    def _get_index(self, uuid: str) -> int:
        if (i := self._find_index(uuid)) < 0:
            raise NotFoundError(uuid)
        return i

    def save(self, resume: Resume) -> None:
        resume.check_content()
        if self._find_index(resume.uuid) >= 0:
            raise AlreadyExistsError(resume.uuid)
        if self._size >= self.limit:
            raise StorageFullError(resume.uuid, self.limit)
        self._storage[self._size] = deepcopy(resume)
        self._size += 1
        logger.debug("saved %s (%d/%d)", resume.uuid, self._size, self.limit)

    def get(self, uuid: str) -> Resume:
        return deepcopy(self._storage[self._get_index(uuid)])

    def update(self, resume: Resume) -> None:
        resume.check_content()
        self._storage[self._get_index(resume.uuid)] = deepcopy(resume)

    def delete(self, uuid: str) -> None:
        i = self._get_index(uuid)
        # На место удаленного ставим последний, чтобы не сдвигать хвост
        self._size -= 1
        self._storage[i] = self._storage[self._size]
        self._storage[self._size] = None

    def size(self) -> int:
        return self._size

    def clear(self) -> None:
        for i in range(self._size):
            self._storage[i] = None
        self._size = 0

    def get_all(self) -> list[Resume]:
        """Резюме в порядке слотов, без пустых ячеек."""
        return deepcopy(self._storage[: self._size])

    def get_all_sorted(self) -> list[Resume]:
        return sorted(self.get_all(), key=Resume.sort_key)
