from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import TYPE_CHECKING, TextIO

from ..main import BaseNamespace, BaseOperation
from ..storage import Resume

if TYPE_CHECKING:
    from ..main import ResumeStorageTool

logger = logging.getLogger(__package__)


class Namespace(BaseNamespace):
    file: TextIO | None
    update: bool


class Operation(BaseOperation):
    """Сохраняет резюме из JSON-файла или stdin.

    Формат: {"uuid": "...", "full_name": "...", "contacts": {"PHONE": "..."},
    "sections": {"OBJECTIVE": "...", "ACHIEVEMENT": ["...", "..."]}}
    """

    def setup_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "file",
            nargs="?",
            type=argparse.FileType("r", encoding="utf-8"),
            help="JSON-файл с резюме. Если не указан, читается stdin",
        )
        parser.add_argument(
            "-u",
            "--update",
            action="store_true",
            help="Обновить существующее резюме вместо добавления",
        )

    @staticmethod
    def _load(fp: TextIO | None) -> dict:
        if fp is None:
            return json.load(sys.stdin)
        with fp:
            return json.load(fp)

    def run(self, tool: ResumeStorageTool) -> None:
        try:
            data = self._load(tool.args.file)
        except json.JSONDecodeError as ex:
            raise ValueError(f"Invalid JSON: {ex}") from ex
        resume = Resume.from_dict(data)
        if tool.args.update:
            tool.storage.update(resume)
            logger.info("Resume %s updated", resume.uuid)
        else:
            tool.storage.save(resume)
            logger.info("Resume %s saved", resume.uuid)
        print(resume.uuid)
