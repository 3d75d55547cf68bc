from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING

from prettytable import PrettyTable

from ..main import BaseNamespace, BaseOperation
from ..utils import shorten

if TYPE_CHECKING:
    from ..main import ResumeStorageTool

logger = logging.getLogger(__package__)


class Namespace(BaseNamespace):
    pass


class Operation(BaseOperation):
    """Список резюме, отсортированный по ФИО"""

    __aliases__: list[str] = ["ls"]

    def setup_parser(self, parser: argparse.ArgumentParser) -> None:
        pass

    def run(self, tool: ResumeStorageTool) -> None:
        resumes = tool.storage.get_all_sorted()
        if not resumes:
            print("No resumes found.")
            return
        t = PrettyTable(
            field_names=["UUID", "ФИО", "Контакты", "Секции"],
            align="l",
            valign="t",
        )
        t.add_rows(
            [
                (
                    r.uuid,
                    shorten(r.full_name),
                    len(r.contacts),
                    len(r.sections),
                )
                for r in resumes
            ]
        )
        print(t)
