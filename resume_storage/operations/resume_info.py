from __future__ import annotations

import argparse
import json
import logging
from typing import TYPE_CHECKING

from ..main import BaseNamespace, BaseOperation

if TYPE_CHECKING:
    from ..main import ResumeStorageTool

logger = logging.getLogger(__package__)


class Namespace(BaseNamespace):
    uuid: str


class Operation(BaseOperation):
    """Выведет резюме в формате JSON"""

    __aliases__: list[str] = ["show"]

    def setup_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("uuid", help="Идентификатор резюме")

    def run(self, tool: ResumeStorageTool) -> None:
        resume = tool.storage.get(tool.args.uuid)
        print(json.dumps(resume.to_dict(), ensure_ascii=False, indent=2))
