from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING

from ..main import BaseNamespace, BaseOperation

if TYPE_CHECKING:
    from ..main import ResumeStorageTool

logger = logging.getLogger(__package__)


class Namespace(BaseNamespace):
    uuid: list[str]


class Operation(BaseOperation):
    """Удаляет резюме вместе с контактами и секциями"""

    __aliases__: list[str] = ["rm"]

    def setup_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument("uuid", nargs="+", help="Идентификаторы резюме")

    def run(self, tool: ResumeStorageTool) -> None:
        for uuid in tool.args.uuid:
            tool.storage.delete(uuid)
            logger.info("Resume %s deleted", uuid)
