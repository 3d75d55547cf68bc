from __future__ import annotations

import argparse
import logging
from typing import TYPE_CHECKING

from ..main import BaseNamespace, BaseOperation

if TYPE_CHECKING:
    from ..main import ResumeStorageTool

logger = logging.getLogger(__package__)


class Namespace(BaseNamespace):
    yes: bool


class Operation(BaseOperation):
    """Удаляет все резюме"""

    def setup_parser(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "-y",
            "--yes",
            action="store_true",
            help="Не спрашивать подтверждение",
        )

    def run(self, tool: ResumeStorageTool) -> None | int:
        if not tool.args.yes:
            answer = input(f"Delete {tool.storage.size()} resume(s)? [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                logger.warning("Cancelled")
                return 1
        tool.storage.clear()
        logger.info("Storage cleared")
