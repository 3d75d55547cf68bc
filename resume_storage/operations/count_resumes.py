from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from ..main import BaseNamespace, BaseOperation

if TYPE_CHECKING:
    from ..main import ResumeStorageTool


class Namespace(BaseNamespace):
    pass


class Operation(BaseOperation):
    """Выведет количество резюме в хранилище"""

    def setup_parser(self, parser: argparse.ArgumentParser) -> None:
        pass

    def run(self, tool: ResumeStorageTool) -> None:
        print(tool.storage.size())
