from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from functools import cached_property
from importlib import import_module
from os import getenv
from pathlib import Path
from pkgutil import iter_modules

from . import utils
from .storage import SqlStorage, StorageError
from .utils.log import setup_logger

DEFAULT_CONFIG_DIR = utils.get_config_path() / (__package__ or "").replace(
    "_", "-"
)
DEFAULT_CONFIG_FILENAME = "config.json"
DEFAULT_LOG_FILENAME = "log.txt"
DEFAULT_DATABASE_FILENAME = "resumes.sqlite3"
DATABASE_ENV = "RESUME_STORAGE_DATABASE"

logger = logging.getLogger(__package__)


class BaseOperation:
    def setup_parser(self, parser: argparse.ArgumentParser) -> None: ...

    def run(
        self,
        tool: ResumeStorageTool,
    ) -> None | int:
        raise NotImplementedError()


OPERATIONS = "operations"


class BaseNamespace(argparse.Namespace):
    config_dir: Path | None
    verbosity: int
    database: str | None


class ResumeStorageTool:
    """Утилита для работы с хранилищем резюме.

    База данных берется из --database, переменной окружения
    RESUME_STORAGE_DATABASE или ключа database в конфиге.
    """

    class ArgumentFormatter(
        argparse.ArgumentDefaultsHelpFormatter,
        argparse.RawDescriptionHelpFormatter,
    ):
        pass

    def _create_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            description=self.__doc__,
            formatter_class=self.ArgumentFormatter,
        )
        parser.add_argument(
            "-v",
            "--verbosity",
            help="При использовании от одного и более раз увеличивает количество отладочной информации в выводе",  # noqa: E501
            action="count",
            default=0,
        )
        parser.add_argument(
            "-c",
            "--config-dir",
            "--config",
            help="Путь до директории с конфигом",
            type=Path,
            default=None,
        )
        parser.add_argument(
            "--database",
            "--db",
            help="Путь до файла SQLite или URL вида sqlite:///path",
        )
        subparsers = parser.add_subparsers(help="commands")
        package_dir = Path(__file__).resolve().parent / OPERATIONS
        for _, module_name, _ in iter_modules([str(package_dir)]):
            if module_name.startswith("_"):
                continue
            mod = import_module(f"{__package__}.{OPERATIONS}.{module_name}")
            op: BaseOperation = mod.Operation()
            kebab_name = module_name.replace("_", "-")
            op_parser = subparsers.add_parser(
                kebab_name,
                aliases=getattr(op, "__aliases__", []),
                description=op.__doc__,
                formatter_class=self.ArgumentFormatter,
            )
            op_parser.set_defaults(run=op.run)
            op.setup_parser(op_parser)
        parser.set_defaults(run=None)
        return parser

    def __init__(self, argv: Sequence[str] | None):
        self._parse_args(argv)

    def _parse_args(self, argv: Sequence[str] | None) -> None:
        self._parser = self._create_parser()
        self.args = self._parser.parse_args(argv, namespace=BaseNamespace())

    @cached_property
    def config_path(self) -> Path:
        return (self.args.config_dir or DEFAULT_CONFIG_DIR).resolve()

    @cached_property
    def config(self) -> utils.Config:
        return utils.Config(self.config_path / DEFAULT_CONFIG_FILENAME)

    @cached_property
    def log_file(self) -> Path:
        return self.config_path / DEFAULT_LOG_FILENAME

    @cached_property
    def database(self) -> str:
        return str(
            self.args.database
            or getenv(DATABASE_ENV)
            or self.config.get("database")
            or self.config_path / DEFAULT_DATABASE_FILENAME
        )

    @cached_property
    def storage(self) -> SqlStorage:
        logger.debug("Use database: %s", self.database)
        return SqlStorage.from_url(self.database)

    def run(self) -> None | int:
        verbosity_level = max(
            logging.DEBUG,
            logging.WARNING - self.args.verbosity * 10,
        )

        self.config_path.mkdir(
            parents=True,
            exist_ok=True,
        )
        setup_logger(logger, verbosity_level, self.log_file)

        if not self.args.run:
            self._parser.print_help(file=sys.stderr)
            return 2

        try:
            # 0 or None = success
            return self.args.run(self)
        except KeyboardInterrupt:
            logger.warning("Interrupted by user")
            return 1
        except (StorageError, ValueError) as ex:
            logger.error(ex, exc_info=True)
            return 1
        except Exception as ex:
            logger.exception(ex)
            return 1


def main(argv: Sequence[str] | None = None) -> None | int:
    return ResumeStorageTool(argv).run()
