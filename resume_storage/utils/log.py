import enum
import logging
import re
from enum import auto
from logging.handlers import RotatingFileHandler
from os import PathLike
from typing import Callable

# 10MB
MAX_LOG_SIZE = 10 << 20


class Color(enum.Enum):
    BLACK = 30
    RED = auto()
    GREEN = auto()
    YELLOW = auto()
    BLUE = auto()
    PURPLE = auto()
    CYAN = auto()
    WHITE = auto()

    def __str__(self) -> str:
        return str(self.value)


class ColorHandler(logging.StreamHandler):
    _color_map = {
        "CRITICAL": Color.RED,
        "ERROR": Color.RED,
        "WARNING": Color.YELLOW,
        "INFO": Color.GREEN,
        "DEBUG": Color.BLUE,
    }

    def format(self, record: logging.LogRecord) -> str:
        orig_exc_info = record.exc_info

        # Детали ошибки показываем только при отладке
        if self.level > logging.DEBUG:
            record.exc_info = None

        message = super().format(record)
        # Иначе в файловом логе не будет трейсбека
        record.exc_info = orig_exc_info
        isatty = getattr(self.stream, "isatty", None)
        if isatty and isatty():
            color_code = self._color_map.get(record.levelname, Color.WHITE)
            return f"\033[{color_code}m{message}\033[0m"
        return message


class RedactingFilter(logging.Filter):
    def __init__(
        self,
        patterns: list[str],
        # По умолчанию количество звездочек равно оригинальной строке
        placeholder: str | Callable = lambda m: "*" * len(m.group(0)),
    ):
        super().__init__()
        self.pattern = (
            re.compile(f"({'|'.join(patterns)})") if patterns else None
        )
        self.placeholder = placeholder

    def filter(self, record: logging.LogRecord) -> bool:
        if self.pattern:
            msg = record.getMessage()
            msg = self.pattern.sub(self.placeholder, msg)
            record.msg, record.args = msg, ()

        return True


def setup_logger(
    logger: logging.Logger,
    verbosity_level: int,
    log_file: PathLike | None = None,
) -> None:
    # Повторная настройка не должна дублировать вывод
    for h in logger.handlers[:]:
        logger.removeHandler(h)
        h.close()

    # В лог-файл пишем все!
    logger.setLevel(logging.DEBUG)
    color_handler = ColorHandler()
    # [E] Resume 'foo' not found
    color_handler.setFormatter(
        logging.Formatter("[%(levelname).1s] %(message)s")
    )
    color_handler.setLevel(verbosity_level)
    logger.addHandler(color_handler)

    if log_file is None:
        return

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=MAX_LOG_SIZE,
        backupCount=1,
        encoding="utf-8",
    )
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    )
    file_handler.setLevel(logging.DEBUG)
    # Телефоны и почта из контактов не должны оседать в логе
    file_handler.addFilter(
        RedactingFilter(
            [
                r"[\w.+-]+@[\w-]+\.[\w.-]+",
                r"\+?\d[\d\s()-]{8,}\d",
            ]
        )
    )
    logger.addHandler(file_handler)
