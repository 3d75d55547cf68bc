from __future__ import annotations

from .config import Config, get_config_path
from .log import ColorHandler, RedactingFilter, setup_logger
from .string import shorten

__all__ = [
    "Config",
    "get_config_path",
    "ColorHandler",
    "RedactingFilter",
    "setup_logger",
    "shorten",
]
