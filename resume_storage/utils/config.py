from __future__ import annotations

import json
import platform
from functools import cache
from os import getenv
from pathlib import Path


@cache
def get_config_path() -> Path:
    match platform.system():
        case "Windows":
            return Path(getenv("APPDATA", Path.home() / "AppData" / "Roaming"))
        case "Darwin":
            return Path.home() / "Library" / "Application Support"
        case _:
            return Path(getenv("XDG_CONFIG_HOME", Path.home() / ".config"))


class Config(dict):
    """Настройки из config.json. Файла может и не быть."""

    def __init__(self, config_path: str | Path):
        super().__init__()
        config_path = Path(config_path)
        if config_path.exists():
            with config_path.open("r", encoding="utf-8", errors="replace") as f:
                self.update(json.load(f))

    __getitem__ = dict.get
