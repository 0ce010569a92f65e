"""
Configuration for the lazyrange CLI and demos.

Settings live in an INI file (`lazyrange.cfg`) with three sections:

- `[display]`: `separator` placed between rendered elements.
- `[demo]`: `count`, `tile_length`, `words` and `text` inputs for the demos.
- `[dev]`: `log_level` (a level name) and `stack_trace_errors`.

Every key is optional; each value is read with the `configparser` getter
matching the type of its default. The engine itself never reads any of this.
"""

import configparser
import logging
import os
from pathlib import Path
from typing import Any, ClassVar

from lazyrange.lib.logger import Logger

DEFAULTS: dict[str, dict[str, Any]] = {
    "display": {"separator": " "},
    "demo": {
        "count": 18,
        "tile_length": 4,
        "words": "This is some String.",
        "text": "This is\nsome text.\nThere's also\nsome more text right here.",
    },
    "dev": {"log_level": "info", "stack_trace_errors": False},
}


def _find_config() -> str | None:
    """First existing file of `$LAZYRANGE_CONFIG`, the repo config, the user config."""

    candidates = [
        os.getenv("LAZYRANGE_CONFIG"),
        Path(__file__).resolve().parents[3] / "config" / "lazyrange.cfg",
        Path.home() / ".config" / "lazyrange" / "lazyrange.cfg",
    ]
    for path in candidates:
        if path and Path(path).is_file():
            return str(path)
    return None


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"'{name}' is not a log level")
    return level


def _read(parser: configparser.ConfigParser, section: str, key: str, default: Any) -> Any:
    if not parser.has_option(section, key):
        return default
    if isinstance(default, bool):
        return parser.getboolean(section, key)
    if isinstance(default, int):
        return parser.getint(section, key)
    return parser.get(section, key).strip() or default


class Config:
    """Settings loaded once by the CLI and read by the demos."""

    _data: ClassVar[dict[str, dict[str, Any]] | None] = None

    @classmethod
    def load(cls, filepath: str | None = None) -> None:
        """
        Load settings from `filepath` (or the first config found), falling
        back to `DEFAULTS` for anything missing.

        Raises:
            ValueError: If `[dev] log_level` is not a level name or a typed
                value cannot be parsed.
        """

        filepath = filepath or _find_config()
        parser = configparser.ConfigParser(interpolation=None, inline_comment_prefixes=("#", ";"))

        if not filepath or not os.path.exists(filepath):
            Logger.debug("No config file found. Using defaults.")
        elif not filepath.endswith(".cfg"):
            Logger.warning(f"Ignoring '{filepath}': config files end with .cfg.")
        else:
            try:
                parser.read(filepath, encoding="utf-8")
            except configparser.Error as e:
                Logger.warning(f"Ignoring invalid config '{filepath}': {e}")
                parser = configparser.ConfigParser(interpolation=None)

        data = {
            section: {key: _read(parser, section, key, default) for key, default in keys.items()}
            for section, keys in DEFAULTS.items()
        }
        data["dev"]["log_level"] = _level(data["dev"]["log_level"])
        cls._data = data

    @classmethod
    def get(cls, section: str, key: str, default: Any = None) -> Any:
        """
        Look up a loaded setting, returning `default` for unknown keys.

        Raises:
            RuntimeError: If `load()` has not been called.
        """

        if cls._data is None:
            raise RuntimeError("Configuration is not loaded. Call `Config.load()` first.")

        return cls._data.get(section, {}).get(key, default)
