"""
Logging for lazyrange.

`Logger` writes to the `lazyrange` logger with a colored status prefix per
level. The engine only emits debug messages (failed preconditions); the CLI
reports demo progress at the other levels.
"""

import logging

from colorama import Fore, Style

SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

_PREFIXES = {
    SUCCESS: (Fore.GREEN, "[+]"),
    logging.INFO: (Fore.BLUE, "[*]"),
    logging.WARNING: (Fore.YELLOW, "[!]"),
    logging.ERROR: (Fore.RED, "[-]"),
    logging.DEBUG: (Fore.LIGHTBLACK_EX, "[>]"),
}


class Logger:
    """Class-level handle on the `lazyrange` logger."""

    _logger = None

    SUCCESS = SUCCESS
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    DEBUG = logging.DEBUG

    @classmethod
    def setup(cls, level: int) -> None:
        """
        Attach a single plain stream handler to the `lazyrange` logger.

        Calling it again replaces the handler rather than adding another.
        """

        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))

        cls._logger = logging.getLogger("lazyrange")
        cls._logger.handlers.clear()
        cls._logger.addHandler(handler)
        cls._logger.setLevel(level)

    @classmethod
    def set_level(cls, level: int) -> None:
        cls._logger.setLevel(level)

    @classmethod
    def log(cls, level: int, message: str) -> None:
        # the engine may log before any CLI has configured us
        if cls._logger is None:
            cls.setup(logging.INFO)

        color, symbol = _PREFIXES[level]
        cls._logger.log(level, f"{color}{Style.BRIGHT}{symbol}{Style.RESET_ALL} {message}")

    @classmethod
    def success(cls, message: str) -> None:
        cls.log(SUCCESS, message)

    @classmethod
    def info(cls, message: str) -> None:
        cls.log(logging.INFO, message)

    @classmethod
    def warning(cls, message: str) -> None:
        cls.log(logging.WARNING, message)

    @classmethod
    def error(cls, message: str) -> None:
        cls.log(logging.ERROR, message)

    @classmethod
    def debug(cls, message: str) -> None:
        cls.log(logging.DEBUG, message)
