"""Split a multi-line text with `by_line`."""

from lazyrange import by_line
from lazyrange.lib.config import Config


def execute() -> None:
    text = Config.get("demo", "text", "")

    by_line(text).each(lambda line: print("".join(line)))
