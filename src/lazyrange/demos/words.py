"""Split a string into words on single spaces."""

from lazyrange import view
from lazyrange.lib.config import Config


def execute() -> None:
    words = Config.get("demo", "words", "This is some String.")

    view(words).split(" ").each(lambda part: print("".join(part)))
