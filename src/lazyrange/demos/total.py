"""Sum a float array with `reduce`."""

from array import array

from lazyrange import view
from lazyrange.lib.config import Config
from lazyrange.lib.logger import Logger


def execute() -> None:
    count = Config.get("demo", "count", 18)

    values = array("f", (i / 2 for i in range(count)))
    total = view(values).reduce(lambda acc, e: acc + e)

    Logger.debug(f"Reduced {count} values.")
    print(f"{total:g}")
