"""Filter, map and cast a lazy integer sequence; nothing runs until `each`."""

from lazyrange import iota
from lazyrange.lib.config import Config


def execute() -> None:
    sep = Config.get("display", "separator", " ")

    (
        iota(10)
        .filter(lambda e: e > 3)
        .map(lambda e: e * 3 + 2)
        .as_type(float)
        .map(lambda e: e**2.2)
        .each(lambda e: print(f"{e:g}", end=sep))
    )
    print()
