"""
Compose the free functions directly instead of chaining methods, and
consume the result with a plain `for` loop.
"""

from array import array

from lazyrange import filter, map, view
from lazyrange.lib.config import Config


def execute() -> None:
    count = Config.get("demo", "count", 18)
    values = array("i", range(count))

    total = 0
    for e in filter(lambda e: e > 10, map(lambda e: e * e, view(values))):
        total += e

    print(total)
