"""
Cast integers to float, square them, and copy the result into a preallocated
array without any intermediate list.
"""

from array import array

from lazyrange import view
from lazyrange.lib.config import Config


def execute() -> None:
    count = Config.get("demo", "count", 18)
    sep = Config.get("display", "separator", " ")

    values = array("i", range(count))
    out = array("d", bytes(8 * count))

    view(values).as_type(float).map(lambda e: e * e).copy_to(out)
    print(sep.join(f"{e:g}" for e in out))
