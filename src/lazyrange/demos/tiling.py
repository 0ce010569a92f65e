"""
Tile an integer sequence.

`iota(count).tile(tile_length)` breaks the sequence into full tiles; with the
default 18 values and tiles of 4, values 16 and 17 are dropped.
"""

from lazyrange import iota
from lazyrange.lib.config import Config


def execute() -> None:
    count = Config.get("demo", "count", 18)
    length = Config.get("demo", "tile_length", 4)
    sep = Config.get("display", "separator", " ")

    iota(count).tile(length).each(lambda t: print(sep.join(str(e) for e in t)))
