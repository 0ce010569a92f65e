"""
# lazyrange Technical Documentation

lazyrange is a composable, lazily evaluated sequence-processing engine. A
`SequenceView` is a pair of cursors over storage you already own (a list, a
string, a bytearray, an array) or over a generated integer sequence, and
adaptor functions chain on top of it without copying anything:

    >>> from lazyrange import iota
    >>> list(iota(10).filter(lambda e: e > 3).map(lambda e: e * 3 + 2))
    [14, 17, 20, 23, 26, 29]

---

## Concepts

- **Cursor**: a position over a sequence (`lazyrange.lib.cursor`).
- **SequenceView**: a non-owning `[start, end)` pair of cursors.
- **Adaptors**: map, filter, split, tile and iota cursors
  (`lazyrange.lib.adaptors`).
- **Terminal operations**: `reduce`, `fold`, `copy_to` and `each` are the only
  calls that walk a view; everything else is lazy.

Broken preconditions (reducing an empty view, copying between views of
different sizes, ...) raise `PreconditionError`.

---

## How to Use This Documentation

- Browse the **modules** listed in the sidebar to explore available APIs.
- Private helpers (`_method`, `_Class`) are minimally documented.
- Demo modules under `lazyrange.demos` are runnable with `lazyrange demo <name>`.
"""

from importlib.metadata import version

from lazyrange.lib.contract import PreconditionError
from lazyrange.lib.cursor import Cursor, IndexCursor, Tier
from lazyrange.lib.ops import (
    as_type,
    by_line,
    copy_to,
    drop,
    each,
    filter,
    fold,
    iota,
    map,
    reduce,
    split,
    tail,
    take,
    tile,
    view,
)
from lazyrange.lib.sequence import SequenceView

__version__ = version("lazyrange")

__all__ = [
    "Cursor",
    "IndexCursor",
    "PreconditionError",
    "SequenceView",
    "Tier",
    "as_type",
    "by_line",
    "copy_to",
    "drop",
    "each",
    "filter",
    "fold",
    "iota",
    "map",
    "reduce",
    "split",
    "tail",
    "take",
    "tile",
    "view",
]
