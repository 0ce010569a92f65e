"""
The Sequence View.

A `SequenceView` is a non-owning pair of cursors `[start, end)` over storage
that somebody else owns. It is the currency every operation in lazyrange
consumes and produces: chain methods (`map`, `filter`, `split`, `tile`, ...)
return new views over adaptor cursors without touching any element, while the
terminal methods (`reduce`, `fold`, `copy_to`, `each`) walk the cursors.

Views are immutable; `start()` and `end()` return clones of the cursors so
callers can advance them freely.
"""

from collections.abc import Callable, Iterator
from typing import Any

from lazyrange.lib import ops
from lazyrange.lib.contract import require
from lazyrange.lib.cursor import Cursor, distance


class SequenceView:
    """A lazily evaluated range of elements between two cursors."""

    __slots__ = ("_start", "_end")

    def __init__(self, start: Cursor, end: Cursor):
        if type(start) is not type(end):
            raise TypeError(
                f"view cursors must share a type, got {type(start).__name__} and {type(end).__name__}"
            )
        require(start <= end, "view start must not pass its end")

        self._start = start
        self._end = end

    def start(self) -> Cursor:
        """Cursor at the first element."""
        return self._start.clone()

    def end(self) -> Cursor:
        """Cursor one past the last element."""
        return self._end.clone()

    def size(self) -> int:
        """Number of elements iteration yields."""
        return distance(self._start, self._end)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[Any]:
        cur = self._start.clone()
        cur.settle()
        while cur != self._end:
            yield cur.deref()
            cur.advance()
            cur.settle()

    def __str__(self) -> str:
        return " ".join(str(e) for e in self)

    def __repr__(self) -> str:
        return f"SequenceView({self._start!r}, {self._end!r})"

    # Lazy chain methods

    def map(self, fn: Callable[[Any], Any]) -> "SequenceView":
        return ops.map(fn, self)

    def filter(self, predicate: Callable[[Any], bool]) -> "SequenceView":
        return ops.filter(predicate, self)

    def as_type(self, target: Callable[[Any], Any]) -> "SequenceView":
        return ops.as_type(target, self)

    def take(self, n: int) -> "SequenceView":
        return ops.take(self, n)

    def drop(self, n: int = 1) -> "SequenceView":
        return ops.drop(self, n)

    def tail(self, n: int) -> "SequenceView":
        return ops.tail(self, n)

    def tile(self, length: int) -> "SequenceView":
        return ops.tile(self, length)

    def split(self, delimiter: Any) -> "SequenceView":
        return ops.split(self, delimiter)

    # Terminal methods

    def reduce(self, fn: Callable[[Any, Any], Any]) -> Any:
        return ops.reduce(fn, self)

    def fold(self, fn: Callable[[Any, Any], Any], init: Any) -> Any:
        return ops.fold(fn, init, self)

    def copy_to(self, other) -> None:
        ops.copy_to(self, other)

    def each(self, fn: Callable[[Any], Any]) -> None:
        ops.each(fn, self)
