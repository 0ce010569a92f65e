"""
Adaptor cursors.

Each adaptor wraps another cursor and redefines what dereferencing and
advancing mean: `MapCursor` transforms elements, `FilterCursor` skips them,
`SplitCursor` and `TileCursor` regroup them into sub-views, and `IotaCursor`
generates integers without any backing storage.
"""

from collections.abc import Callable
from typing import Any

from lazyrange.lib import sequence
from lazyrange.lib.contract import require
from lazyrange.lib.cursor import Cursor, Tier


class MapCursor(Cursor):
    """Applies `fn` to each element of `inner` on dereference."""

    def __init__(self, inner: Cursor, fn: Callable[[Any], Any]):
        self.inner = inner
        self.fn = fn

    @property
    def tier(self) -> Tier:
        return self.inner.tier

    @property
    def position(self) -> Any:
        return self.inner.position

    def deref(self) -> Any:
        return self.fn(self.inner.deref())

    def settle(self) -> None:
        self.inner.settle()

    def advance(self) -> "MapCursor":
        self.inner.advance()
        return self

    def retreat(self) -> "MapCursor":
        self.inner.retreat()
        return self

    def offset(self, n: int) -> "MapCursor":
        return MapCursor(self.inner + n, self.fn)

    def distance_from(self, other: "MapCursor") -> int:
        return self.inner - other.inner

    def clone(self) -> "MapCursor":
        return MapCursor(self.inner.clone(), self.fn)


class FilterCursor(Cursor):
    """
    Yields only the elements of `inner` for which `predicate` holds.

    The predicate is evaluated lazily: neither construction nor `advance`
    looks at elements. `settle()` skips failing elements and is invoked by
    `deref()` and by iteration, so reading a filter cursor may move it.
    """

    def __init__(self, inner: Cursor, end: Cursor, predicate: Callable[[Any], bool]):
        self.inner = inner
        self.end = end
        self.predicate = predicate

    @property
    def position(self) -> Any:
        return self.inner.position

    def settle(self) -> None:
        self.inner.settle()
        while self.inner != self.end and not self.predicate(self.inner.deref()):
            self.inner.advance()
            self.inner.settle()

    def deref(self) -> Any:
        self.settle()
        require(self.inner != self.end, "filter cursor dereferenced at its end")
        return self.inner.deref()

    def advance(self) -> "FilterCursor":
        if self.inner != self.end:
            self.inner.advance()
        return self

    def clone(self) -> "FilterCursor":
        return FilterCursor(self.inner.clone(), self.end, self.predicate)


class SplitCursor(Cursor):
    """
    Yields the sub-views of `inner` separated by `delimiter`.

    The end of the current segment (the lookahead) is found on the first
    dereference and cached until the cursor advances, so repeated reads of
    the same segment do not rescan. Segments may be empty. Once the final
    segment has been consumed the cursor is `finished`; this flag is part of
    the position so that a trailing delimiter still yields one empty segment
    before the cursor compares equal to the end sentinel.
    """

    def __init__(self, inner: Cursor, end: Cursor, delimiter: Any, finished: bool = False):
        self.inner = inner
        self.end = end
        self.delimiter = delimiter
        self.finished = finished
        self._lookahead = None

    @property
    def position(self) -> tuple:
        return (self.inner.position, self.finished)

    def _scan(self) -> Cursor:
        """Locate (once per segment) the delimiter or end closing the current segment."""

        if self._lookahead is None:
            la = self.inner.clone()
            la.settle()
            while la != self.end and la.deref() != self.delimiter:
                la.advance()
                la.settle()
            self._lookahead = la
        return self._lookahead

    def deref(self) -> "sequence.SequenceView":
        require(not self.finished, "split cursor dereferenced at its end")
        return sequence.SequenceView(self.inner.clone(), self._scan().clone())

    def advance(self) -> "SplitCursor":
        if self.finished:
            return self

        la = self._scan()
        if la == self.end:
            self.inner = la
            self.finished = True
        else:
            # skip the delimiter itself
            self.inner = la.clone().advance()
        self._lookahead = None
        return self

    def clone(self) -> "SplitCursor":
        other = SplitCursor(self.inner.clone(), self.end, self.delimiter, self.finished)
        if self._lookahead is not None:
            other._lookahead = self._lookahead.clone()
        return other


class TileCursor(Cursor):
    """Yields consecutive fixed-length sub-views `[start, stop)` of the inner cursor."""

    def __init__(self, start: Cursor, stop: Cursor):
        self.start = start
        self.stop = stop

    @property
    def tier(self) -> Tier:
        return self.start.tier

    @property
    def position(self) -> Any:
        return self.start.position

    @property
    def length(self) -> int:
        return self.stop - self.start

    def deref(self) -> "sequence.SequenceView":
        return sequence.SequenceView(self.start.clone(), self.stop.clone())

    def advance(self) -> "TileCursor":
        length = self.length
        self.start = self.stop
        self.stop = self.stop + length
        return self

    def retreat(self) -> "TileCursor":
        length = self.length
        self.stop = self.start
        self.start = self.start - length
        return self

    def offset(self, n: int) -> "TileCursor":
        shift = n * self.length
        return TileCursor(self.start + shift, self.stop + shift)

    def distance_from(self, other: "TileCursor") -> int:
        length = self.length
        d = self.start - other.start
        require(length == other.length, "tile distance requires equal tile lengths")
        require(d % length == 0, "tile distance requires tile-aligned cursors")
        return d // length

    def clone(self) -> "TileCursor":
        return TileCursor(self.start.clone(), self.stop.clone())


class IotaCursor(Cursor):
    """Generates `value, value + stride, value + 2 * stride, ...` without storage."""

    tier = Tier.RANDOM_ACCESS

    def __init__(self, value: int, stride: int = 1):
        self.value = value
        self.stride = stride

    @property
    def position(self) -> int:
        # descending sequences still order start <= end
        return self.value if self.stride > 0 else -self.value

    def deref(self) -> int:
        return self.value

    def advance(self) -> "IotaCursor":
        self.value += self.stride
        return self

    def retreat(self) -> "IotaCursor":
        self.value -= self.stride
        return self

    def offset(self, n: int) -> "IotaCursor":
        return IotaCursor(self.value + n * self.stride, self.stride)

    def distance_from(self, other: "IotaCursor") -> int:
        require(self.stride == other.stride, f"iota distance requires equal strides ({self.stride} != {other.stride})")
        d = self.value - other.value
        require(d % self.stride == 0, f"iota distance {d} is not a multiple of stride {self.stride}")
        return d // self.stride

    def clone(self) -> "IotaCursor":
        return IotaCursor(self.value, self.stride)
