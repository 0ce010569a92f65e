"""
Cursor contract for lazyrange.

A cursor is a position over a sequence. Every cursor can be dereferenced,
advanced one step, cloned, and compared against another cursor of the same
type through its `position`. Cursors come in two capability tiers:

- `Tier.FORWARD`: deref / advance / compare.
- `Tier.RANDOM_ACCESS`: additionally `retreat`, `offset(n)` (spelled
  `cursor + n` and `cursor - n`) and `distance_from(other)` (spelled
  `cursor - other`).

The comparison operators and the tier-guarded arithmetic operators are
implemented once on `Cursor`; concrete cursors only provide the primitive
moves. Cursors are mutable (advance moves them in place), which is why
`SequenceView` always hands out clones.
"""

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any

from lazyrange.lib.contract import require


class Tier(IntEnum):
    """Capability tier a cursor satisfies."""

    FORWARD = 1
    RANDOM_ACCESS = 2


class Cursor(ABC):
    """Base class for every cursor type."""

    tier = Tier.FORWARD

    @abstractmethod
    def deref(self) -> Any:
        """Return the element at the current position."""

    @abstractmethod
    def advance(self) -> "Cursor":
        """Move one step forward in place and return self."""

    @abstractmethod
    def clone(self) -> "Cursor":
        """Return an independent copy of this cursor."""

    @property
    @abstractmethod
    def position(self) -> Any:
        """The comparable part of the cursor; equality and ordering use only this."""

    def settle(self) -> None:
        """
        Advance internally until the cursor rests on a yieldable element.

        Plain cursors are always settled. Lazy adaptors (filter) skip elements
        here, so peeking at a cursor may move it. Iteration calls this before
        comparing against the end sentinel.
        """

    def assign(self, value: Any) -> None:
        raise TypeError(f"{type(self).__name__} is read-only")

    def retreat(self) -> "Cursor":
        raise TypeError(f"{type(self).__name__} cannot move backward")

    def offset(self, n: int) -> "Cursor":
        raise TypeError(f"{type(self).__name__} does not support jumps")

    def distance_from(self, other: "Cursor") -> int:
        raise TypeError(f"{type(self).__name__} does not support subtraction")

    def __add__(self, n: int) -> "Cursor":
        require_tier(self, Tier.RANDOM_ACCESS, "cursor + n")
        return self.offset(n)

    def __sub__(self, other):
        require_tier(self, Tier.RANDOM_ACCESS, "cursor - x")
        if isinstance(other, Cursor):
            return self.distance_from(other)
        return self.offset(-other)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.position == other.position

    def __ne__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.position != other.position

    def __lt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.position < other.position

    def __le__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.position <= other.position

    def __gt__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.position > other.position

    def __ge__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.position >= other.position

    __hash__ = None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} at {self.position!r}>"


class IndexCursor(Cursor):
    """
    Random-access, assignable cursor over an indexable storage object.

    The storage is anything with `__len__` and `__getitem__` (`list`, `str`,
    `bytes`, `bytearray`, `array.array`, ...). It is referenced, never copied.
    """

    tier = Tier.RANDOM_ACCESS

    def __init__(self, storage, index: int = 0):
        self.storage = storage
        self.index = index

    @property
    def position(self) -> int:
        return self.index

    def _check_bounds(self) -> None:
        # negative indexes would silently wrap around
        if not 0 <= self.index < len(self.storage):
            raise IndexError(f"cursor index {self.index} out of range for storage of size {len(self.storage)}")

    def deref(self) -> Any:
        self._check_bounds()
        return self.storage[self.index]

    def assign(self, value: Any) -> None:
        self._check_bounds()
        self.storage[self.index] = value

    def advance(self) -> "IndexCursor":
        self.index += 1
        return self

    def retreat(self) -> "IndexCursor":
        self.index -= 1
        return self

    def offset(self, n: int) -> "IndexCursor":
        return IndexCursor(self.storage, self.index + n)

    def distance_from(self, other: "IndexCursor") -> int:
        return self.index - other.index

    def clone(self) -> "IndexCursor":
        return IndexCursor(self.storage, self.index)


def require_tier(cursor: Cursor, tier: Tier, operation: str) -> None:
    """
    Check that `cursor` satisfies at least `tier`.

    Raises:
        TypeError: If the cursor is of a lower tier.
    """

    if cursor.tier < tier:
        raise TypeError(f"{operation} requires a {tier.name.lower()} cursor, got {type(cursor).__name__}")


def distance(first: Cursor, last: Cursor) -> int:
    """
    Number of steps iteration takes to get from `first` to `last`.

    Random-access cursors subtract. Forward cursors are walked on clones, with
    `settle()` between steps so the count matches what iteration yields.
    """

    if first.tier >= Tier.RANDOM_ACCESS:
        return last - first

    cur = first.clone()
    cur.settle()
    count = 0
    while cur != last:
        cur.advance()
        cur.settle()
        count += 1
    return count


def next_cursor(cursor: Cursor, n: int) -> Cursor:
    """
    Return a new cursor `n` iteration steps after `cursor`.

    Forward cursors are returned settled, so a lazy filter cursor used as the
    end of a view cannot be skipped over by iteration.
    """

    require(n >= 0, f"cannot step a cursor by a negative count ({n})")

    if cursor.tier >= Tier.RANDOM_ACCESS:
        return cursor + n

    cur = cursor.clone()
    for _ in range(n):
        cur.settle()
        cur.advance()
    cur.settle()
    return cur
