"""
Composition and terminal functions.

Composition functions (`map`, `filter`, `as_type`, `split`, `by_line`,
`tile`, `iota`, `take`, `drop`, `tail`) build new `SequenceView` objects by
wrapping cursors; they never touch elements. Terminal functions (`reduce`,
`fold`, `copy_to`, `each`) walk a view once, in cursor order.

`map`, `filter` and `reduce` intentionally shadow the builtins inside this
module; import the module and call them qualified (`ops.map(...)`), or use
the `SequenceView` methods.
"""

from collections.abc import Callable, Iterable
from numbers import Integral
from typing import Any

from lazyrange.lib import adaptors, sequence
from lazyrange.lib.contract import require
from lazyrange.lib.cursor import IndexCursor, Tier, next_cursor, require_tier

_EMPTY = object()


def view(source, start: int = 0, stop: int | None = None) -> "sequence.SequenceView":
    """
    Build a view over an indexable storage object.

    Args:
        source: A `SequenceView` or any object with `__len__` and
            `__getitem__`.
        start (int): Index of the first element. Defaults to 0.
        stop (int, optional): Index one past the last element. Defaults to
            the size of `source`. For a view, both count iteration steps
            from its start.

    Returns:
        SequenceView: A view over `source[start:stop]`.
    """

    if isinstance(source, sequence.SequenceView):
        if start == 0 and stop is None:
            return source

        size = source.size()
        stop = size if stop is None else stop
        require(0 <= start <= stop <= size, f"view bounds [{start}, {stop}) outside a view of size {size}")

        first = source.start()
        return sequence.SequenceView(next_cursor(first, start), next_cursor(first, stop))

    if not (hasattr(source, "__len__") and hasattr(source, "__getitem__")):
        raise TypeError(f"cannot view {type(source).__name__}: it is not indexable")

    stop = len(source) if stop is None else stop
    require(0 <= start <= stop <= len(source), f"view bounds [{start}, {stop}) outside storage of size {len(source)}")

    return sequence.SequenceView(IndexCursor(source, start), IndexCursor(source, stop))


def map(fn: Callable[[Any], Any], source) -> "sequence.SequenceView":
    """Lazily apply `fn` to every element; `fn` runs only on dereference."""

    rng = view(source)
    return sequence.SequenceView(
        adaptors.MapCursor(rng.start(), fn),
        adaptors.MapCursor(rng.end(), fn),
    )


def as_type(target: Callable[[Any], Any], source) -> "sequence.SequenceView":
    """Element-wise conversion, e.g. `as_type(float, view)`."""

    return map(target, source)


def filter(predicate: Callable[[Any], bool], source) -> "sequence.SequenceView":
    """
    Lazily keep the elements for which `predicate` holds.

    Construction is O(1); the predicate is evaluated only while iterating or
    dereferencing.
    """

    rng = view(source)
    end = rng.end()
    return sequence.SequenceView(
        adaptors.FilterCursor(rng.start(), end, predicate),
        adaptors.FilterCursor(end.clone(), end, predicate),
    )


def split(source, delimiter: Any) -> "sequence.SequenceView":
    """
    Split a view into the sub-views between occurrences of `delimiter`.

    Delimiters are excluded from every sub-view. Consecutive, leading and
    trailing delimiters produce empty sub-views, and an empty input produces
    a single empty sub-view, so joining the parts with the delimiter always
    rebuilds the input.
    """

    rng = view(source)
    end = rng.end()
    return sequence.SequenceView(
        adaptors.SplitCursor(rng.start(), end, delimiter),
        adaptors.SplitCursor(end.clone(), end, delimiter, finished=True),
    )


def by_line(text) -> "sequence.SequenceView":
    """Split a character sequence into lines."""

    return split(text, "\n")


def tile(source, length: int) -> "sequence.SequenceView":
    """
    Break a view into consecutive tiles of exactly `length` elements.

    Elements after the last full tile are dropped.

    Raises:
        PreconditionError: If `length` < 1 or not even one tile fits.
        TypeError: If the view's cursor is not random-access.
    """

    rng = view(source)
    first = rng.start()
    require_tier(first, Tier.RANDOM_ACCESS, "tile")
    require(length >= 1, f"tile length must be at least 1, got {length}")

    size = rng.size()
    truncated = size - size % length
    require(truncated > 0, f"tile length {length} does not fit in a view of size {size}")

    last = first + truncated
    return sequence.SequenceView(
        adaptors.TileCursor(first, first + length),
        adaptors.TileCursor(last, last + length),
    )


def iota(start: int, stop: int | None = None, jump: int = 1) -> "sequence.SequenceView":
    """
    Lazy integer sequence `start, start + jump, ...` stopping before `stop`.

    `iota(count)` is `iota(0, count, 1)`. The sequence holds
    `ceil((stop - start) / jump)` values (none if that is negative).

    Raises:
        TypeError: If any argument is not integral.
        PreconditionError: If `jump` is zero.
    """

    if stop is None:
        start, stop = 0, start

    for name, value in (("start", start), ("stop", stop), ("jump", jump)):
        if not isinstance(value, Integral):
            raise TypeError(f"iota {name} must be integral, got {type(value).__name__}")

    require(jump != 0, "iota jump must be non-zero")

    count = max(0, -((start - stop) // jump))
    return sequence.SequenceView(
        adaptors.IotaCursor(start, jump),
        adaptors.IotaCursor(start + count * jump, jump),
    )


def take(source, n: int) -> "sequence.SequenceView":
    """First `n` elements; requires 1 <= n <= size."""

    rng = view(source)
    size = rng.size()
    require(1 <= n <= size, f"take({n}) outside [1, {size}]")

    first = rng.start()
    return sequence.SequenceView(first, next_cursor(first, n))


def drop(source, n: int = 1) -> "sequence.SequenceView":
    """All but the first `n` elements; requires 1 <= n <= size."""

    rng = view(source)
    size = rng.size()
    require(1 <= n <= size, f"drop({n}) outside [1, {size}]")

    return sequence.SequenceView(next_cursor(rng.start(), n), rng.end())


def tail(source, n: int) -> "sequence.SequenceView":
    """Last `n` elements; requires a random-access view and 1 <= n <= size."""

    rng = view(source)
    last = rng.end()
    require_tier(last, Tier.RANDOM_ACCESS, "tail")

    size = rng.size()
    require(1 <= n <= size, f"tail({n}) outside [1, {size}]")

    return sequence.SequenceView(last - n, last)


def reduce(fn: Callable[[Any, Any], Any], source) -> Any:
    """
    Left-fold `fn` over a non-empty view, seeded with its first element.

    Raises:
        PreconditionError: If the view is empty.
    """

    it = iter(view(source))
    acc = next(it, _EMPTY)
    require(acc is not _EMPTY, "reduce requires a non-empty view")

    for e in it:
        acc = fn(acc, e)
    return acc


def fold(fn: Callable[[Any, Any], Any], init: Any, source) -> Any:
    """Left-fold `fn` over a view starting from `init`; empty views return `init`."""

    acc = init
    for e in view(source):
        acc = fn(acc, e)
    return acc


def copy_to(source, destination) -> None:
    """
    Assign every element of `source` to the same position of `destination`.

    Elements are copied once each, front to back, without buffering, so the
    result of copying between overlapping views depends on that order.

    Args:
        source: View (or indexable storage) to read from.
        destination: View or mutable indexable storage to write to.

    Raises:
        PreconditionError: If the sizes differ.
        TypeError: If the destination cursor is read-only.
    """

    src = view(source)
    dst = view(destination)
    require(src.size() == dst.size(), f"copy_to requires equal sizes, got {src.size()} and {dst.size()}")

    out = dst.start()
    for e in src:
        out.settle()
        out.assign(e)
        out.advance()


def each(fn: Callable[[Any], Any], source: Iterable) -> None:
    """Call `fn` on every element for its side effects."""

    for e in source:
        fn(e)
