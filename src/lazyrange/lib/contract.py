"""
Precondition checks for the range engine.

Contract violations (an empty reduce, a copy between views of different
sizes, an out-of-range take, ...) are programmer errors rather than runtime
conditions, so they raise `PreconditionError` instead of returning a status.
"""

from lazyrange.lib.logger import Logger


class PreconditionError(AssertionError):
    """Raised when a caller violates an operation's documented precondition."""

    pass


def require(condition: bool, message: str) -> None:
    """
    Abort the current operation unless `condition` holds.

    Args:
        condition (bool): The invariant that must hold.
        message (str): Diagnostic naming the violated invariant.

    Raises:
        PreconditionError: If `condition` is false.
    """

    if not condition:
        Logger.debug(f"Precondition failed: {message}")
        raise PreconditionError(message)
