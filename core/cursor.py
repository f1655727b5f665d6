"""
Forward-only cursors over sequences of integers.

A cursor exposes exactly two operations, ``has_next()`` and ``next()``, and
can be consumed once. Anything with those two methods satisfies the
``Cursor`` protocol, so tests can hand in synthetic cursors.
"""

from typing import Iterable, Iterator, Optional, Protocol, Sequence, runtime_checkable
import logging

from core.exceptions import CursorExhaustedError, EmptyInputError

logger = logging.getLogger(__name__)


# ============================================================================
# PROTOCOL
# ============================================================================

@runtime_checkable
class Cursor(Protocol):
    """Single-pass, forward-only traversal capability."""

    def has_next(self) -> bool:
        """Return True if another element remains. Never advances."""
        ...

    def next(self) -> int:
        """Return the next element and advance by one."""
        ...


def _exhausted(consumed: int) -> CursorExhaustedError:
    if consumed == 0:
        return EmptyInputError()
    return CursorExhaustedError(
        f"Cursor exhausted after {consumed} element(s)",
        consumed=consumed
    )


# ============================================================================
# IMPLEMENTATIONS
# ============================================================================

class SequenceCursor:
    """
    Array-backed cursor.

    Keeps a position into ``seq``; the sequence itself is never modified.

    Example:
        >>> cursor = SequenceCursor([3, 7, 2])
        >>> cursor.next()
        3
        >>> cursor.has_next()
        True
    """

    def __init__(self, seq: Sequence[int]):
        self._seq = seq
        self._length = len(seq)
        self._pos = 0

    @property
    def consumed(self) -> int:
        """Number of elements taken so far."""
        return self._pos

    def has_next(self) -> bool:
        return self._pos < self._length

    def next(self) -> int:
        pos = self._pos
        if pos < self._length:
            self._pos = pos + 1
            return self._seq[pos]
        raise _exhausted(pos)

    def __iter__(self) -> "SequenceCursor":
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def __repr__(self) -> str:
        return f"SequenceCursor(position={self._pos}, length={self._length})"


class IterableCursor:
    """
    Cursor over any iterable, including generators.

    Holds at most one element of lookahead so that ``has_next()`` can answer
    without losing the element it had to pull.
    """

    _MISSING = object()

    def __init__(self, iterable: Iterable[int]):
        self._it: Iterator[int] = iter(iterable)
        self._lookahead: object = self._MISSING
        self._done = False
        self._consumed = 0

    @property
    def consumed(self) -> int:
        """Number of elements taken so far."""
        return self._consumed

    def _fill(self) -> None:
        if self._lookahead is self._MISSING and not self._done:
            try:
                self._lookahead = next(self._it)
            except StopIteration:
                self._done = True

    def has_next(self) -> bool:
        self._fill()
        return self._lookahead is not self._MISSING

    def next(self) -> int:
        self._fill()
        if self._lookahead is self._MISSING:
            raise _exhausted(self._consumed)

        value = self._lookahead
        self._lookahead = self._MISSING
        self._consumed += 1
        return value  # type: ignore[return-value]

    def __iter__(self) -> "IterableCursor":
        return self

    def __next__(self) -> int:
        if not self.has_next():
            raise StopIteration
        return self.next()

    def __repr__(self) -> str:
        return f"IterableCursor(consumed={self._consumed}, done={self._done})"


# ============================================================================
# FACTORY
# ============================================================================

def cursor_over(values: Iterable[int], name: Optional[str] = None) -> Cursor:
    """
    Build a cursor over ``values``.

    Sequences (lists, tuples, ranges) get a ``SequenceCursor``; anything else
    is wrapped in an ``IterableCursor``.

    Args:
        values: Integers in traversal order
        name: Optional label used only in debug logs

    Returns:
        A fresh cursor positioned before the first element
    """
    if isinstance(values, Sequence):
        cursor: Cursor = SequenceCursor(values)
    else:
        cursor = IterableCursor(values)

    logger.debug(f"Created {type(cursor).__name__} for {name or 'input'}")
    return cursor
