"""
Maximum search over a forward-only cursor.
"""

import logging
from typing import Tuple

from core.cursor import Cursor

logger = logging.getLogger(__name__)


def count_and_find_max(cursor: Cursor) -> Tuple[int, int]:
    """
    Traverse ``cursor`` once and return ``(maximum, elements_seen)``.

    The first ``next()`` call is unguarded: an empty cursor raises
    ``EmptyInputError`` instead of producing a default value.
    """
    best = cursor.next()
    seen = 1

    while cursor.has_next():
        value = cursor.next()
        seen += 1
        # strict comparison keeps the earlier of equal values
        if value > best:
            best = value

    logger.debug(f"Traversed {seen} element(s), maximum {best}")
    return best, seen


def find_max(cursor: Cursor) -> int:
    """
    Return the greatest element produced by ``cursor``.

    Args:
        cursor: Cursor positioned before at least one element. It is
            advanced to exhaustion.

    Returns:
        The maximum value

    Raises:
        EmptyInputError: If the cursor yields no element
    """
    best, _ = count_and_find_max(cursor)
    return best
