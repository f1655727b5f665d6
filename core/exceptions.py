"""
Error taxonomy for the max finder.

All failures are terminal for a single run: nothing here is caught and
recovered inside the package, the CLI reports them and exits non-zero.
"""

from typing import Optional


class MaxFinderError(Exception):
    """Base class for every error raised by this package."""


class CursorExhaustedError(MaxFinderError, LookupError):
    """next() was called on a cursor with no remaining elements."""

    def __init__(self, message: str = "Cursor has no more elements", consumed: int = 0):
        super().__init__(message)
        self.consumed = consumed


class EmptyInputError(CursorExhaustedError):
    """The sequence behind a cursor held zero elements."""

    def __init__(self, message: str = "Input contains no integers"):
        super().__init__(message, consumed=0)


class MalformedTokenError(MaxFinderError, ValueError):
    """
    A token could not be parsed as a base-10 integer.

    Attributes:
        token: The offending token text
        position: Zero-based index of the token within the line
    """

    def __init__(self, token: str, position: Optional[int] = None, reason: str = ""):
        self.token = token
        self.position = position
        self.reason = reason

        where = f" at position {position}" if position is not None else ""
        message = f"Malformed integer token {token!r}{where}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
