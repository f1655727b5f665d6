"""
Tokenizer for a single line of whitespace-separated integers.
"""

import logging
from typing import List, Optional

from core.exceptions import MalformedTokenError
from core.models import ParsedLine
from utils.validators import validate_token

logger = logging.getLogger(__name__)


def split_tokens(line: str) -> List[str]:
    """
    Split a line on runs of whitespace.

    Leading and trailing whitespace, including the line terminator, produce
    no tokens, so a blank line yields an empty list.
    """
    return line.split()


def parse_token(token: str, position: Optional[int] = None) -> int:
    """
    Parse a base-10 integer token.

    Args:
        token: Token text, an optional sign followed by ASCII digits
        position: Index of the token in the line, for error messages

    Returns:
        The integer value

    Raises:
        MalformedTokenError: If the token is not a base-10 integer
    """
    is_valid, errors = validate_token(token)
    if not is_valid:
        raise MalformedTokenError(token, position, errors[0] if errors else "")
    return int(token, 10)


def parse_line(line: str) -> ParsedLine:
    """
    Tokenize a line and parse every token, preserving order.

    Raises:
        MalformedTokenError: On the first token that is not an integer
    """
    tokens = split_tokens(line)
    values = [parse_token(token, i) for i, token in enumerate(tokens)]

    logger.debug(f"Parsed {len(values)} integer(s) from input line")
    return ParsedLine(raw=line, tokens=tokens, values=values)
