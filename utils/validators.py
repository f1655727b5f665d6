"""
Validation Utilities

This module provides validation functions for input tokens before they are
converted to integers.

Key features:
- Format validation (optional sign, ASCII digits only)
- Error reporting with helpful messages
"""

from typing import List, Tuple
import re


INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')


# ============================================================================
# TOKEN VALIDATION
# ============================================================================

def validate_token(token: str) -> Tuple[bool, List[str]]:
    """
    Validate a single integer token.

    Args:
        token: Whitespace-free token taken from the input line

    Returns:
        (is_valid, list_of_errors)

    Example:
        >>> validate_token("-42")
        (True, [])
        >>> validate_token("4.2")
        (False, ["Unexpected character '.' in '4.2'"])
    """
    errors = []

    if not token:
        errors.append("Token cannot be empty")
        return False, errors

    if INTEGER_PATTERN.fullmatch(token):
        return True, errors

    digits = token[1:] if token[0] in '+-' else token
    if not digits:
        errors.append(f"Sign without digits: '{token}'")
    else:
        for ch in digits:
            if not ('0' <= ch <= '9'):
                errors.append(f"Unexpected character '{ch}' in '{token}'")
                break

    return False, errors

