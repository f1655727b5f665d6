"""
Parsing Module

Turns one line of text into an ordered list of integers.
"""

from modules.parsing.tokenizer import (
    split_tokens,
    parse_token,
    parse_line
)

__all__ = [
    'split_tokens',
    'parse_token',
    'parse_line',
]
