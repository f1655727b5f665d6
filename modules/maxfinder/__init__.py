"""
MaxFinder Module

Finds the maximum of a sequence by walking a forward-only cursor.
"""

from modules.maxfinder.finder import (
    find_max,
    count_and_find_max
)

__all__ = [
    'find_max',
    'count_and_find_max',
]
