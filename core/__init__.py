"""
Core Package

This package contains the core building blocks of the max finder: the
cursor abstraction, the error taxonomy and the data models.

Components:
- cursor: Cursor protocol, SequenceCursor, IterableCursor
- exceptions: MaxFinderError and its subclasses
- models: Pydantic data models
"""

__version__ = '1.0.0'

# Core components are imported on-demand
# Use: from core.cursor import cursor_over
# Use: from core.exceptions import EmptyInputError
