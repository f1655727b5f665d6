"""
Core data models for the max finder.

Contains the Pydantic models for a parsed input line and the result of a run.
"""

from typing import List
from pydantic import BaseModel, Field


# ============================================================================
# CORE MODELS
# ============================================================================

class ParsedLine(BaseModel):
    """
    One input line after tokenizing and integer parsing.

    ``tokens`` and ``values`` are index-aligned and keep input order.
    """
    raw: str = ""
    tokens: List[str] = Field(default_factory=list)
    values: List[int] = Field(default_factory=list)

    @property
    def count(self) -> int:
        """Number of parsed integers."""
        return len(self.values)

    @property
    def is_empty(self) -> bool:
        return not self.values


class MaxResult(BaseModel):
    """Result of one max-finding run."""
    value: int
    count: int = Field(default=0, ge=0, description="Elements traversed")
    processing_time: float = Field(default=0.0, ge=0.0, description="Seconds")

    def __str__(self) -> str:
        return str(self.value)
