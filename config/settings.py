"""
Configuration settings loaded from environment variables.

Every setting is optional. Values can be placed in a .env file in the
project root, using the MAXFINDER_ prefix:

.env file may contain:
MAXFINDER_LOG_LEVEL=DEBUG
MAXFINDER_VERBOSE=true
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import Optional
import logging
import sys


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class Settings(BaseSettings):
    """
    Application settings.

    Example .env:
        MAXFINDER_LOG_LEVEL=INFO
        MAXFINDER_LOG_FORMAT=%(levelname)s %(name)s: %(message)s
        MAXFINDER_INPUT_ENCODING=utf-8
    """

    # ============================================================================
    # Logging
    # ============================================================================
    log_level: str = Field(
        default="WARNING",
        description="Root log level for diagnostics written to stderr"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="stdlib logging format string"
    )
    verbose: bool = Field(
        default=False,
        description="Log at INFO or finer regardless of log_level"
    )

    # ============================================================================
    # Input
    # ============================================================================
    input_encoding: str = "utf-8"

    model_config = SettingsConfigDict(
        env_prefix="MAXFINDER_",
        env_file=Path(__file__).parent.parent / ".env",  # Look in project root
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore unrelated keys in .env
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level '{value}' (expected one of {', '.join(LOG_LEVELS)})")
        return level

    @property
    def effective_log_level(self) -> int:
        """Numeric level after applying the verbose switch."""
        level = logging.getLevelName(self.log_level)
        if self.verbose:
            return min(level, logging.INFO)
        return level


# ============================================================================
# Global Settings Instance
# ============================================================================
settings = Settings()


# ============================================================================
# Helper Functions
# ============================================================================

def print_settings(current: Optional[Settings] = None):
    """Print current settings to stderr."""
    current = current or settings
    out = sys.stderr
    print("\n" + "="*70, file=out)
    print("CURRENT SETTINGS", file=out)
    print("="*70, file=out)
    print(f"Log Level:           {current.log_level}", file=out)
    print(f"Verbose:             {current.verbose}", file=out)
    print(f"Effective Level:     {logging.getLevelName(current.effective_log_level)}", file=out)
    print(f"Log Format:          {current.log_format}", file=out)
    print(f"Input Encoding:      {current.input_encoding}", file=out)
    print("="*70 + "\n", file=out)


if __name__ == "__main__":
    print_settings()
