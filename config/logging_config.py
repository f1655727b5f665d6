"""
Logging setup.

Diagnostics always go to stderr so that stdout carries only the result.
"""

import logging
import sys
from typing import Optional

from config.settings import Settings, settings as default_settings


def setup_logging(current: Optional[Settings] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger with a single stderr handler.

    Args:
        current: Settings to read level and format from (global settings if None)
        level: Explicit level name, takes precedence over the settings

    Returns:
        The configured root logger
    """
    current = current or default_settings

    if level:
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            raise ValueError(f"Unknown log level: {level}")
    else:
        numeric_level = current.effective_log_level

    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(current.log_format))
    root.addHandler(handler)
    root.setLevel(numeric_level)

    return root
