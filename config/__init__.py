"""
Configuration Package

This package contains configuration settings and logging setup.

Components:
- settings: Application settings loaded from environment
- logging_config: stderr logging configuration
"""

from config.settings import settings

__all__ = ['settings']

__version__ = '1.0.0'
