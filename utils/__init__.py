"""
Utilities Package

This package contains utility helpers for the max finder.

Components:
- validators: Input token validation utilities

Note: Utilities are imported on-demand.
Use: from utils.validators import validate_token
"""

__version__ = '1.0.0'
