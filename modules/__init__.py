"""
Modules Package

This package contains the processing stages of the max finder.

Submodules:
- parsing: Line tokenizing and integer parsing
- maxfinder: Maximum search over a cursor
- pipeline: Unified orchestration
"""

__version__ = '1.0.0'

# Submodules are imported on-demand
# Use: from modules.maxfinder import find_max
# Use: from modules.pipeline import MaxPipeline
