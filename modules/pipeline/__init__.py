"""
Pipeline Orchestration Module

This module provides the pipeline that turns an input line into its maximum.

Main components:
- MaxPipeline: Main orchestrator class
- create_pipeline: Convenience function for creating pipeline instances
"""

from modules.pipeline.pipeline import (
    MaxPipeline,
    create_pipeline
)

__all__ = [
    'MaxPipeline',
    'create_pipeline',
]

__version__ = '1.0.0'
