"""Utility functions and helpers."""

from .logger import setup_logger
from .exceptions import (
    PackagingError,
    ConfigurationLoadError,
    ResolutionError,
    ReportGenerationError
)

__all__ = [
    'setup_logger',
    'PackagingError',
    'ConfigurationLoadError',
    'ResolutionError',
    'ReportGenerationError'
]
