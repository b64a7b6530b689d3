"""Packaging exclusion and executable settings for the framework bridge."""

from .models.settings import PackagingSettings
from .services.path_service import PathService, ResolvedSettings, resolve
from .utils.exceptions import ConfigurationLoadError, PackagingError

__version__ = "0.1.0"

load = PackagingSettings.load

__all__ = [
    'PackagingSettings',
    'PathService',
    'ResolvedSettings',
    'resolve',
    'load',
    'ConfigurationLoadError',
    'PackagingError',
]
