"""Service layer implementations."""

from .path_service import PathService, ResolvedSettings, resolve

__all__ = ['PathService', 'ResolvedSettings', 'resolve']
