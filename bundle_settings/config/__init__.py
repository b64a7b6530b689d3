"""Compiled-in packaging declaration."""
from .packaging_defaults import BASE_PATH_KEY, EXECUTABLES, NAME_EXCLUSIONS, ROOT_EXCLUSIONS

__all__ = ["BASE_PATH_KEY", "EXECUTABLES", "NAME_EXCLUSIONS", "ROOT_EXCLUSIONS"]
