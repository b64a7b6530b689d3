"""Data models."""

from .settings import PackagingSettings

__all__ = ['PackagingSettings']
