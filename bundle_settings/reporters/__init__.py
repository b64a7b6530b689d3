"""Manifest generation modules."""

from .base_reporter import BaseReporter
from .json_reporter import JSONReporter
from .markdown_reporter import MarkdownReporter

REPORTERS = {
    "json": JSONReporter,
    "markdown": MarkdownReporter,
}

__all__ = ['BaseReporter', 'JSONReporter', 'MarkdownReporter', 'REPORTERS']
