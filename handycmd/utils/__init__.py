# handycmd/utils/__init__.py
"""
Utility functions for handycmd.

This package provides logging setup and the debounce scheduler used by the
command file watcher.
"""

from .logging import setup_logging, get_logger

# Debouncer is imported from handycmd.utils.debounce where needed

__all__ = ['setup_logging', 'get_logger']
