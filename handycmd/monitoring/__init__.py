# handycmd/monitoring/__init__.py
"""
File monitoring for handycmd.
"""
from .watcher import CommandFileWatcher

__all__ = ['CommandFileWatcher']
