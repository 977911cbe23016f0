# handycmd/cli/__init__.py
"""
Command-line interface for handycmd.
"""
from .main import app

__all__ = ['app']
