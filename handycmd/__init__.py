# handycmd/__init__.py
"""
handycmd: watch a command file and turn its statements into filesystem changes.
"""

__version__ = '0.1.0'
