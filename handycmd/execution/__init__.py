# handycmd/execution/__init__.py
"""
Execution components for handycmd.

This package provides the asynchronous filesystem effects that command
handlers invoke.
"""
from .filesystem import (
    check_access, create_file, create_directory,
    delete_file, delete_directory, delete_tree,
    write_file, rename_path, read_text
)

__all__ = [
    'check_access', 'create_file', 'create_directory',
    'delete_file', 'delete_directory', 'delete_tree',
    'write_file', 'rename_path', 'read_text'
]
