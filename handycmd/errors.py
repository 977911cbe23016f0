# handycmd/errors.py
"""
Exception types shared across handycmd.
"""
from typing import Optional, Union
from pathlib import Path


class HandyCmdError(Exception):
    """Base class for handycmd errors."""
    pass


class FileSystemError(HandyCmdError):
    """Exception raised for file system operation errors."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


class TargetMissingError(FileSystemError):
    """The operation needed an existing target and there was none."""
    pass


class TargetExistsError(FileSystemError):
    """The target appeared between the existence check and the create."""
    pass


class PermissionOrIOError(FileSystemError):
    """Any other failure reported by the operating system."""
    pass


class MalformedStatementError(HandyCmdError):
    """Correlated captures of one statement kind disagree in length."""

    def __init__(self, kind: str, counts: tuple):
        self.kind = kind
        self.counts = tuple(counts)
        super().__init__(
            f"malformed {kind} statements: matchers captured {', '.join(map(str, self.counts))} "
            f"occurrences, expected equal counts"
        )


def wrap_os_error(error: OSError, action: str, path: Union[str, Path]) -> FileSystemError:
    """Translate an OSError into the matching FileSystemError subclass."""
    reason = error.strerror or str(error)
    message = f"Failed to {action} '{path}': {reason}"
    if isinstance(error, FileNotFoundError):
        return TargetMissingError(message, path)
    if isinstance(error, FileExistsError):
        return TargetExistsError(message, path)
    return PermissionOrIOError(message, path)
