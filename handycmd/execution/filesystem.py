# handycmd/execution/filesystem.py
"""
File system operations for handycmd.

Every operation is a coroutine that runs the blocking call on a worker
thread. Failures are raised as FileSystemError subclasses with the original
OSError chained, so callers can tell a missing target from anything else.
"""
import asyncio
import os
import shutil
from pathlib import Path
from typing import Union

from handycmd.errors import FileSystemError, wrap_os_error
from handycmd.utils.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def _require_path(path: PathLike, action: str) -> None:
    # Path("") resolves to the working directory
    if not str(path).strip():
        raise FileSystemError(f"Failed to {action} '{path}': Empty path", path)


async def check_access(path: PathLike) -> bool:
    """
    Check whether something readable exists at the given path.

    Args:
        path: The path to check.

    Returns:
        True if the path exists, False if it does not.

    Raises:
        FileSystemError: For any failure other than "not found".
    """
    _require_path(path, "access")
    try:
        await asyncio.to_thread(os.stat, path)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise wrap_os_error(e, "access", path) from e

    if not await asyncio.to_thread(os.access, path, os.R_OK):
        raise FileSystemError(f"Failed to access '{path}': Permission denied", path)
    return True


async def create_file(path: PathLike) -> None:
    """
    Create an empty file. Fails if the file appeared in the meantime.

    Args:
        path: The path where the file should be created.
    """
    _require_path(path, "create file")

    def _create() -> None:
        with open(path, "x", encoding="utf-8"):
            pass

    try:
        await asyncio.to_thread(_create)
    except OSError as e:
        logger.error(f"Error creating file at {path}: {e}")
        raise wrap_os_error(e, "create file", path) from e

    logger.info(f"Created file at {path}")


async def create_directory(path: PathLike, parents: bool = True) -> None:
    """
    Create a directory at the specified path.

    Args:
        path: The path where the directory should be created.
        parents: Whether to create missing intermediate directories.
    """
    _require_path(path, "create folder")
    try:
        await asyncio.to_thread(Path(path).mkdir, parents=parents, exist_ok=parents)
    except OSError as e:
        logger.error(f"Error creating directory at {path}: {e}")
        raise wrap_os_error(e, "create folder", path) from e

    logger.info(f"Created directory at {path}")


async def delete_file(path: PathLike) -> None:
    """Delete the file at the specified path."""
    _require_path(path, "delete file")
    try:
        await asyncio.to_thread(os.unlink, path)
    except OSError as e:
        logger.error(f"Error deleting file at {path}: {e}")
        raise wrap_os_error(e, "delete file", path) from e

    logger.info(f"Deleted file at {path}")


async def delete_directory(path: PathLike) -> None:
    """Delete an empty directory. Non-empty directories are an error."""
    _require_path(path, "delete folder")
    try:
        await asyncio.to_thread(os.rmdir, path)
    except OSError as e:
        logger.error(f"Error deleting directory at {path}: {e}")
        raise wrap_os_error(e, "delete folder", path) from e

    logger.info(f"Deleted directory at {path}")


async def delete_tree(path: PathLike) -> bool:
    """
    Remove a file or a directory with everything below it.

    A missing target is not an error.

    Args:
        path: The file or directory to remove.

    Returns:
        True if something was removed, False if nothing was there.
    """
    _require_path(path, "force delete")

    def _remove() -> bool:
        target = Path(path)
        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except FileNotFoundError:
            return False
        return True

    try:
        removed = await asyncio.to_thread(_remove)
    except OSError as e:
        logger.error(f"Error force-deleting {path}: {e}")
        raise wrap_os_error(e, "force delete", path) from e

    if removed:
        logger.info(f"Recursively deleted {path}")
    else:
        logger.info(f"Nothing to delete at {path}")
    return removed


async def write_file(path: PathLike, content: str, append: bool = False) -> None:
    """
    Write content to a file.

    Args:
        path: The path of the file to write.
        content: The content to write to the file.
        append: Whether to append to the file instead of overwriting.
    """
    _require_path(path, "append to" if append else "write to")

    def _write() -> None:
        with open(path, "a" if append else "w", encoding="utf-8") as f:
            f.write(content)

    try:
        await asyncio.to_thread(_write)
    except OSError as e:
        logger.error(f"Error writing to file at {path}: {e}")
        raise wrap_os_error(e, "append to" if append else "write to", path) from e

    action = "Appended to" if append else "Wrote to"
    logger.info(f"{action} file at {path}")


async def rename_path(source: PathLike, destination: PathLike) -> None:
    """Rename or move a file or folder."""
    _require_path(source, "rename")
    _require_path(destination, "rename")
    try:
        await asyncio.to_thread(os.rename, source, destination)
    except OSError as e:
        logger.error(f"Error renaming {source} to {destination}: {e}")
        raise wrap_os_error(e, "rename", source) from e

    logger.info(f"Renamed {source} to {destination}")


async def read_text(path: PathLike, encoding: str = "utf-8") -> str:
    """Read the whole file as text."""
    try:
        return await asyncio.to_thread(Path(path).read_text, encoding=encoding, errors="replace")
    except OSError as e:
        raise wrap_os_error(e, "read", path) from e
