"""
Module: loading.resources

Purpose:
    Locate the bundled exam resources and count the chapter directories
    and question files inside them.

Key Functions:
    - bundled_resource_root(): Directory holding the packaged exam JSON
    - count_subdirs(): Number of sub-directories in a directory
    - count_files(): Number of regular files, optionally by suffix

Used By:
    - loading.config: Default resource root
    - loading.loader: Chapter and question discovery
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional


def bundled_resource_root() -> Path:
    """Get the directory containing the packaged exam resources."""
    return Path(__file__).resolve().parent.parent / "resources" / "json"


def count_subdirs(directory: Path) -> int:
    """
    Count the sub-directories of a directory.

    Raises:
        NotADirectoryError: If directory does not exist or is not a directory
    """
    return _count_entries(directory, lambda path: path.is_dir())


def count_files(directory: Path, suffix: Optional[str] = None) -> int:
    """
    Count the regular files in a directory.

    Args:
        directory: Directory to scan (not recursive)
        suffix: Only count files ending with this suffix, e.g. ".json"

    Raises:
        NotADirectoryError: If directory does not exist or is not a directory
    """
    if suffix is None:
        return _count_entries(directory, lambda path: path.is_file())
    return _count_entries(directory, lambda path: path.is_file() and path.name.endswith(suffix))


def _count_entries(directory: Path, accept: Callable[[Path], bool]) -> int:
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")
    return sum(1 for path in directory.iterdir() if accept(path))
