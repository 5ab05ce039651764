"""
File finder utility for discovering translatable source files.
"""

from pathlib import Path
from typing import List, Iterator, Optional


# Script, typed-script, single-file component and JSX sources
SOURCE_EXTENSIONS = (".js", ".ts", ".vue", ".jsx")


def should_exclude_path(path: Path, directory: Path, exclude_dirs: List[str]) -> bool:
    """
    Check if a path lies inside an excluded directory.

    Only directories below the search root are considered, so a root that
    itself happens to be named like an excluded directory is still searched.

    Args:
        path: Path to check
        directory: Base directory of the search
        exclude_dirs: List of directory names to exclude

    Returns:
        True if the path should be excluded
    """
    if not exclude_dirs:
        return False

    try:
        relative_parts = path.relative_to(directory).parts[:-1]
    except ValueError:
        return False

    return any(part in exclude_dirs for part in relative_parts)


def is_source_file(path: Path) -> bool:
    """Return True if the file name ends in one of the source extensions."""
    return path.name.endswith(SOURCE_EXTENSIONS)


def find_source_files_iter(directory: Path, exclude_dirs: Optional[List[str]] = None) -> Iterator[Path]:
    """
    Find source files recursively (iterator version).

    Args:
        directory: Base directory to search in
        exclude_dirs: List of directory names to exclude

    Yields:
        Path objects for matching regular files, in sorted order

    Raises:
        ValueError: If directory doesn't exist or is not a directory
    """
    if not directory.exists():
        raise ValueError(f"Directory does not exist: {directory}")

    if not directory.is_dir():
        raise ValueError(f"Path is not a directory: {directory}")

    if exclude_dirs is None:
        exclude_dirs = []

    for file_path in sorted(directory.rglob("*")):
        if not is_source_file(file_path) or not file_path.is_file():
            continue
        if should_exclude_path(file_path, directory, exclude_dirs):
            continue
        yield file_path


def find_source_files(directory: Path, exclude_dirs: Optional[List[str]] = None) -> List[Path]:
    """
    Find source files recursively.

    Args:
        directory: Base directory to search in
        exclude_dirs: List of directory names to exclude

    Returns:
        Sorted list of Path objects for matching files

    Raises:
        ValueError: If directory doesn't exist or is not a directory
    """
    return list(find_source_files_iter(directory, exclude_dirs))
