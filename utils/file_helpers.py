"""File helper utilities for caiderun.

This module provides common file operations used across the application.
"""

import logging
import os
from pathlib import Path
from typing import Iterator

from .constants import SUPPORTED_CONFIG_FORMATS

logger = logging.getLogger(__name__)


class PathValidationError(Exception):
    """Raised when path validation fails."""

    pass


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the directory holding ``path`` exists, creating it if necessary.

    Args:
        path: File path whose parent directory is needed

    Returns:
        The path unchanged (for chaining)

    Raises:
        OSError: If directory creation fails
    """
    parent = Path(path).parent
    if str(parent) in ("", "."):
        return path
    try:
        parent.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Directory ensured: {parent}")
        return path
    except OSError as e:
        logger.error(f"Failed to create directory {parent}: {e}")
        raise


def get_file_extension(file_path: str | Path) -> str:
    """Get file extension from path.

    Args:
        file_path: File path

    Returns:
        File extension (without dot), empty string if no extension
    """
    path = Path(file_path)
    return path.suffix.lstrip(".").lower()


def is_supported_config_format(file_path: str | Path) -> bool:
    """Check if file is a supported config format.

    Args:
        file_path: File path to check

    Returns:
        True if format is supported
    """
    extension = get_file_extension(file_path)
    return extension in SUPPORTED_CONFIG_FORMATS


def validate_path_safe(
    file_path: str | Path,
    must_exist: bool = False,
    must_be_file: bool = False,
) -> Path:
    """Validate a path and resolve it.

    Args:
        file_path: Path to validate
        must_exist: If True, path must exist
        must_be_file: If True, path must be a regular file

    Returns:
        Resolved Path object

    Raises:
        PathValidationError: If the path is empty, contains a NUL byte, cannot
            be resolved, or exists but is not a file when one is required
        FileNotFoundError: If the path is required to exist and doesn't
    """
    if not str(file_path).strip():
        raise PathValidationError("Path is empty")
    if "\x00" in str(file_path):
        raise PathValidationError(f"Path contains a NUL byte: {file_path!r}")

    try:
        resolved = Path(file_path).expanduser().resolve()
    except (OSError, RuntimeError) as e:
        raise PathValidationError(f"Failed to resolve path {file_path}: {e}") from e

    if (must_exist or must_be_file) and not resolved.exists():
        raise FileNotFoundError(f"Path does not exist: {file_path}")

    if must_be_file and not resolved.is_file():
        raise PathValidationError(f"Path is not a file: {file_path}")

    return resolved


def iter_regular_files(directory: str | Path) -> Iterator[os.DirEntry]:
    """Yield the regular files directly inside ``directory``.

    Sub-directories and other non-file entries are skipped. Symlinks to
    regular files count as files.

    Args:
        directory: Directory to list

    Yields:
        Directory entries for regular files, in enumeration order

    Raises:
        OSError: If the directory cannot be listed
    """
    with os.scandir(directory) as entries:
        for entry in entries:
            try:
                if entry.is_file():
                    yield entry
            except OSError as e:
                logger.debug(f"Skipping unreadable entry {entry.path}: {e}")
