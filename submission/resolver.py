"""Input file resolution.

Picks the file a submission reads from: the explicit input file when one is
configured, otherwise the most recently modified file whose name matches the
input file pattern.
"""

import os
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from settings.schema import SubmissionConstants
from utils import INPUT_FILE_DIAGNOSTIC, get_logger, iter_regular_files

logger = get_logger(__name__)


class InputFileNotFoundError(FileNotFoundError):
    """Raised when no input file can be selected."""

    pass


@dataclass(frozen=True)
class InputCandidate:
    """A file whose name matched the input file pattern."""

    name: str
    path: str
    mtime_ns: int

    @property
    def sort_key(self) -> tuple[int, str]:
        """Newest first, then by name."""
        return (-self.mtime_ns, self.name)


def find_matching_files(directory: str | Path, pattern: str) -> list[InputCandidate]:
    """List regular files in ``directory`` whose name matches ``pattern``.

    The pattern is searched anywhere in the file name, not anchored.

    Args:
        directory: Directory to scan (not recursive)
        pattern: Regular expression

    Returns:
        Matching files, newest first; equal times ordered by name
    """
    regex = re.compile(pattern)
    candidates = []
    for entry in iter_regular_files(directory):
        if not regex.search(entry.name):
            continue
        try:
            mtime_ns = entry.stat().st_mtime_ns
        except OSError as e:
            logger.debug(f"Cannot stat {entry.path}, skipping: {e}")
            continue
        candidates.append(InputCandidate(name=entry.name, path=entry.path, mtime_ns=mtime_ns))

    candidates.sort(key=lambda c: c.sort_key)
    logger.debug(f"{len(candidates)} file(s) in {directory} match {pattern!r}")
    return candidates


def display_path(directory: str | Path, name: str) -> str:
    """Bare name for the current directory, the joined path otherwise."""
    return name if Path(directory) == Path(".") else os.path.join(directory, name)


def resolve_input_file(
    constants: SubmissionConstants,
    directory: Optional[str | Path] = None,
) -> str:
    """Return the input file a submission should read.

    Args:
        constants: Validated submission constants
        directory: Directory to scan; defaults to ``constants.search_dir``

    Returns:
        The explicit input file unchanged, or the newest matching file. The
        bare file name is returned when scanning the current directory.

    Raises:
        InputFileNotFoundError: If no file matches, or nothing is configured
        OSError: If the directory cannot be listed
    """
    if constants.input_file is not None:
        return constants.input_file

    if constants.input_file_pattern is None:
        raise InputFileNotFoundError("Input file not found: no input file or pattern configured")

    if directory is None:
        directory = constants.search_dir

    candidates = find_matching_files(directory, constants.input_file_pattern)
    if not candidates:
        raise InputFileNotFoundError("Input file not found")

    chosen = candidates[0]
    if len(candidates) > 1 and candidates[1].mtime_ns == chosen.mtime_ns:
        logger.debug(f"Several files share the newest modification time, picked {chosen.name} by name")

    result = display_path(directory, chosen.name)
    print(INPUT_FILE_DIAGNOSTIC.format(name=result), file=sys.stderr)
    return result
