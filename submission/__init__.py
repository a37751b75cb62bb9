"""Submission I/O: input file resolution, stream handling and the solve routine.

This package wires the configured input and output streams around a
user-supplied solve routine.
"""

from .resolver import (
    InputCandidate,
    InputFileNotFoundError,
    display_path,
    find_matching_files,
    resolve_input_file,
)
from .solution import Solution, SolutionLoadError, load_solve_routine
from .streams import SolveRoutine, open_input, open_output, run_submission

__all__ = [
    "resolve_input_file",
    "find_matching_files",
    "InputCandidate",
    "InputFileNotFoundError",
    "display_path",
    "open_input",
    "open_output",
    "run_submission",
    "SolveRoutine",
    "Solution",
    "SolutionLoadError",
    "load_solve_routine",
]
