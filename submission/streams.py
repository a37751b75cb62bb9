"""Stream setup and teardown for a submission run.

Opens the input and output text streams described by the submission
constants, hands them to the solve routine and releases them on every exit
path. Standard input and standard output are never closed.
"""

import sys
from contextlib import ExitStack, contextmanager
from pathlib import Path
from typing import Callable, Iterator, Optional, TextIO

from settings.schema import SubmissionConstants
from utils import ensure_parent_directory, get_logger

from .resolver import resolve_input_file

logger = get_logger(__name__)

SolveRoutine = Callable[[TextIO, TextIO], None]


@contextmanager
def open_input(
    constants: SubmissionConstants,
    directory: Optional[str | Path] = None,
) -> Iterator[TextIO]:
    """Open the submission's input stream.

    Args:
        constants: Validated submission constants
        directory: Directory scanned for pattern matches (defaults to
            ``constants.search_dir``)

    Yields:
        The resolved input file opened for reading with ``constants.encoding``,
        or ``sys.stdin`` as is (its encoding is left to the process)

    Raises:
        InputFileNotFoundError: If a pattern is configured and nothing matches
    """
    if constants.uses_stdin:
        logger.debug("Reading input from stdin")
        yield sys.stdin
        return

    input_file = resolve_input_file(constants, directory=directory)
    logger.debug(f"Opening input file: {input_file}")
    with open(input_file, "r", encoding=constants.encoding) as f:
        yield f


@contextmanager
def open_output(constants: SubmissionConstants) -> Iterator[TextIO]:
    """Open the submission's output stream.

    Yields:
        The output file opened for writing (truncated) with
        ``constants.encoding``, or ``sys.stdout`` as is
    """
    if constants.uses_stdout:
        logger.debug("Writing output to stdout")
        try:
            yield sys.stdout
        finally:
            sys.stdout.flush()
        return

    output_file = constants.output_file
    ensure_parent_directory(Path(output_file))
    logger.debug(f"Opening output file: {output_file}")
    with open(output_file, "w", encoding=constants.encoding) as f:
        yield f


def run_submission(
    solve: SolveRoutine,
    constants: SubmissionConstants,
    directory: Optional[str | Path] = None,
) -> None:
    """Run ``solve`` between the configured input and output streams.

    Input is acquired first, so a missing input file leaves no output file
    behind. Both streams are released whether ``solve`` returns or raises;
    exceptions propagate unchanged.

    Args:
        solve: Callable taking ``(input, output)`` text streams
        constants: Validated submission constants
        directory: Directory scanned for pattern matches
    """
    with ExitStack() as stack:
        input_stream = stack.enter_context(open_input(constants, directory=directory))
        output_stream = stack.enter_context(open_output(constants))
        solve(input_stream, output_stream)
