"""Submission runner for coordinating one submission run.

This module defines the SubmissionRunner class which accepts validated
constants and a solve routine, runs the routine between the configured
streams and reports the outcome as an exit code.
"""

from pathlib import Path
from typing import Optional

from settings.schema import SubmissionConstants
from submission.resolver import InputFileNotFoundError
from submission.solution import load_solve_routine
from submission.streams import SolveRoutine, run_submission
from utils import get_logger
from utils.constants import EXIT_INPUT_NOT_FOUND, EXIT_RUNTIME_ERROR, EXIT_SUCCESS

logger = get_logger(__name__)


class SubmissionRunner:
    """Runs a solve routine against the configured input and output.

    Args:
        constants: Validated SubmissionConstants instance
        solve: Solve routine; loaded from ``constants.solution`` when omitted
        directory: Directory scanned for input pattern matches
    """

    def __init__(
        self,
        constants: SubmissionConstants,
        solve: Optional[SolveRoutine] = None,
        directory: Optional[str | Path] = None,
    ):
        """Initialize the runner.

        Raises:
            SolutionLoadError: If ``solve`` is omitted and the configured
                solution cannot be imported
        """
        self.constants = constants
        self.directory = directory
        self.solve = solve if solve is not None else load_solve_routine(constants.solution)

        logger.debug(
            "SubmissionRunner initialized: "
            f"input_file={constants.input_file!r}, "
            f"input_file_pattern={constants.input_file_pattern!r}, "
            f"output_file={constants.output_file!r}"
        )

    def execute(self) -> None:
        """Run the submission, letting every error propagate."""
        source = "stdin" if self.constants.uses_stdin else "file"
        sink = "stdout" if self.constants.uses_stdout else self.constants.output_file
        logger.info(f"Running submission (input: {source}, output: {sink})")
        run_submission(self.solve, self.constants, directory=self.directory)
        logger.info("Submission finished")

    def run(self) -> int:
        """Run the submission.

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        try:
            self.execute()
            return EXIT_SUCCESS
        except InputFileNotFoundError as e:
            logger.error(f"Submission failed: {e}")
            return EXIT_INPUT_NOT_FOUND
        except OSError as e:
            logger.error(f"Submission failed due to I/O error: {e}")
            return EXIT_RUNTIME_ERROR
        except KeyboardInterrupt:
            logger.warning("Submission interrupted by user")
            return EXIT_RUNTIME_ERROR
        except Exception as e:
            logger.exception(f"Solve routine failed: {type(e).__name__}: {e}")
            return EXIT_RUNTIME_ERROR
