"""CLI package for caiderun.

Entry points:

    python -m cli run [--config caide.yaml] [--input FILE | --input-pattern RE] [--output FILE]
    python -m cli resolve [--all]
    python -m cli init [--path caide.yaml] [--force]

The ``caiderun`` console script calls :func:`console_main`.
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from core.runner import SubmissionRunner
from settings import (
    SettingsValidationError,
    SubmissionConstants,
    dump_constants,
    load_constants,
)
from submission import (
    InputFileNotFoundError,
    SolutionLoadError,
    display_path,
    find_matching_files,
    resolve_input_file,
)
from utils import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_CONFIG_FILE,
    EXIT_INPUT_NOT_FOUND,
    EXIT_INVALID_CONFIG,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    get_logger,
    setup_logging,
)

__all__ = [
    "parse_args",
    "main",
    "console_main",
    "run_submission_command",
    "resolve_command",
    "init_command",
    # Re-export for unit-test patching
    "SubmissionRunner",
]

logger = get_logger(__name__)

STDIN_LABEL = "<stdin>"


def _add_constants_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the flags that override individual constants."""
    parser.add_argument(
        "--input",
        dest="input_file",
        type=str,
        default=None,
        help="Explicit input file (pass an empty string to unset)",
    )
    parser.add_argument(
        "--input-pattern",
        dest="input_file_pattern",
        type=str,
        default=None,
        help="Regular expression; the newest matching file is used as input",
    )
    parser.add_argument(
        "--output",
        dest="output_file",
        type=str,
        default=None,
        help="Explicit output file (default: stdout)",
    )
    parser.add_argument(
        "--search-dir",
        dest="search_dir",
        type=str,
        default=None,
        help="Directory scanned for --input-pattern matches (default: current directory)",
    )
    parser.add_argument(
        "--solution",
        type=str,
        default=None,
        help="Solve routine as 'module:attribute'",
    )
    parser.add_argument(
        "--encoding",
        type=str,
        default=None,
        help="Text encoding of input and output files (default: utf-8); stdin/stdout are not re-encoded",
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse (defaults to ``sys.argv[1:]``)

    Returns:
        Parsed arguments namespace
    """
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML/JSON constants file",
    )
    common.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    _add_constants_arguments(common)

    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"{APP_NAME} - run a solve routine between the configured input and output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"{APP_NAME} {APP_VERSION}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("run", parents=[common], help="Run the solve routine")

    resolve_parser = subparsers.add_parser(
        "resolve", parents=[common], help="Show which input file a run would read"
    )
    resolve_parser.add_argument(
        "--all",
        action="store_true",
        help="List every matching file, newest first",
    )

    init_parser = subparsers.add_parser(
        "init", parents=[common], help="Write a constants file from the given flags"
    )
    init_parser.add_argument(
        "--path",
        type=str,
        default=DEFAULT_CONFIG_FILE,
        help=f"Destination file (default: {DEFAULT_CONFIG_FILE})",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing file",
    )

    return parser.parse_args(argv)


def _overrides(args: argparse.Namespace) -> dict:
    return {
        "input_file": args.input_file,
        "input_file_pattern": args.input_file_pattern,
        "output_file": args.output_file,
        "search_dir": args.search_dir,
        "solution": args.solution,
        "encoding": args.encoding,
    }


def _load(args: argparse.Namespace) -> SubmissionConstants:
    return load_constants(args.config, overrides=_overrides(args))


def run_submission_command(args: argparse.Namespace) -> int:
    """Load constants and the solve routine, then run the submission."""
    try:
        constants = _load(args)
        runner = SubmissionRunner(constants)
    except SettingsValidationError as e:
        print(f"✗ Invalid constants:\n{e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG
    except SolutionLoadError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    exit_code = runner.run()
    if exit_code == EXIT_INPUT_NOT_FOUND:
        print("✗ Input file not found", file=sys.stderr)
    elif exit_code != EXIT_SUCCESS:
        print(f"✗ Submission failed with exit code: {exit_code}", file=sys.stderr)
    return exit_code


def resolve_command(args: argparse.Namespace) -> int:
    """Print the input file a run would read."""
    try:
        constants = _load(args)
    except SettingsValidationError as e:
        print(f"✗ Invalid constants:\n{e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    try:
        if args.all and constants.input_file is None and constants.input_file_pattern is not None:
            candidates = find_matching_files(constants.search_dir, constants.input_file_pattern)
            if not candidates:
                raise InputFileNotFoundError("Input file not found")
            for candidate in candidates:
                print(display_path(constants.search_dir, candidate.name))
            return EXIT_SUCCESS

        if constants.uses_stdin:
            print(STDIN_LABEL)
        else:
            print(resolve_input_file(constants))
        return EXIT_SUCCESS
    except InputFileNotFoundError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_INPUT_NOT_FOUND
    except OSError as e:
        print(f"✗ I/O error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


def init_command(args: argparse.Namespace) -> int:
    """Write a constants file from the given flags."""
    try:
        constants = _load(args)
        path = dump_constants(constants, args.path, overwrite=args.force)
    except SettingsValidationError as e:
        print(f"✗ {e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG
    except OSError as e:
        print(f"✗ I/O error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    print(f"✓ Constants written to {path}", file=sys.stderr)
    return EXIT_SUCCESS


COMMANDS = {
    "run": run_submission_command,
    "resolve": resolve_command,
    "init": init_command,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for `python -m cli`."""
    args = parse_args(argv)
    setup_logging(verbose=getattr(args, "verbose", False))

    handler = COMMANDS.get(args.command)
    if handler is None:
        print(f"Unknown command: {args.command}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    try:
        return handler(args)
    except KeyboardInterrupt:
        print("\n✗ Interrupted by user", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


def console_main() -> None:
    """Entry point for the ``caiderun`` console script."""
    sys.exit(main())
