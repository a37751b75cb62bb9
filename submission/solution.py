"""The solve routine collaborator.

A solve routine is any callable taking ``(input, output)`` text streams. It is
supplied by the user and referenced as ``module:attribute``.
"""

import importlib
import inspect
import os
import sys
from typing import Optional, TextIO

from utils import get_logger

from .streams import SolveRoutine

logger = get_logger(__name__)


class SolutionLoadError(Exception):
    """Raised when the solve routine cannot be imported."""

    pass


class Solution:
    """Default solution: reads nothing and writes nothing."""

    def solve(self, input: TextIO, output: TextIO) -> None:
        pass


def _ensure_cwd_importable() -> None:
    """Put the working directory on sys.path.

    Console scripts start with their own bin directory as sys.path[0], so a
    solution file next to the input files is not importable otherwise.
    """
    cwd = os.getcwd()
    if cwd not in sys.path and "" not in sys.path:
        sys.path.insert(0, cwd)
        importlib.invalidate_caches()
        logger.debug(f"Added {cwd} to sys.path for solution imports")


def load_solve_routine(reference: Optional[str] = None) -> SolveRoutine:
    """Import the solve routine named by ``reference``.

    The attribute may be a function (used directly), a class (instantiated
    with no arguments, its ``solve`` method used) or an object with a
    ``solve`` method.

    Args:
        reference: ``module:attribute``; ``None`` selects the no-op Solution

    Returns:
        Callable taking ``(input, output)``

    Raises:
        SolutionLoadError: If the module or attribute cannot be loaded
    """
    if reference is None:
        logger.debug("No solution configured, using the default no-op Solution")
        return Solution().solve

    module_name, sep, attribute = reference.partition(":")
    if not sep or not module_name or not attribute:
        raise SolutionLoadError(f"Solution reference must look like 'module:attribute': {reference}")

    _ensure_cwd_importable()
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise SolutionLoadError(f"Cannot import solution module '{module_name}': {e}") from e

    target = module
    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise SolutionLoadError(
                f"Module '{module_name}' has no attribute '{attribute}'"
            ) from e

    if inspect.isclass(target):
        try:
            target = target()
        except Exception as e:
            raise SolutionLoadError(f"Cannot instantiate solution class '{reference}': {e}") from e

    solve = getattr(target, "solve", None)
    if callable(solve):
        logger.debug(f"Using {reference}.solve as solve routine")
        return solve
    if callable(target):
        logger.debug(f"Using {reference} as solve routine")
        return target

    raise SolutionLoadError(f"Solution '{reference}' is neither callable nor has a solve method")
