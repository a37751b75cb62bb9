"""Shared utilities for caiderun.

This module provides common utilities used across the application.
"""

from .constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_CONFIG_FILE,
    DEFAULT_ENCODING,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SEARCH_DIR,
    EXIT_INPUT_NOT_FOUND,
    EXIT_INVALID_CONFIG,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    INPUT_FILE_DIAGNOSTIC,
    SUPPORTED_CONFIG_FORMATS,
)
from .file_helpers import (
    ensure_parent_directory,
    get_file_extension,
    is_supported_config_format,
    iter_regular_files,
    PathValidationError,
    validate_path_safe,
)
from .logging import get_logger, setup_logging

__all__ = [
    "APP_NAME",
    "APP_VERSION",
    "DEFAULT_CONFIG_FILE",
    "DEFAULT_ENCODING",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_SEARCH_DIR",
    "EXIT_INPUT_NOT_FOUND",
    "EXIT_INVALID_CONFIG",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "INPUT_FILE_DIAGNOSTIC",
    "SUPPORTED_CONFIG_FORMATS",
    "ensure_parent_directory",
    "get_file_extension",
    "get_logger",
    "is_supported_config_format",
    "iter_regular_files",
    "PathValidationError",
    "setup_logging",
    "validate_path_safe",
]
