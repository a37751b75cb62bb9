"""Constants for caiderun.

This module defines shared constants used across the application.
"""

# Exit codes (matching CLI exit codes)
EXIT_SUCCESS = 0
EXIT_INVALID_CONFIG = 1
EXIT_INPUT_NOT_FOUND = 2
EXIT_RUNTIME_ERROR = 3

# Application metadata
APP_NAME = "caiderun"
APP_VERSION = "1.0.0"

# Supported file formats
SUPPORTED_CONFIG_FORMATS = ["yaml", "yml", "json"]

# Default values
DEFAULT_CONFIG_FILE = "caide.yaml"
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_SEARCH_DIR = "."

# Diagnostic printed to stderr once the input file has been picked
INPUT_FILE_DIAGNOSTIC = "Using {name} as input file"
