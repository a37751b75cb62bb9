"""Submission constants: schema, loading and writing."""

from .loader import (
    SettingsValidationError,
    dump_constants,
    load_config_file,
    load_constants,
    validate_constants,
)
from .schema import SubmissionConstants

__all__ = [
    "SubmissionConstants",
    "SettingsValidationError",
    "dump_constants",
    "load_config_file",
    "load_constants",
    "validate_constants",
]
