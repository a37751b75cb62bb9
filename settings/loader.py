"""Settings loader for submission constants.

This module handles loading YAML/JSON constants files, merging command-line
overrides and validating the result against SubmissionConstants. It also
writes constants files, which is the generator side of the same format.
"""

import json
import pathlib
from typing import Any, Mapping, Optional, Union

import yaml
from pydantic import ValidationError

from settings.schema import SubmissionConstants
from utils import (
    PathValidationError,
    ensure_parent_directory,
    get_logger,
    is_supported_config_format,
    validate_path_safe,
)

logger = get_logger(__name__)

# Optional top-level section holding the constants inside a larger document
CONSTANTS_SECTION = "constants"


class SettingsValidationError(Exception):
    """Raised when loading or validating submission constants fails."""

    pass


def load_config_file(config_path: Union[str, pathlib.Path]) -> dict:
    """Load constants from a YAML or JSON file.

    A document with a top-level ``constants`` mapping yields that mapping;
    otherwise the whole document is taken as the constants.

    Args:
        config_path: Path to configuration file

    Returns:
        Dictionary containing the raw constants

    Raises:
        SettingsValidationError: If file cannot be loaded or parsed
    """
    try:
        config_path = validate_path_safe(
            config_path, must_exist=True, must_be_file=True
        )
    except PathValidationError as e:
        raise SettingsValidationError(f"Invalid configuration path: {e}") from e
    except FileNotFoundError as e:
        raise SettingsValidationError(f"Configuration file not found: {config_path}") from e

    if not is_supported_config_format(config_path):
        raise SettingsValidationError(
            f"Unsupported file format: {config_path.suffix}. "
            "Supported formats: .yaml, .yml, .json"
        )

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            if config_path.suffix.lower() in (".yaml", ".yml"):
                config = yaml.safe_load(f)
            else:
                config = json.load(f)
    except OSError as e:
        raise SettingsValidationError(f"Failed to read configuration file {config_path}: I/O error: {e}") from e
    except yaml.YAMLError as e:
        raise SettingsValidationError(f"Invalid YAML syntax in {config_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SettingsValidationError(f"Invalid JSON syntax in {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SettingsValidationError(f"Failed to decode configuration file {config_path}: Encoding error: {e}") from e

    if config is None:
        raise SettingsValidationError("Configuration file is empty")

    if not isinstance(config, dict):
        raise SettingsValidationError(
            f"Configuration must be a dictionary, got {type(config).__name__}"
        )

    if CONSTANTS_SECTION in config:
        section = config[CONSTANTS_SECTION]
        if not isinstance(section, dict):
            raise SettingsValidationError(
                f"'{CONSTANTS_SECTION}' must be a dictionary, got {type(section).__name__}"
            )
        config = section

    logger.debug(f"Loaded constants from {config_path}: {sorted(config)}")
    return config


def validate_constants(config: Mapping[str, Any]) -> SubmissionConstants:
    """Validate a mapping against SubmissionConstants.

    Args:
        config: Raw constants

    Returns:
        Validated SubmissionConstants instance

    Raises:
        SettingsValidationError: If validation fails with user-friendly error message
    """
    try:
        return SubmissionConstants(**config)
    except ValidationError as e:
        error_msg = _format_validation_error(e)
        raise SettingsValidationError(f"Constants validation failed:\n{error_msg}") from e
    except TypeError as e:
        # Non-string keys
        raise SettingsValidationError(f"Constants validation failed: {e}") from e


def _format_validation_error(error: ValidationError) -> str:
    """Format a Pydantic validation error, one line per failing field."""
    errors = []
    for err in error.errors():
        field_path = " -> ".join(str(loc) for loc in err.get("loc", [])) or "<root>"
        error_msg = err.get("msg", "Validation error")
        error_type = err.get("type", "unknown")
        errors.append(f"  {field_path}: {error_msg} ({error_type})")
    return "\n".join(errors)


def load_constants(
    config_path: Optional[Union[str, pathlib.Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> SubmissionConstants:
    """Load, merge and validate submission constants.

    This is the main entry point for settings. Values from ``config_path``
    come first; every override that is not ``None`` replaces them.

    Args:
        config_path: Optional path to a YAML or JSON constants file
        overrides: Optional values taken from the command line

    Returns:
        Validated SubmissionConstants instance

    Raises:
        SettingsValidationError: If loading or validation fails
    """
    config: dict = {}
    if config_path is not None:
        config.update(load_config_file(config_path))

    for key, value in (overrides or {}).items():
        if value is not None:
            config[key] = value

    return validate_constants(config)


def dump_constants(
    constants: SubmissionConstants,
    output_path: Union[str, pathlib.Path],
    overwrite: bool = False,
) -> pathlib.Path:
    """Write constants to a YAML or JSON file.

    Args:
        constants: Validated constants to write
        output_path: Destination file; format chosen by suffix
        overwrite: Replace an existing file

    Returns:
        Path of the written file

    Raises:
        SettingsValidationError: If the format is unsupported or the file exists
        OSError: If writing fails
    """
    output_path = pathlib.Path(output_path)
    if not is_supported_config_format(output_path):
        raise SettingsValidationError(
            f"Unsupported file format: {output_path.suffix}. "
            "Supported formats: .yaml, .yml, .json"
        )
    if output_path.exists() and not overwrite:
        raise SettingsValidationError(f"Configuration file already exists: {output_path}")

    data = {CONSTANTS_SECTION: constants.model_dump()}

    ensure_parent_directory(output_path)
    with open(output_path, "w", encoding="utf-8") as f:
        if output_path.suffix.lower() == ".json":
            json.dump(data, f, indent=2)
            f.write("\n")
        else:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Constants written to {output_path}")
    return output_path
