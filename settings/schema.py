"""Submission constants schema using Pydantic.

This module defines the immutable set of constants a generator writes for a
submission: where input comes from and where output goes. Once validated the
constants are read-only for the rest of the process.
"""

import codecs
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from utils.constants import DEFAULT_ENCODING, DEFAULT_SEARCH_DIR


class SubmissionConstants(BaseModel):
    """Input/output constants for one submission run.

    A ``None`` value means "not configured": standard input is used when both
    ``input_file`` and ``input_file_pattern`` are unset, standard output when
    ``output_file`` is unset.
    """

    input_file: Optional[str] = Field(
        default=None, description="Explicit input file path"
    )
    input_file_pattern: Optional[str] = Field(
        default=None,
        description="Regular expression searched in file names to pick the input file",
    )
    output_file: Optional[str] = Field(
        default=None, description="Explicit output file path"
    )
    search_dir: str = Field(
        default=DEFAULT_SEARCH_DIR,
        min_length=1,
        description="Directory scanned for files matching input_file_pattern",
    )
    solution: Optional[str] = Field(
        default=None, description="Solve routine reference in 'module:attribute' form"
    )
    encoding: str = Field(
        default=DEFAULT_ENCODING, min_length=1, description="Text encoding of input and output files; stdin and stdout keep their own"
    )

    @field_validator("input_file", "input_file_pattern", "output_file", "solution", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Treat empty values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("input_file_pattern")
    @classmethod
    def validate_pattern(cls, v: Optional[str]) -> Optional[str]:
        """Validate that the input file pattern compiles."""
        if v is None:
            return v
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regular expression {v!r}: {e}") from e
        return v

    @field_validator("solution")
    @classmethod
    def validate_solution(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        module, sep, attribute = v.strip().partition(":")
        if not sep or not module.strip() or not attribute.strip():
            raise ValueError("solution must look like 'module:attribute'")
        return f"{module.strip()}:{attribute.strip()}"

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e
        return v

    @property
    def uses_stdin(self) -> bool:
        """True when neither an input file nor a pattern is configured."""
        return self.input_file is None and self.input_file_pattern is None

    @property
    def uses_stdout(self) -> bool:
        """True when no output file is configured."""
        return self.output_file is None

    model_config = ConfigDict(
        frozen=True,  # Constants are immutable for the process lifetime
        extra="forbid",  # Reject unknown keys
    )
