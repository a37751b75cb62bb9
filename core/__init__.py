"""Run coordination."""

from .runner import SubmissionRunner

__all__ = ["SubmissionRunner"]
