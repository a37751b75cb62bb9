import logging
import sys

import pytest

from utils import DEFAULT_LOG_LEVEL, PathValidationError, setup_logging, validate_path_safe


@pytest.fixture
def restore_logging():
    yield
    setup_logging()


def test_setup_logging_uses_default_level(restore_logging):
    setup_logging()
    assert logging.getLogger().level == logging.getLevelName(DEFAULT_LOG_LEVEL)


def test_setup_logging_verbose_and_explicit_levels(restore_logging):
    setup_logging(verbose=True)
    assert logging.getLogger().level == logging.DEBUG

    setup_logging(verbose=True, level="info")
    assert logging.getLogger().level == logging.INFO


def test_setup_logging_writes_to_stderr(restore_logging):
    setup_logging()
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stderr


def test_setup_logging_rejects_unknown_level(restore_logging):
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging(level="chatty")


def test_validate_path_safe_resolves_existing_file(tmp_path):
    path = tmp_path / "caide.yaml"
    path.write_text("", encoding="utf-8")
    assert validate_path_safe(path, must_exist=True, must_be_file=True) == path.resolve()


def test_validate_path_safe_rejects_directory_as_file(tmp_path):
    with pytest.raises(PathValidationError, match="not a file"):
        validate_path_safe(tmp_path, must_be_file=True)


def test_validate_path_safe_missing_and_empty(tmp_path):
    with pytest.raises(FileNotFoundError):
        validate_path_safe(tmp_path / "missing.yaml", must_be_file=True)
    with pytest.raises(PathValidationError, match="empty"):
        validate_path_safe("  ")
