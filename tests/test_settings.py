import json

import pytest
import yaml
from pydantic import ValidationError

from settings import (
    SettingsValidationError,
    SubmissionConstants,
    dump_constants,
    load_config_file,
    load_constants,
    validate_constants,
)


def test_defaults_use_standard_streams():
    constants = SubmissionConstants()
    assert constants.input_file is None
    assert constants.input_file_pattern is None
    assert constants.output_file is None
    assert constants.uses_stdin
    assert constants.uses_stdout
    assert constants.search_dir == "."


def test_constants_are_immutable():
    constants = SubmissionConstants(input_file="a.txt")
    with pytest.raises(ValidationError):
        constants.input_file = "b.txt"


def test_blank_values_mean_unset():
    constants = SubmissionConstants(input_file="  ", output_file="")
    assert constants.input_file is None
    assert constants.output_file is None


def test_pattern_only_does_not_use_stdin():
    assert not SubmissionConstants(input_file_pattern=r"\.in$").uses_stdin


def test_invalid_pattern_rejected():
    with pytest.raises(SettingsValidationError, match="input_file_pattern"):
        validate_constants({"input_file_pattern": "(unclosed"})


def test_unknown_key_rejected():
    with pytest.raises(SettingsValidationError, match="extra_forbidden"):
        validate_constants({"inputfile": "a.txt"})


def test_bad_solution_reference_rejected():
    with pytest.raises(SettingsValidationError, match="solution"):
        validate_constants({"solution": "module_only"})


def test_unknown_encoding_rejected():
    with pytest.raises(SettingsValidationError, match="encoding"):
        validate_constants({"encoding": "no-such-codec"})


def test_load_yaml_with_constants_section(tmp_path):
    path = tmp_path / "caide.yaml"
    path.write_text(
        "constants:\n  input_file_pattern: '\\.in$'\n  output_file: out.txt\n",
        encoding="utf-8",
    )
    assert load_config_file(path) == {"input_file_pattern": r"\.in$", "output_file": "out.txt"}


def test_load_flat_json(tmp_path):
    path = tmp_path / "caide.json"
    path.write_text(json.dumps({"input_file": "in.txt"}), encoding="utf-8")
    assert load_config_file(path) == {"input_file": "in.txt"}


@pytest.mark.parametrize(
    "name, content, message",
    [
        ("empty.yaml", "", "empty"),
        ("list.yaml", "- a\n- b\n", "must be a dictionary"),
        ("broken.json", "{", "Invalid JSON"),
        ("broken.yaml", "a: [1, 2\n", "Invalid YAML"),
        ("conf.toml", "a = 1\n", "Unsupported file format"),
    ],
)
def test_load_config_file_errors(tmp_path, name, content, message):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    with pytest.raises(SettingsValidationError, match=message):
        load_config_file(path)


def test_missing_config_file(tmp_path):
    with pytest.raises(SettingsValidationError, match="not found"):
        load_config_file(tmp_path / "missing.yaml")


def test_overrides_replace_file_values(tmp_path):
    path = tmp_path / "caide.yaml"
    path.write_text("input_file: a.txt\noutput_file: out.txt\n", encoding="utf-8")

    constants = load_constants(path, overrides={"input_file": "b.txt", "output_file": None})
    assert constants.input_file == "b.txt"
    assert constants.output_file == "out.txt"


def test_empty_override_unsets_value(tmp_path):
    path = tmp_path / "caide.yaml"
    path.write_text("output_file: out.txt\n", encoding="utf-8")

    assert load_constants(path, overrides={"output_file": ""}).uses_stdout


def test_load_constants_without_file():
    assert load_constants() == SubmissionConstants()


def test_dump_then_load_yaml(tmp_path):
    constants = SubmissionConstants(input_file_pattern=r"\.in$", output_file="out.txt")
    path = dump_constants(constants, tmp_path / "caide.yaml")

    assert yaml.safe_load(path.read_text(encoding="utf-8"))["constants"]["output_file"] == "out.txt"
    assert load_constants(path) == constants


def test_dump_refuses_to_overwrite(tmp_path):
    path = tmp_path / "caide.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(SettingsValidationError, match="already exists"):
        dump_constants(SubmissionConstants(), path)
    dump_constants(SubmissionConstants(), path, overwrite=True)
    assert json.loads(path.read_text(encoding="utf-8"))["constants"]["input_file"] is None
