"""Tests for settings loading and validation."""

import pytest

from config import load_config, load_settings_conf, validate_settings, SettingsError, DEFAULTS
from config.__main__ import write_example
from config.lib.load_settings_conf import ConfigValidationError

def write_settings(tmp_path, body: str):
    (tmp_path / "settings.conf").write_text(body)
    return str(tmp_path)

def test_missing_file(tmp_path):
    with pytest.raises(SettingsError, match="Settings file not found"):
        load_settings_conf(str(tmp_path))

def test_defaults_fill_missing_settings(tmp_path):
    path = write_settings(tmp_path, "[DEFAULT]\nport = 9000\n")

    settings = load_config(path)

    assert settings["port"] == 9000
    assert settings["host"] == DEFAULTS["host"]
    assert settings["subgraph_endpoint"] == DEFAULTS["subgraph_endpoint"]
    assert settings["request_timeout"] == 10.0
    assert settings["log_level"] == "INFO"

def test_settings_are_converted(tmp_path):
    path = write_settings(tmp_path, (
        "[DEFAULT]\n"
        "subgraph_endpoint = http://localhost:8000/subgraphs/name/marketplace\n"
        "host = 0.0.0.0\n"
        "request_timeout = 2.5\n"
        "log_level = debug\n"
    ))

    settings = load_config(path)

    assert settings["subgraph_endpoint"] == "http://localhost:8000/subgraphs/name/marketplace"
    assert settings["host"] == "0.0.0.0"
    assert settings["request_timeout"] == 2.5
    assert settings["log_level"] == "DEBUG"

@pytest.mark.parametrize("key, value, message", [
    ("subgraph_endpoint", "ftp://example.com", "must be an http(s) URL"),
    ("port", "70000", "must be between 1 and 65535"),
    ("port", "eighty", "must be an integer"),
    ("request_timeout", "0", "must be greater than 0"),
    ("request_timeout", "soon", "must be a number"),
    ("log_level", "LOUD", "must be one of")
])
def test_invalid_values(key, value, message):
    settings = dict(DEFAULTS, **{key: value})

    with pytest.raises(SettingsError) as exc_info:
        validate_settings(settings)
    assert message in str(exc_info.value)
    assert f"{key}: {value}" in str(exc_info.value)

def test_empty_setting_is_missing():
    settings = dict(DEFAULTS, host="")

    with pytest.raises(SettingsError, match="Missing required settings"):
        validate_settings(settings)

def test_load_config_adds_context(tmp_path):
    path = write_settings(tmp_path, "[DEFAULT]\nport = 0\n")

    with pytest.raises(SettingsError, match="Configuration Error"):
        load_config(path)

def test_example_round_trips(tmp_path):
    example_path = write_example(tmp_path / "examples")
    (tmp_path / "settings.conf").write_text(example_path.read_text())

    settings = load_config(str(tmp_path))

    assert settings["port"] == int(DEFAULTS["port"])
    assert settings["subgraph_endpoint"] == DEFAULTS["subgraph_endpoint"]

def test_validation_message_groups_problems():
    errors = ConfigValidationError()
    assert not errors.has_errors()

    errors.missing.append("host")
    errors.invalid_values.append("port: x (must be an integer)")

    assert errors.has_errors()
    assert errors.format_message() == (
        "Missing required settings:\n"
        "  - host\n"
        "\n"
        "Invalid values:\n"
        "  - port: x (must be an integer)"
    )

def test_every_invalid_value_is_reported():
    settings = dict(DEFAULTS, port="eighty", request_timeout="0")

    with pytest.raises(SettingsError) as exc_info:
        validate_settings(settings)
    assert "port: eighty" in str(exc_info.value)
    assert "request_timeout: 0" in str(exc_info.value)
