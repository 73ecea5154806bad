"""Tests for configuration system."""

import os
from unittest.mock import patch

import yaml

from timenow.config import ConfigManager


def test_config_creation(tmp_path):
    """Test config file creation."""
    config_path = tmp_path / "timenow" / "config.yaml"
    manager = ConfigManager(str(config_path))

    assert config_path.exists()
    assert "defaults" in manager.data
    assert "clipboard" in manager.data


def test_defaults(tmp_path):
    with patch.dict(os.environ, {"TIMENOW_TZ": ""}):
        manager = ConfigManager(str(tmp_path / "config.yaml"))
        assert manager.get_default_format() == "unix"
        assert manager.get_default_timezone() == ""
        assert manager.clipboard_enabled() is True


def test_env_config_path(tmp_path):
    config_path = tmp_path / "from-env.yaml"
    with patch.dict(os.environ, {"TIMENOW_CONFIG": str(config_path)}):
        manager = ConfigManager()
    assert manager.config_path == config_path
    assert config_path.exists()


def test_explicit_path_beats_env(tmp_path):
    with patch.dict(os.environ, {"TIMENOW_CONFIG": str(tmp_path / "env.yaml")}):
        manager = ConfigManager(str(tmp_path / "arg.yaml"))
    assert manager.config_path.name == "arg.yaml"


def test_reads_existing_values(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({
        "defaults": {"format": "rfc3339", "timezone": "-8:30"},
        "clipboard": {"enabled": False},
    }))
    with patch.dict(os.environ, {"TIMENOW_TZ": ""}):
        manager = ConfigManager(str(config_path))
        assert manager.get_default_format() == "rfc3339"
        assert manager.get_default_timezone() == "-8:30"
        assert manager.clipboard_enabled() is False


def test_timenow_tz_overrides_file(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"defaults": {"timezone": "3"}}))
    with patch.dict(os.environ, {"TIMENOW_TZ": "5:30"}):
        manager = ConfigManager(str(config_path))
        assert manager.get_default_timezone() == "5:30"


def test_env_var_resolution(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"defaults": {"format": "${TIMENOW_TEST_FORMAT}"}}))
    with patch.dict(os.environ, {"TIMENOW_TEST_FORMAT": "stamp"}):
        manager = ConfigManager(str(config_path))
        assert manager.get_default_format() == "stamp"


def test_non_env_var_passthrough(tmp_path):
    manager = ConfigManager(str(tmp_path / "config.yaml"))
    assert manager._resolve_env_var("plain_value") == "plain_value"


def test_invalid_yaml_falls_back_to_defaults(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("defaults: [unclosed")
    manager = ConfigManager(str(config_path))
    assert manager.data == {}
    assert manager.get_default_format() == "unix"


def test_non_mapping_yaml(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- just\n- a list\n")
    manager = ConfigManager(str(config_path))
    assert manager.data == {}
    assert manager.clipboard_enabled() is True


def test_malformed_section(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump({"defaults": "stamp"}))
    manager = ConfigManager(str(config_path))
    assert manager.get_default_format() == "unix"


def test_save_round_trip(tmp_path):
    config_path = tmp_path / "config.yaml"
    manager = ConfigManager(str(config_path))
    manager.data["defaults"]["format"] = "ansic"
    manager.save()

    reloaded = ConfigManager(str(config_path))
    assert reloaded.get_default_format() == "ansic"


def test_clipboard_enabled_false_string(tmp_path):
    config_path = tmp_path / "config.yaml"
    config_path.write_text('clipboard:\n  enabled: "false"\n')
    manager = ConfigManager(str(config_path))
    assert manager.clipboard_enabled() is False


def test_clipboard_enabled_string_forms(tmp_path):
    config_path = tmp_path / "config.yaml"
    manager = ConfigManager(str(config_path))
    for raw, expected in [("No", False), ("off", False), ("0", False),
                          ("yes", True), ("TRUE", True), (" on ", True)]:
        manager.data["clipboard"]["enabled"] = raw
        assert manager.clipboard_enabled() is expected, raw


def test_clipboard_enabled_integer(tmp_path):
    manager = ConfigManager(str(tmp_path / "config.yaml"))
    manager.data["clipboard"]["enabled"] = 0
    assert manager.clipboard_enabled() is False
    manager.data["clipboard"]["enabled"] = 1
    assert manager.clipboard_enabled() is True


def test_clipboard_enabled_unrecognised_keeps_default(tmp_path):
    manager = ConfigManager(str(tmp_path / "config.yaml"))
    manager.data["clipboard"]["enabled"] = "sometimes"
    assert manager.clipboard_enabled() is True
