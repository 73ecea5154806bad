"""Configuration management for timenow."""

import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any

import yaml

_log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.config/timenow/config.yaml"

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0", ""})

DEFAULT_CONFIG: Dict[str, Any] = {
    "defaults": {
        "format": "unix",
        "timezone": "",
    },
    "clipboard": {
        "enabled": True,
    },
}


class ConfigManager:
    """Manage timenow configuration from YAML."""

    def __init__(self, config_path: Optional[str] = None):
        path = config_path or os.environ.get("TIMENOW_CONFIG") or DEFAULT_CONFIG_PATH
        self.config_path = Path(path).expanduser()
        self.data = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        if not self.config_path.exists():
            self._create_default_config()
        return self._read_yaml()

    def _read_yaml(self) -> Dict[str, Any]:
        """Read and parse YAML file."""
        try:
            with open(self.config_path, "r") as f:
                content = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            _log.warning("Error reading config %s: %s", self.config_path, e)
            return {}
        if not isinstance(content, dict):
            return {}
        return content

    def _create_default_config(self) -> None:
        """Create default configuration file."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w") as f:
                yaml.dump(DEFAULT_CONFIG, f, default_flow_style=False)
        except OSError as e:
            _log.warning("Could not create config %s: %s", self.config_path, e)

    def _resolve_env_var(self, value: str) -> str:
        """Resolve environment variable references like ${VAR_NAME}."""
        if not value.startswith("${") or not value.endswith("}"):
            return value

        var_name = value[2:-1]
        return os.getenv(var_name, "")

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.data.get(name)
        return section if isinstance(section, dict) else {}

    def get_default_format(self) -> str:
        """Get the format used when --format is not given."""
        value = self._section("defaults").get("format") or "unix"
        return self._resolve_env_var(str(value))

    def get_default_timezone(self) -> str:
        """Get the timezone used when --timezone is not given.

        TIMENOW_TZ takes precedence over the config file.
        """
        env = os.environ.get("TIMENOW_TZ")
        if env:
            return env
        value = self._section("defaults").get("timezone") or ""
        return self._resolve_env_var(str(value))

    def clipboard_enabled(self) -> bool:
        """Whether results are copied to the clipboard."""
        value = self._section("clipboard").get("enabled", True)
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return value != 0
        if isinstance(value, str):
            value = self._resolve_env_var(value).strip().lower()
            if value in _FALSE_STRINGS:
                return False
            if value in _TRUE_STRINGS:
                return True
        _log.warning("Ignoring clipboard.enabled=%r, expected true or false", value)
        return True

    def save(self) -> None:
        """Save configuration to file."""
        with open(self.config_path, "w") as f:
            yaml.dump(self.data, f, default_flow_style=False)
