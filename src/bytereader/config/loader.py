"""Config provider protocol and implementations. Extend by adding new providers."""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from bytereader.constants import CONFIG_ENV_VAR, DEFAULT_CONFIG

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent.parent.parent / "config" / "config.yaml"


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigProvider:
    """Protocol for config sources. Implement to add env, remote, etc."""

    def load(self) -> Dict[str, Any]:
        """Return the full config dict."""
        raise NotImplementedError


class YamlConfigProvider(ConfigProvider):
    """
    Load config from a YAML file layered over the built-in defaults.

    Without an explicit path, $BYTEREADER_CONFIG or src/config/config.yaml is
    used; a missing default file just yields the defaults. An explicit path
    that does not exist raises FileNotFoundError.
    """

    def __init__(self, path: Optional[Path] = None):
        self.explicit = path is not None or bool(os.environ.get(CONFIG_ENV_VAR))
        self.path = Path(path or os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)

    def load(self) -> Dict[str, Any]:
        if not self.path.exists():
            if self.explicit:
                raise FileNotFoundError(f"Config file not found: {self.path}")
            return copy.deepcopy(DEFAULT_CONFIG)
        with open(self.path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping: {self.path}")
        return _merge(DEFAULT_CONFIG, data)


def get_config(provider: Optional[ConfigProvider] = None) -> Dict[str, Any]:
    """Get config from the given provider, or default YAML."""
    if provider is None:
        provider = YamlConfigProvider()
    return provider.load()
