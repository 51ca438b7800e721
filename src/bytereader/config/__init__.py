"""
YAML settings for the command line tools.

Nothing is read at import time: the io package never needs config, so a bad
$BYTEREADER_CONFIG only matters to callers of load_config().
"""

from typing import Any, Dict, Optional

from bytereader.config.loader import ConfigProvider, YamlConfigProvider, get_config

_loaded: Dict[Optional[str], Dict[str, Any]] = {}


def load_config(path=None) -> Dict[str, Any]:
    """Load and cache config per path (None = $BYTEREADER_CONFIG or the default file)."""
    key = str(path) if path is not None else None
    if key not in _loaded:
        _loaded[key] = get_config(YamlConfigProvider(path=path))
    return _loaded[key]


def clear_config_cache() -> None:
    _loaded.clear()


__all__ = ["ConfigProvider", "YamlConfigProvider", "get_config", "load_config", "clear_config_cache"]
