"""Tests for bytereader.config.loader."""

import os
import subprocess
import sys
import tempfile
from pathlib import Path

import pytest
import yaml

from bytereader.config import clear_config_cache, load_config
from bytereader.config.loader import ConfigProvider, YamlConfigProvider, get_config
from bytereader.constants import CONFIG_ENV_VAR, DEFAULT_CONFIG

SRC = Path(__file__).resolve().parent.parent / "src"


def test_yaml_config_provider_loads_file():
    with tempfile.NamedTemporaryFile(
        suffix=".yaml", delete=False, mode="w", encoding="utf-8"
    ) as f:
        yaml.dump({"foo": "bar", "dump": {"columns": 8}}, f)
        path = Path(f.name)
    try:
        provider = YamlConfigProvider(path=path)
        cfg = provider.load()
        assert cfg["foo"] == "bar"
        assert cfg["dump"]["columns"] == 8
        # keys missing from the file fall back to defaults
        assert cfg["dump"]["format"] == "hex"
    finally:
        path.unlink(missing_ok=True)


def test_yaml_config_provider_default_path_exists():
    """Default path points to src/config/config.yaml."""
    provider = YamlConfigProvider()
    assert provider.path.name == "config.yaml"
    cfg = provider.load()
    assert "dump" in cfg and "logging" in cfg


def test_explicit_missing_path_raises(tmp_path):
    provider = YamlConfigProvider(path=tmp_path / "nope.yaml")
    with pytest.raises(FileNotFoundError, match="Config file not found"):
        provider.load()


def test_missing_default_file_yields_defaults(monkeypatch, tmp_path):
    monkeypatch.setattr("bytereader.config.loader.DEFAULT_CONFIG_PATH", tmp_path / "absent.yaml")
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    cfg = YamlConfigProvider().load()
    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG


def test_env_var_overrides_path(monkeypatch, tmp_path):
    path = tmp_path / "env.yaml"
    path.write_text("dump:\n  passes: 3\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    cfg = YamlConfigProvider().load()
    assert cfg["dump"]["passes"] == 3


def test_non_mapping_root_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        YamlConfigProvider(path=path).load()


def test_empty_file_yields_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert YamlConfigProvider(path=path).load() == DEFAULT_CONFIG


def test_get_config_uses_provider():
    class StaticProvider(ConfigProvider):
        def load(self):
            return {"custom": True}

    assert get_config(provider=StaticProvider())["custom"] is True


def test_get_config_default_is_yaml():
    cfg = get_config()
    assert isinstance(cfg, dict)
    assert len(cfg) >= 1


def test_base_provider_not_implemented():
    with pytest.raises(NotImplementedError):
        ConfigProvider().load()


def test_load_config_caches_per_path(tmp_path):
    path = tmp_path / "cached.yaml"
    path.write_text("dump:\n  columns: 4\n", encoding="utf-8")
    clear_config_cache()
    try:
        first = load_config(path)
        path.write_text("dump:\n  columns: 9\n", encoding="utf-8")
        assert load_config(path) is first
        assert first["dump"]["columns"] == 4
        clear_config_cache()
        assert load_config(path)["dump"]["columns"] == 9
    finally:
        clear_config_cache()


def test_reader_imports_with_bad_config_env(tmp_path):
    env = os.environ.copy()
    env[CONFIG_ENV_VAR] = str(tmp_path / "missing.yaml")
    env["PYTHONPATH"] = str(SRC)
    result = subprocess.run(
        [
            sys.executable,
            "-c",
            "import bytereader; from bytereader.io.local import FileReader; print(FileReader().is_opened())",
        ],
        env=env,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "False"
