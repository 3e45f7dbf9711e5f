"""Tests for runtime configuration loading."""

import json

from eazypm.config_runtime import DEFAULTS, load_runtime_config


def test_defaults(tmp_path):
    cfg = load_runtime_config(tmp_path)
    assert cfg == DEFAULTS
    assert cfg is not DEFAULTS


def test_file_overrides(tmp_path):
    (tmp_path / ".eazypm").mkdir()
    (tmp_path / ".eazypm" / "config.json").write_text(json.dumps({
        "scanner": {"prefix": "safe-", "unknown": "ignored"},
        "timeouts": {"version_check": "not an int"},
    }))

    cfg = load_runtime_config(tmp_path)

    assert cfg["scanner"]["prefix"] == "safe-"
    assert "unknown" not in cfg["scanner"]
    assert cfg["timeouts"]["version_check"] == DEFAULTS["timeouts"]["version_check"]


def test_env_overrides_file(tmp_path, monkeypatch):
    (tmp_path / ".eazypm").mkdir()
    (tmp_path / ".eazypm" / "config.json").write_text(json.dumps({
        "timeouts": {"version_check": 10},
    }))
    monkeypatch.setenv("EAZYPM_TIMEOUTS_VERSION_CHECK", "3")
    monkeypatch.setenv("EAZYPM_PATHS_BACKUP_PREFIX", "bk-")

    cfg = load_runtime_config(tmp_path)

    assert cfg["timeouts"]["version_check"] == 3
    assert cfg["paths"]["backup_prefix"] == "bk-"


def test_invalid_env_value_keeps_default(tmp_path, monkeypatch):
    monkeypatch.setenv("EAZYPM_TIMEOUTS_VERSION_CHECK", "soon")
    assert load_runtime_config(tmp_path)["timeouts"]["version_check"] == 30


def test_corrupt_file_falls_back(tmp_path):
    (tmp_path / ".eazypm").mkdir()
    (tmp_path / ".eazypm" / "config.json").write_text("{")
    assert load_runtime_config(tmp_path) == DEFAULTS
