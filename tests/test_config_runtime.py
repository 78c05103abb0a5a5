"""Tests for runtime configuration loading."""

import json

from modeltext.config_runtime import DEFAULTS, load_runtime_config


def _write_config(root, data):
    config_dir = root / ".modeltext"
    config_dir.mkdir()
    (config_dir / "config.json").write_text(json.dumps(data), encoding="utf-8")


def test_defaults_without_config(tmp_path):
    cfg = load_runtime_config(tmp_path)
    assert cfg == DEFAULTS
    assert cfg is not DEFAULTS


def test_file_overrides_defaults(tmp_path):
    _write_config(tmp_path, {"cache": {"max_entries": 5}, "scan": {"skip_traits": []}})
    cfg = load_runtime_config(tmp_path)
    assert cfg["cache"]["max_entries"] == 5
    assert cfg["scan"]["skip_traits"] == []
    assert cfg["scan"]["prelude_namespace"] == "smithy.api"


def test_file_values_of_wrong_type_are_ignored(tmp_path):
    _write_config(tmp_path, {"cache": {"max_entries": "lots"}, "unknown": {"x": 1}})
    cfg = load_runtime_config(tmp_path)
    assert cfg["cache"]["max_entries"] == DEFAULTS["cache"]["max_entries"]
    assert "unknown" not in cfg


def test_env_overrides_file(tmp_path, monkeypatch):
    _write_config(tmp_path, {"cache": {"max_entries": 5}})
    monkeypatch.setenv("MODELTEXT_CACHE_MAX_ENTRIES", "9")
    monkeypatch.setenv("MODELTEXT_SCAN_SKIP_TRAITS", "smithy.api#references, example#internal")
    cfg = load_runtime_config(tmp_path)
    assert cfg["cache"]["max_entries"] == 9
    assert cfg["scan"]["skip_traits"] == ["smithy.api#references", "example#internal"]


def test_invalid_env_value_keeps_default(tmp_path, monkeypatch):
    monkeypatch.setenv("MODELTEXT_CACHE_MAX_ENTRIES", "many")
    cfg = load_runtime_config(tmp_path)
    assert cfg["cache"]["max_entries"] == DEFAULTS["cache"]["max_entries"]


def test_non_positive_capacity_falls_back(tmp_path, monkeypatch):
    monkeypatch.setenv("MODELTEXT_CACHE_MAX_ENTRIES", "0")
    cfg = load_runtime_config(tmp_path)
    assert cfg["cache"]["max_entries"] == DEFAULTS["cache"]["max_entries"]


def test_broken_config_file_falls_back_to_defaults(tmp_path):
    config_dir = tmp_path / ".modeltext"
    config_dir.mkdir()
    (config_dir / "config.json").write_text("{oops", encoding="utf-8")
    assert load_runtime_config(tmp_path) == DEFAULTS
