"""Tests for HandpickConfig defaults, TOML loading and env overrides."""

from __future__ import annotations

from pathlib import Path

import pytest

from handpick.config import (
    ENV_FILE,
    ENV_RESTORE,
    HandpickConfig,
    default_candidates_path,
    load_config,
)
from handpick.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolated home directory and no handpick env vars."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv(ENV_FILE, raising=False)
    monkeypatch.delenv(ENV_RESTORE, raising=False)


def test_defaults(tmp_path):
    cfg = HandpickConfig()
    assert cfg.restore_on_startup is True
    assert cfg.persistence_file_path == tmp_path / "home" / ".handpick" / "candidates.json"
    assert cfg.symbol_chars == "_-"


def test_default_path_under_home(tmp_path):
    assert default_candidates_path() == tmp_path / "home" / ".handpick" / "candidates.json"


def test_path_expands_user(tmp_path):
    cfg = HandpickConfig(persistence_file_path="~/c.json")
    assert cfg.persistence_file_path == tmp_path / "home" / "c.json"


def test_missing_config_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "absent.toml")
    assert cfg == HandpickConfig()


def test_load_from_toml(tmp_path):
    f = tmp_path / "config.toml"
    f.write_text(
        "[handpick]\n"
        "restore_on_startup = false\n"
        'persistence_file_path = "/tmp/x.json"\n'
        'symbol_chars = "_.:"\n'
    )
    cfg = load_config(f)
    assert cfg.restore_on_startup is False
    assert cfg.persistence_file_path == Path("/tmp/x.json")
    assert cfg.symbol_chars == "_.:"


def test_other_tables_ignored(tmp_path):
    f = tmp_path / "config.toml"
    f.write_text("[other]\nkey = 1\n")
    assert load_config(f) == HandpickConfig()


def test_env_overrides_file(tmp_path, monkeypatch):
    f = tmp_path / "config.toml"
    f.write_text('[handpick]\npersistence_file_path = "/tmp/from-file.json"\n')
    monkeypatch.setenv(ENV_FILE, "/tmp/from-env.json")
    monkeypatch.setenv(ENV_RESTORE, "false")
    cfg = load_config(f)
    assert cfg.persistence_file_path == Path("/tmp/from-env.json")
    assert cfg.restore_on_startup is False


def test_invalid_toml_raises(tmp_path):
    f = tmp_path / "config.toml"
    f.write_text("[handpick\n")
    with pytest.raises(ConfigError):
        load_config(f)


def test_handpick_not_a_table_raises(tmp_path):
    f = tmp_path / "config.toml"
    f.write_text("handpick = 3\n")
    with pytest.raises(ConfigError):
        load_config(f)


def test_unknown_key_raises(tmp_path):
    f = tmp_path / "config.toml"
    f.write_text("[handpick]\nrestoreOnStartup = true\n")
    with pytest.raises(ConfigError):
        load_config(f)


def test_invalid_restore_value_raises(tmp_path, monkeypatch):
    monkeypatch.setenv(ENV_RESTORE, "maybe")
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.toml")
