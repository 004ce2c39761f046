import json

import pytest

from models.config import AppConfig, ENV_INITIAL_MODE, ENV_LOG_PATH, ENV_POLL_MS
from models.state import Mode


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (ENV_POLL_MS, ENV_INITIAL_MODE, ENV_LOG_PATH):
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_missing(tmp_path):
    config = AppConfig.load(tmp_path / "config.json")
    assert config == AppConfig()
    assert config.poll_interval_ms == 50
    assert config.start_mode == Mode.INSERTION


def test_load_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "poll_interval_ms": 20,
        "initial_mode": "Normal",
        "show_footer": False,
    }))
    config = AppConfig.load(path)
    assert config.poll_interval_ms == 20
    assert config.start_mode == Mode.NAVIGATION
    assert config.show_footer is False


def test_invalid_values_fall_back(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"poll_interval_ms": -5, "initial_mode": "exit"}))
    config = AppConfig.load(path)
    assert config.poll_interval_ms == 50
    assert config.initial_mode == "insert"


def test_broken_json_uses_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert AppConfig.load(path) == AppConfig()


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"poll_interval_ms": 20, "log_path": "a.log"}))
    monkeypatch.setenv(ENV_POLL_MS, "75")
    monkeypatch.setenv(ENV_INITIAL_MODE, "normal")
    monkeypatch.setenv(ENV_LOG_PATH, "b.log")
    config = AppConfig.load(path)
    assert config.poll_interval_ms == 75
    assert config.start_mode == Mode.NAVIGATION
    assert config.log_path == "b.log"


def test_save_and_load(tmp_path):
    path = tmp_path / "config.json"
    config = AppConfig(poll_interval_ms=10, initial_mode="normal", show_footer=False)
    assert config.save(path)
    assert AppConfig.load(path) == config


def test_save_failure(tmp_path):
    assert AppConfig().save(tmp_path / "missing" / "config.json") is False


@pytest.mark.parametrize("value", ["false", 0, None, "no"])
def test_show_footer_requires_boolean(tmp_path, value):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"show_footer": value}))
    assert AppConfig.load(path).show_footer is True
