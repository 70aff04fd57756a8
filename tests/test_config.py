"""Tests for configuration loading and validation."""

import pytest

from src.api.config import APIConfig
from src.core.config import Config
from src.core.exceptions import InvalidConfigError


def test_config_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("WORKERS", "4")
    monkeypatch.setenv("CACHE_CONTROL", "60")
    monkeypatch.setenv("LOGGER", "1")

    config = Config()

    assert config.PORT == 8080
    assert config.HOST == "127.0.0.1"
    assert config.WORKERS == 4
    assert config.CACHE_CONTROL == 60
    assert config.LOGGER is True


def test_config_defaults(monkeypatch):
    for key in ("PORT", "HOST", "WORKERS", "CACHE_CONTROL", "LOGGER"):
        monkeypatch.delenv(key, raising=False)

    config = Config()

    assert config.PORT == 3000
    assert config.HOST == "0.0.0.0"
    assert config.WORKERS == 1
    assert config.CACHE_CONTROL == 31536000
    assert config.LOGGER is False


def test_bad_int_falls_back_to_default(monkeypatch):
    monkeypatch.setenv("PORT", "not-a-port")
    assert Config().PORT == 3000


@pytest.mark.parametrize("kwargs", [
    {"port": 0},
    {"port": 70000},
    {"workers": 0},
    {"cache_control": -1},
])
def test_invalid_api_config(kwargs):
    with pytest.raises(InvalidConfigError):
        APIConfig(**kwargs).validate()


def test_valid_api_config():
    config = APIConfig(port=8080, workers=2, cache_control=0)
    assert config.validate() is config
