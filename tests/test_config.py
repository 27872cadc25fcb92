import os
from unittest import mock

from datadog_monitors import config


def test_settings_defaults():
    with mock.patch.dict(os.environ, {}, clear=True):
        settings = config._read_settings()
        assert settings.DATADOG_API_KEY is None
        assert settings.DATADOG_APP_KEY is None
        assert settings.DATADOG_API_URL == "https://api.datadoghq.com/api"
        assert settings.DATADOG_TIMEOUT_S == 12.0


def test_settings_custom():
    env = {
        "DATADOG_API_KEY": "abc",
        "DATADOG_APP_KEY": "def",
        "DATADOG_API_URL": "https://api.datadoghq.eu/api/",
        "DATADOG_TIMEOUT_S": "3.5",
    }
    with mock.patch.dict(os.environ, env, clear=True):
        settings = config._read_settings()
        assert settings.DATADOG_API_KEY == "abc"
        assert settings.DATADOG_APP_KEY == "def"
        assert settings.DATADOG_API_URL == "https://api.datadoghq.eu/api"
        assert settings.DATADOG_TIMEOUT_S == 3.5


def test_settings_invalid_timeout_falls_back():
    with mock.patch.dict(os.environ, {"DATADOG_TIMEOUT_S": "soon"}, clear=True):
        assert config._read_settings().DATADOG_TIMEOUT_S == 12.0


def test_validate_settings_warns_on_missing_keys(monkeypatch, caplog):
    monkeypatch.setattr(config.settings, "DATADOG_API_KEY", None)
    monkeypatch.setattr(config.settings, "DATADOG_APP_KEY", None)
    with caplog.at_level("WARNING", logger="datadog_monitors.config"):
        config.validate_settings()
    assert "DATADOG_API_KEY is not set" in caplog.text
    assert "DATADOG_APP_KEY is not set" in caplog.text
