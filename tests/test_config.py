from decimal import Decimal

import pytest
from pydantic import ValidationError

from canteen.core.config import EnvironmentMode, Settings, get_settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.env_mode == EnvironmentMode.DEVELOPMENT
    assert settings.is_development
    assert settings.tax_rate == Decimal("0.05")
    assert settings.enforce_status_sequence is True
    assert settings.cors_origins_list == ["*"]


def test_env_mode_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("ENV_MODE", "PRODUCTION")
    settings = Settings(_env_file=None)
    assert settings.env_mode == EnvironmentMode.PRODUCTION
    assert settings.is_production


def test_invalid_env_mode(monkeypatch):
    monkeypatch.setenv("ENV_MODE", "qa")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("ENFORCE_STATUS_SEQUENCE", "false")
    monkeypatch.setenv("TAX_RATE", "0.18")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, https://canteen.example.edu")
    settings = Settings(_env_file=None)
    assert settings.enforce_status_sequence is False
    assert settings.tax_rate == Decimal("0.18")
    assert settings.cors_origins_list == [
        "http://localhost:5173",
        "https://canteen.example.edu",
    ]


def test_get_settings_is_cached():
    get_settings.cache_clear()
    assert get_settings() is get_settings()
