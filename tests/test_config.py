"""
Tests for configuration management
"""

import pytest
from pydantic import ValidationError

from mybank import config as config_module
from mybank.config import BankConfig, get_config, reload_config
from mybank.currency import Currency


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("MYBANK_LOG_LEVEL", "MYBANK_LOG_FORMAT", "MYBANK_DEFAULT_CURRENCY",
                 "MYBANK_WEBHOOK_URL", "MYBANK_WEBHOOK_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir("/")  # keep a stray .env out of the picture
    yield
    reload_config()


class TestBankConfig:
    """Test BankConfig defaults and environment loading"""

    def test_defaults(self):
        config = BankConfig()

        assert config.log_level == "INFO"
        assert config.log_format == "json"
        assert config.default_currency == "RON"
        assert config.currency == Currency.RON
        assert config.webhook_url == ""
        assert config.webhook_timeout == 5.0

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("MYBANK_LOG_LEVEL", "debug")
        monkeypatch.setenv("MYBANK_DEFAULT_CURRENCY", "eur")
        monkeypatch.setenv("MYBANK_WEBHOOK_URL", "https://hooks.example.com")
        monkeypatch.setenv("MYBANK_WEBHOOK_TIMEOUT", "2.5")

        config = BankConfig()

        assert config.log_level == "DEBUG"
        assert config.currency == Currency.EUR
        assert config.webhook_url == "https://hooks.example.com"
        assert config.webhook_timeout == 2.5

    @pytest.mark.parametrize("field,value", [
        ("log_level", "LOUD"),
        ("log_format", "xml"),
        ("default_currency", "XYZ"),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            BankConfig(**{field: value})

    def test_reload_config(self, monkeypatch):
        monkeypatch.setenv("MYBANK_LOG_FORMAT", "text")

        reloaded = reload_config()

        assert reloaded.log_format == "text"
        assert get_config() is reloaded
        assert config_module.config is reloaded
