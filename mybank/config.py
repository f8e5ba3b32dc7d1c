"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .currency import Currency


class BankConfig(BaseSettings):
    """MyBank configuration"""

    model_config = SettingsConfigDict(
        env_prefix="MYBANK_",
        env_file=".env",
        case_sensitive=False,
    )

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    # Account defaults
    default_currency: str = "RON"

    # Notification configuration
    webhook_url: str = ""  # Empty = log notifications instead
    webhook_timeout: float = 5.0

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value

    @field_validator("default_currency")
    @classmethod
    def _check_default_currency(cls, value: str) -> str:
        return Currency.from_code(value).code

    @property
    def currency(self) -> Currency:
        """Default currency as an enum member"""
        return Currency.from_code(self.default_currency)


# Global configuration instance
config = BankConfig()


def get_config() -> BankConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankConfig:
    """Reload configuration from environment"""
    global config
    config = BankConfig()
    return config
