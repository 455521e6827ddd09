"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

import string

from pydantic import field_validator
from pydantic_settings import BaseSettings


class BankConfig(BaseSettings):
    """Simple bank configuration"""

    # Account number generation
    account_number_length: int = 8
    account_number_alphabet: str = string.ascii_uppercase + string.digits

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    enable_operation_logging: bool = True

    @field_validator("account_number_length")
    @classmethod
    def _check_length(cls, value: int) -> int:
        if value < 1:
            raise ValueError("account_number_length must be at least 1")
        return value

    @field_validator("account_number_alphabet")
    @classmethod
    def _check_alphabet(cls, value: str) -> str:
        if len(set(value)) < 2:
            raise ValueError("account_number_alphabet needs at least 2 distinct characters")
        return value

    @field_validator("log_format")
    @classmethod
    def _check_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value

    class Config:
        env_prefix = "SIMPLE_BANK_"
        env_file = ".env"
        case_sensitive = False


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
