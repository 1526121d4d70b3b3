"""
Configuration package for docprops.
"""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from docprops.config.validation import (
    ValidationResult,
    validate_keyword_marker,
    validate_log_file,
    validate_log_level,
    validate_word_extra_chars,
)

DEFAULT_WORD_EXTRA_CHARS = "+-*/@$%^&_=<>~:"
DEFAULT_KEYWORD_MARKER = ":"


def _check(result: ValidationResult, value: str) -> str:
    if not result.is_valid:
        raise ValueError(result.message)
    return value


class Settings(BaseSettings):
    """Application settings."""

    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None
    CASE_SENSITIVE: bool = False
    WORD_EXTRA_CHARS: str = DEFAULT_WORD_EXTRA_CHARS
    KEYWORD_MARKER: str = DEFAULT_KEYWORD_MARKER

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def _log_level(cls, value: str) -> str:
        return _check(validate_log_level(value), value.upper())

    @field_validator("LOG_FILE")
    @classmethod
    def _log_file(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return _check(validate_log_file(value), value)

    @field_validator("KEYWORD_MARKER")
    @classmethod
    def _keyword_marker(cls, value: str) -> str:
        return _check(validate_keyword_marker(value), value)

    @field_validator("WORD_EXTRA_CHARS")
    @classmethod
    def _word_extra_chars(cls, value: str) -> str:
        return _check(validate_word_extra_chars(value), value)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
