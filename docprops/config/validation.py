"""
Configuration validation module.
"""

from dataclasses import dataclass


@dataclass
class ValidationResult:
    """Result of a configuration validation."""

    is_valid: bool
    message: str


def validate_log_level(level: str) -> ValidationResult:
    """Validate log level."""
    valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if level.upper() in valid_levels:
        return ValidationResult(True, "Valid log level")
    return ValidationResult(
        False, f"Invalid log level. Must be one of: {', '.join(valid_levels)}"
    )


def validate_log_file(path: str) -> ValidationResult:
    """Validate log file path."""
    from pathlib import Path

    log_dir = Path(path).parent
    if not log_dir.exists():
        return ValidationResult(False, f"Log directory does not exist: {log_dir}")
    return ValidationResult(True, "Valid log file path")


def validate_keyword_marker(marker: str) -> ValidationResult:
    """Validate the character that introduces keyword-style words."""
    if len(marker) != 1:
        return ValidationResult(False, "Keyword marker must be a single character")
    if marker.isalnum() or marker.isspace():
        return ValidationResult(
            False, "Keyword marker must be a punctuation character"
        )
    return ValidationResult(True, "Valid keyword marker")


def validate_word_extra_chars(chars: str) -> ValidationResult:
    """Validate the extra characters allowed inside words."""
    blanks = [c for c in chars if c.isspace()]
    if blanks:
        return ValidationResult(
            False, "Extra word characters must not contain whitespace"
        )
    return ValidationResult(True, "Valid extra word characters")

