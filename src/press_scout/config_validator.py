"""
Configuration validation utilities.

Environment lookups with placeholder detection and actionable error messages.
"""
import os
import warnings
from typing import Optional

from .exceptions import ConfigurationError


def get_required_env(key: str, description: str = None) -> str:
    """
    Get required environment variable with validation.

    :param key: Environment variable name
    :param description: Human-readable description for error messages
    :return: Environment variable value
    :raises: ConfigurationError if not set or a placeholder
    """
    value = os.getenv(key)

    if not value:
        desc = description or key
        raise ConfigurationError(
            f"{key} is required but not set.\n"
            f"Please set it using one of these methods:\n"
            f"  1. Environment variable: export {key}='your-value'\n"
            f"  2. .env file: Create .env in project root with {key}=your-value\n\n"
            f"Description: {desc}"
        )

    if _is_placeholder(value):
        raise ConfigurationError(
            f"{key} appears to be a placeholder value.\n"
            f"Please set a real value. Current value: {_mask_secret(value)}"
        )

    return value


def get_optional_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get optional environment variable, falling back to default for placeholders.

    :param key: Environment variable name
    :param default: Default value if not set
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)

    if value and _is_placeholder(value):
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default

    return value


def get_positive_int_env(key: str, default: int) -> int:
    """
    Get an integer environment variable that must be positive.

    :raises: ConfigurationError if the value is not a positive integer
    """
    raw = get_optional_env(key, str(default))
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be an integer, got '{raw}'")

    if value <= 0:
        raise ConfigurationError(f"{key} must be positive, got {value}")

    return value


def get_float_env(key: str, default: float, minimum: float = None, maximum: float = None) -> float:
    """
    Get a float environment variable within optional inclusive bounds.

    :raises: ConfigurationError if the value is not a number or out of bounds
    """
    raw = get_optional_env(key, str(default))
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a number, got '{raw}'")

    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        raise ConfigurationError(f"{key} must be between {minimum} and {maximum}, got {value}")

    return value


def validate_choice(value: str, choices: tuple, name: str) -> str:
    """
    Validate that a (case-insensitive) value is one of the allowed choices.

    :return: Lowercased value
    :raises: ConfigurationError if not allowed
    """
    normalized = (value or "").strip().lower()
    if normalized not in choices:
        raise ConfigurationError(
            f"{name} must be one of {', '.join(choices)}; got '{value}'"
        )
    return normalized


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate file/directory path.

    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :param must_exist: Whether path must exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")

    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Please check the path and ensure the file/directory exists."
        )

    return path


def _is_placeholder(value: str) -> bool:
    if not value:
        return False

    placeholder_patterns = [
        "your_",
        "placeholder",
        "xxx",
        "sk-0000",
        "replace",
        "todo",
    ]

    value_lower = value.lower()
    return any(pattern in value_lower for pattern in placeholder_patterns)


def _mask_secret(secret: str, show_chars: int = 4) -> str:
    """Mask secret for safe display in error messages."""
    if not secret or len(secret) <= show_chars * 2:
        return "***"

    return f"{secret[:show_chars]}...{secret[-show_chars:]}"
