"""Configuration exceptions: settings files, environment, required options."""

from typing import Any

from .base import TracetoolError


class ConfigurationError(TracetoolError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            key=key,
            value=value,
            reason=reason,
        )
        self.key = key
        self.value = value
        self.reason = reason


class MissingOptionError(ConfigurationError):
    """Raised when an output kind needs an option that was not supplied."""

    def __init__(self, option: str, reason: str):
        super().__init__(f"{option} is required for {reason}")
        self.option = option
        self.reason = reason
