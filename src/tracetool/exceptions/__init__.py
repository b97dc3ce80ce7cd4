"""Exception hierarchy for tracetool."""

from .base import TracetoolError
from .config import (
    ConfigurationError,
    InvalidConfigError,
    MissingOptionError,
)
from .generation import (
    GenerationError,
    UnknownBackendError,
    UnsupportedOutputError,
)

__all__ = [
    "TracetoolError",
    "ConfigurationError",
    "InvalidConfigError",
    "MissingOptionError",
    "GenerationError",
    "UnknownBackendError",
    "UnsupportedOutputError",
]
