"""Base exception for tracetool."""

from typing import Any


class TracetoolError(Exception):
    """Base exception for all tracetool errors.

    Keyword arguments are kept as ``details`` and appended to the message in
    ``key=value`` form, in the order they were given.
    """

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in details.items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{self.message} ({context})"
