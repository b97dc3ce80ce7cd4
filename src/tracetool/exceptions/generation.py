"""Generation exceptions: backend and output kind selection."""

from .base import TracetoolError


class GenerationError(TracetoolError):
    """Base class for errors raised while selecting or running a generator."""

    pass


class UnknownBackendError(GenerationError):
    """Raised when a backend name does not match any known backend."""

    def __init__(self, name: str, known: str):
        super().__init__(f"Unknown backend: {name!r}", known=known)
        self.name = name


class UnsupportedOutputError(GenerationError):
    """Raised when a backend cannot produce the requested output kind."""

    def __init__(self, generator: str, backend: str):
        super().__init__(f"{generator} not applicable to {backend} backend")
        self.generator = generator
        self.backend = backend
