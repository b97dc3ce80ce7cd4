"""
Backend management.

Each backend is a ``BaseBackend`` subclass that renders the per-event
fragments of the generated files. Backends are looked up through the
``Backend`` enum; the order of the enum is the order reported by
``--list-backends``.
"""

from enum import Enum
from typing import List, Tuple, Union

from ..exceptions import UnknownBackendError
from .base import BaseBackend, OutputKind, RenderContext
from .dtrace import DTraceBackend
from .nop import NopBackend
from .simple import SimpleBackend
from .stderr import StderrBackend
from .ust import UstBackend


class Backend(str, Enum):
    NOP = "nop"
    SIMPLE = "simple"
    STDERR = "stderr"
    UST = "ust"
    DTRACE = "dtrace"


_BACKENDS = {
    Backend.NOP: NopBackend,
    Backend.SIMPLE: SimpleBackend,
    Backend.STDERR: StderrBackend,
    Backend.UST: UstBackend,
    Backend.DTRACE: DTraceBackend,
}


def resolve(name: Union[str, Backend]) -> Backend:
    """Map a backend name to its enum member.

    Raises:
        UnknownBackendError: If name is not recognized
    """
    if isinstance(name, Backend):
        return name
    try:
        return Backend(name)
    except ValueError:
        raise UnknownBackendError(name, " ".join(b.value for b in Backend)) from None


def get_backend(name: Union[str, Backend]) -> BaseBackend:
    """Get a backend instance by name or enum member."""
    return _BACKENDS[resolve(name)]()


def get_list() -> List[Tuple[str, str]]:
    """Get a list of (name, description) pairs."""
    return [(b.value, _BACKENDS[b].description) for b in Backend]


def exists(name: str) -> bool:
    """Return whether the given backend exists."""
    return name in {b.value for b in Backend}


__all__ = [
    "Backend",
    "BaseBackend",
    "DTraceBackend",
    "NopBackend",
    "OutputKind",
    "RenderContext",
    "SimpleBackend",
    "StderrBackend",
    "UstBackend",
    "exists",
    "get_backend",
    "get_list",
    "resolve",
]
