"""
tracetool - trace event code generator

Reads trace event declarations and generates the headers, sources, DTrace
provider descriptions and SystemTAP tapsets for the selected tracing
backend.
"""

__version__ = "0.2.0"

from .backends import Backend, OutputKind, get_backend
from .convert import convert
from .events import Event, read_events
from .generate import GeneratorOptions, generate

__all__ = [
    "generate",  # Main entry point
    "convert",
    "Backend",
    "OutputKind",
    "GeneratorOptions",
    "Event",
    "get_backend",
    "read_events",
]
