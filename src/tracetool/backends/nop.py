"""Tracing disabled.

Every event becomes an empty inline function, so tracing costs nothing at
runtime. Events carrying the ``disable`` property are rendered by this
backend whatever backend is selected.
"""

from ..events import Event
from .base import BaseBackend, Hooks, Lines, OutputKind, RenderContext, empty_function


class NopBackend(BaseBackend):
    name = "nop"
    description = "Tracing disabled."

    def hooks(self, kind: OutputKind) -> Hooks:
        if kind in (OutputKind.DESCRIPTOR, OutputKind.TAPSET):
            return self._no_begin, self._no_line, self._no_begin
        return super().hooks(kind)

    def header_line(self, event: Event, ctx: RenderContext) -> Lines:
        return empty_function(event)

    # Disabled events are left out of probe descriptions and tapsets.
    def _no_begin(self, ctx: RenderContext) -> Lines:
        return []

    def _no_line(self, event: Event, ctx: RenderContext) -> Lines:
        return []
