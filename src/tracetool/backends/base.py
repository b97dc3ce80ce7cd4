"""Base backend interface for tracetool code generation."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..events import Event
from ..exceptions import UnsupportedOutputError


class OutputKind(str, Enum):
    """Artifact produced by one generator run."""

    HEADER = "h"
    SOURCE = "c"
    DESCRIPTOR = "d"
    TAPSET = "stap"

    @property
    def generator_name(self) -> str:
        return _GENERATOR_NAMES[self]


_GENERATOR_NAMES = {
    OutputKind.HEADER: "Header generator",
    OutputKind.SOURCE: "Source generator",
    OutputKind.DESCRIPTOR: "DTrace probe generator",
    OutputKind.TAPSET: "SystemTAP tapset generator",
}


@dataclass
class RenderContext:
    """State threaded through one conversion pass.

    ``index`` is the sequential event index. It starts at 0 for every pass
    and only index-based backends advance it.
    """

    provider: str = "qemu"
    binary: Optional[str] = None
    probe_prefix: Optional[str] = None
    index: int = 0
    names: List[str] = field(default_factory=list)

    def reset(self) -> None:
        self.index = 0
        self.names.clear()

    def next_index(self) -> int:
        current = self.index
        self.index += 1
        return current


Lines = List[str]
BeginHook = Callable[[RenderContext], Lines]
LineHook = Callable[[Event, RenderContext], Lines]
Hooks = Tuple[BeginHook, LineHook, BeginHook]


class BaseBackend(ABC):
    """Abstract base class for trace backends.

    Every hook returns the lines it generates, without trailing newlines.
    """

    name: str = ""
    description: str = ""

    def hooks(self, kind: OutputKind) -> Hooks:
        """Return the (begin, line, end) renderers for an output kind."""
        if kind is OutputKind.HEADER:
            return self.header_begin, self.header_line, self.header_end
        if kind is OutputKind.SOURCE:
            return self.source_begin, self.source_line, self.source_end
        raise UnsupportedOutputError(kind.generator_name, self.name)

    def supports(self, kind: OutputKind) -> bool:
        try:
            self.hooks(kind)
        except UnsupportedOutputError:
            return False
        return True

    def header_begin(self, ctx: RenderContext) -> Lines:
        ctx.reset()
        return []

    @abstractmethod
    def header_line(self, event: Event, ctx: RenderContext) -> Lines:
        """Render the header fragment for one event."""

    def header_end(self, ctx: RenderContext) -> Lines:
        return []

    def source_begin(self, ctx: RenderContext) -> Lines:
        ctx.reset()
        return []

    def source_line(self, event: Event, ctx: RenderContext) -> Lines:
        return []

    def source_end(self, ctx: RenderContext) -> Lines:
        return []


def empty_function(event: Event) -> Lines:
    """Inline function with the event's signature and an empty body."""
    return [
        f"static inline void trace_{event.name}({event.args})",
        "{",
        "}",
    ]


def joined_argnames(event: Event, leading: bool = False) -> str:
    """Comma separated argument names, optionally with a leading ``, ``."""
    names = ", ".join(event.argnames)
    if leading and event.argc > 0:
        return ", " + names
    return names
