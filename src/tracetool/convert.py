"""Stream conversion: run one backend over every declaration line."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .backends import BaseBackend, NopBackend, OutputKind, RenderContext
from .events import Event, is_declaration
from .logging_config import get_logger

logger = get_logger(__name__)

_NOP = NopBackend()


def convert(
    lines: Iterable[str],
    backend: BaseBackend,
    kind: OutputKind,
    context: Optional[RenderContext] = None,
) -> List[str]:
    """Render ``lines`` for one backend and output kind.

    The output is the backend's begin fragment, then a blank line and one
    fragment per declaration, then a blank line and the end fragment.
    Declarations with the ``disable`` property are rendered by the nop
    backend instead of the selected one.

    Args:
        lines: Raw declaration lines (comments and blanks allowed)
        backend: Selected backend
        kind: Output kind to generate
        context: Pass state; a fresh one is used when omitted

    Returns:
        Generated lines without trailing newlines
    """
    ctx = context if context is not None else RenderContext()
    begin, render, end = backend.hooks(kind)
    _, render_disabled, _ = _NOP.hooks(kind)

    out = begin(ctx)
    rendered = 0
    disabled = 0
    for line in lines:
        if not is_declaration(line):
            continue

        event = Event.parse(line)
        out.append("")
        if event.disabled:
            logger.debug("Event %s is disabled, using nop renderer", event.name)
            out.extend(render_disabled(event, ctx))
            disabled += 1
        else:
            out.extend(render(event, ctx))
            rendered += 1

    out.append("")
    out.extend(end(ctx))

    logger.debug(
        "Converted %d events (%d disabled) with %s backend, output %s",
        rendered + disabled,
        disabled,
        backend.name,
        kind.value,
    )
    return out
