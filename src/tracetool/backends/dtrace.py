"""DTrace/SystemTAP backend.

All runtime logic lives in the header. The backend also produces the
DTrace provider description and the SystemTAP tapset for the same events.
"""

from ..events import Event
from ..exceptions import MissingOptionError
from .base import BaseBackend, Hooks, Lines, OutputKind, RenderContext, joined_argnames

# Identifiers that are keywords in the SystemTAP language.
STAP_RESERVED = {"limit": "_limit"}


def stap_identifier(name: str) -> str:
    return STAP_RESERVED.get(name, name)


class DTraceBackend(BaseBackend):
    name = "dtrace"
    description = "DTrace/SystemTAP backend."

    def hooks(self, kind: OutputKind) -> Hooks:
        if kind is OutputKind.DESCRIPTOR:
            return self.descriptor_begin, self.descriptor_line, self.descriptor_end
        if kind is OutputKind.TAPSET:
            return self.tapset_begin, self.tapset_line, self.tapset_end
        return super().hooks(kind)

    def header_begin(self, ctx: RenderContext) -> Lines:
        ctx.reset()
        return ['#include "trace-dtrace.h"']

    def header_line(self, event: Event, ctx: RenderContext) -> Lines:
        macro = f"{ctx.provider.upper()}_{event.name.upper()}"
        return [
            f"static inline void trace_{event.name}({event.args}) {{",
            f"    if ({macro}_ENABLED()) {{",
            f"        {macro}({joined_argnames(event)});",
            "    }",
            "}",
        ]

    def descriptor_begin(self, ctx: RenderContext) -> Lines:
        ctx.reset()
        return [f"provider {ctx.provider} {{"]

    def descriptor_line(self, event: Event, ctx: RenderContext) -> Lines:
        # provider syntax wants foo() rather than foo(void)
        args = "" if event.args == "void" else event.args
        return [f"        probe {event.name}({args});"]

    def descriptor_end(self, ctx: RenderContext) -> Lines:
        return ["};"]

    def tapset_begin(self, ctx: RenderContext) -> Lines:
        if not ctx.binary:
            raise MissingOptionError("--binary", "SystemTAP tapset generator")
        if not ctx.probe_prefix:
            raise MissingOptionError("--probe-prefix", "SystemTAP tapset generator")
        ctx.reset()
        return []

    def tapset_line(self, event: Event, ctx: RenderContext) -> Lines:
        lines = [
            'probe %s.%s = process("%s").mark("%s")'
            % (ctx.probe_prefix, event.name, ctx.binary, event.name),
            "{",
        ]
        for position, arg in enumerate(event.argnames, start=1):
            lines.append(f"  {stap_identifier(arg)} = $arg{position};")
        lines.append("}")
        return lines

    def tapset_end(self, ctx: RenderContext) -> Lines:
        return []
