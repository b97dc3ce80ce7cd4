"""Output dispatch: validate a backend/output pairing and produce a file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .backends import Backend, OutputKind, RenderContext, get_backend, resolve
from .convert import convert
from .exceptions import MissingOptionError, UnsupportedOutputError
from .logging_config import get_logger

logger = get_logger(__name__)

AUTOGEN_NOTICE = "/* This file is autogenerated by tracetool, do not edit. */"
HEADER_GUARD = "TRACE_H"
COMMON_HEADER = "qemu-common.h"

# Output kinds only the dtrace backend can produce.
DTRACE_ONLY = (OutputKind.DESCRIPTOR, OutputKind.TAPSET)


@dataclass(frozen=True)
class GeneratorOptions:
    """Selection parameters fixed before any line is converted."""

    binary: Optional[str] = None
    target_type: Optional[str] = None
    target_arch: Optional[str] = None
    probe_prefix: Optional[str] = None
    provider: str = "qemu"

    def resolve_probe_prefix(self) -> str:
        """Explicit prefix, or ``<provider>.<target-type>.<target-arch>``."""
        if self.probe_prefix:
            return self.probe_prefix
        if not self.target_type:
            raise MissingOptionError("--target-type", "SystemTAP tapset generator")
        if not self.target_arch:
            raise MissingOptionError("--target-arch", "SystemTAP tapset generator")
        return f"{self.provider}.{self.target_type}.{self.target_arch}"


def validate(backend: Backend, kind: OutputKind, options: GeneratorOptions) -> None:
    """Check the backend/output pairing and required options.

    Raises:
        UnsupportedOutputError: If the backend cannot produce ``kind``
        MissingOptionError: If a tapset prerequisite is missing
    """
    if kind in DTRACE_ONLY and backend is not Backend.DTRACE:
        raise UnsupportedOutputError(kind.generator_name, backend.value)

    if kind is OutputKind.TAPSET:
        if not options.binary:
            raise MissingOptionError("--binary", kind.generator_name)
        options.resolve_probe_prefix()


def _wrap(kind: OutputKind, body: List[str]) -> List[str]:
    if kind is OutputKind.HEADER:
        return [
            f"#ifndef {HEADER_GUARD}",
            f"#define {HEADER_GUARD}",
            "",
            AUTOGEN_NOTICE,
            "",
            f'#include "{COMMON_HEADER}"',
            *body,
            f"#endif /* {HEADER_GUARD} */",
        ]
    return [AUTOGEN_NOTICE, *body]


def generate(
    lines: Iterable[str],
    backend: Union[str, Backend],
    kind: Union[str, OutputKind],
    options: Optional[GeneratorOptions] = None,
) -> str:
    """Generate one complete output file.

    Validation happens before the first input line is read, so a failing
    run produces no output at all.

    Args:
        lines: Declaration lines
        backend: Backend name or enum member
        kind: Output kind or its flag value ("h", "c", "d", "stap")
        options: Binary path, target and probe prefix settings

    Returns:
        The generated text, newline terminated
    """
    backend = resolve(backend)
    kind = OutputKind(kind)
    options = options or GeneratorOptions()

    validate(backend, kind, options)

    ctx = RenderContext(provider=options.provider, binary=options.binary)
    if kind is OutputKind.TAPSET:
        ctx.probe_prefix = options.resolve_probe_prefix()

    logger.debug("Generating %s output with %s backend", kind.name.lower(), backend.value)
    body = convert(lines, get_backend(backend), kind, ctx)
    return "\n".join(_wrap(kind, body)) + "\n"
