"""Command-line interface for tracetool"""

import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .backends import Backend, OutputKind, get_list
from .config import load_config
from .exceptions import ConfigurationError, TracetoolError
from .generate import generate
from .logging_config import setup_logging

app = typer.Typer(
    name="tracetool",
    help="Generate tracing code from trace event declarations.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console(stderr=True)


def _pick_backend(flags: List[Backend], fallback: Optional[str]) -> Backend:
    if len(flags) > 1:
        names = ", ".join(f"--{b.value}" for b in flags)
        raise ConfigurationError(f"Only one backend may be selected, got {names}")
    if flags:
        return flags[0]
    if fallback:
        return Backend(fallback)
    raise ConfigurationError("A backend is required (--nop, --simple, --stderr, --ust, --dtrace)")


def _pick_output(flags: List[OutputKind]) -> OutputKind:
    if len(flags) != 1:
        raise ConfigurationError("Exactly one output kind is required (-h, -c, -d, --stap)")
    return flags[0]


@app.command()
def main(
    input_file: typer.FileText = typer.Argument(
        "-",
        help="Trace events file; '-' or no argument reads standard input",
    ),
    nop: bool = typer.Option(False, "--nop", help="Tracing disabled"),
    simple: bool = typer.Option(False, "--simple", help="Simple built-in backend"),
    stderr: bool = typer.Option(False, "--stderr", help="Stderr built-in backend"),
    ust: bool = typer.Option(False, "--ust", help="LTTng User Space Tracing backend"),
    dtrace: bool = typer.Option(False, "--dtrace", help="DTrace/SystemTAP backend"),
    backend: Optional[str] = typer.Option(
        None,
        "--backend",
        "-b",
        help="Backend by name, as an alternative to the backend flags",
    ),
    header: bool = typer.Option(False, "-h", help="Generate .h file"),
    source: bool = typer.Option(False, "-c", help="Generate .c file"),
    descriptor: bool = typer.Option(False, "-d", help="Generate .d file (DTrace only)"),
    stap: bool = typer.Option(False, "--stap", help="Generate .stp file (DTrace with SystemTAP only)"),
    binary: Optional[str] = typer.Option(
        None, "--binary", help="Full path to QEMU binary (tapset output)"
    ),
    target_arch: Optional[str] = typer.Option(
        None, "--target-arch", help="QEMU emulator target arch"
    ),
    target_type: Optional[str] = typer.Option(
        None, "--target-type", help="QEMU emulator target type ('system' or 'user')"
    ),
    probe_prefix: Optional[str] = typer.Option(
        None,
        "--probe-prefix",
        help="Prefix for dtrace probe names (default: qemu.TARGET-TYPE.TARGET-ARCH)",
    ),
    check_backend: bool = typer.Option(
        False, "--check-backend", help="Exit successfully without generating anything"
    ),
    list_backends: bool = typer.Option(
        False, "--list-backends", help="Print the available backends and exit"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all but ERROR logging"),
    version: bool = typer.Option(False, "--version", help="Show version and exit"),
):
    """
    Convert trace event declarations into tracing code.

    [bold cyan]Examples:[/bold cyan]

      tracetool --simple -h < trace-events > trace.h

      tracetool --dtrace -d trace-events > trace-dtrace.dtrace

      tracetool --dtrace --stap --binary /usr/bin/qemu --target-type system --target-arch x86_64 < trace-events
    """
    if version:
        typer.echo(f"tracetool {__version__}")
        raise typer.Exit(0)

    # used by ./configure to probe for backend support
    if check_backend:
        raise typer.Exit(0)

    if list_backends:
        typer.echo(" ".join(name for name, _ in get_list()))
        raise typer.Exit(0)

    if verbose and quiet:
        console.print("[red]Error:[/red] --verbose and --quiet are mutually exclusive")
        raise typer.Exit(1)

    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = load_config(
            config_file=config,
            backend=backend,
            binary=binary,
            target_arch=target_arch,
            target_type=target_type,
            probe_prefix=probe_prefix,
            verbose=verbose,
            quiet=quiet,
        )
        # tracetool.toml and TRACETOOL_VERBOSITY may change the level
        logger = setup_logging(
            verbose=settings.verbosity == "verbose",
            quiet=settings.verbosity == "quiet",
        )
        logger.debug("Loaded settings: %s", settings)

        flags = {
            Backend.NOP: nop,
            Backend.SIMPLE: simple,
            Backend.STDERR: stderr,
            Backend.UST: ust,
            Backend.DTRACE: dtrace,
        }
        selected = _pick_backend([b for b, on in flags.items() if on], settings.backend)

        kinds = {
            OutputKind.HEADER: header,
            OutputKind.SOURCE: source,
            OutputKind.DESCRIPTOR: descriptor,
            OutputKind.TAPSET: stap,
        }
        kind = _pick_output([k for k, on in kinds.items() if on])

        text = generate(input_file, selected, kind, settings.generator_options())

    except TracetoolError as e:
        logger.debug("%s: %s", e.__class__.__name__, e)
        console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during generation")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    sys.stdout.write(text)
    sys.stdout.flush()


if __name__ == "__main__":
    app()
