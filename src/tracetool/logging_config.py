"""
Logging configuration for tracetool.

Diagnostics go to stderr through rich; generated text is written to stdout
by the CLI and never passes through logging.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Configure logging with rich handler for colored output.

    Args:
        verbose: Enable DEBUG level logging
        quiet: Suppress all but ERROR level logging

    Returns:
        Configured logger instance for tracetool
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    console = Console(stderr=True)

    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_time=verbose,
        show_path=verbose,
    )

    logger = logging.getLogger("tracetool")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Module name (e.g., 'tracetool.convert')
              If None, returns the root tracetool logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger("tracetool")

    if not name.startswith("tracetool"):
        name = f"tracetool.{name}"

    return logging.getLogger(name)
