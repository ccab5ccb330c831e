"""Logging utilities for the genetic algorithms framework."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


_console = Console(legacy_windows=True, safe_box=True)


class LogLevel(IntEnum):
    """Log verbosity levels."""
    SILENT = 0
    MINIMAL = 1
    NORMAL = 2
    VERBOSE = 3
    DEBUG = 4


# Global verbosity setting
_verbosity = LogLevel.NORMAL
_logger: logging.Logger | None = None


def set_verbosity(level: LogLevel | str | int) -> None:
    """Set the global verbosity level."""
    global _verbosity

    if isinstance(level, str):
        level = LogLevel[level.upper()]
    elif isinstance(level, int):
        level = LogLevel(level)

    _verbosity = level

    if _logger:
        if level == LogLevel.SILENT:
            _logger.setLevel(logging.CRITICAL + 1)
        elif level == LogLevel.MINIMAL:
            _logger.setLevel(logging.WARNING)
        elif level == LogLevel.NORMAL:
            _logger.setLevel(logging.INFO)
        else:  # VERBOSE, DEBUG
            _logger.setLevel(logging.DEBUG)


def get_console() -> Console:
    """Get the shared rich console."""
    return _console


def get_logger(name: str = "genetic_algorithms") -> logging.Logger:
    """Get a configured logger instance."""
    global _logger

    if _logger is None:
        _logger = logging.getLogger(name)
        _logger.handlers.clear()
        _logger.propagate = False

        handler = RichHandler(
            console=_console,
            show_time=True,
            show_path=False,
            markup=True,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        _logger.addHandler(handler)

        set_verbosity(_verbosity)

    return _logger


def log_event(
    event: str,
    level: LogLevel = LogLevel.NORMAL,
    **kwargs: Any,
) -> None:
    """Log an event with optional structured data."""
    if _verbosity < level:
        return

    logger = get_logger()

    if kwargs:
        details = " | ".join(f"{k}={v}" for k, v in kwargs.items())
        message = f"[{event}] {details}"
    else:
        message = f"[{event}]"

    if level <= LogLevel.MINIMAL:
        logger.warning(message)
    elif level == LogLevel.NORMAL:
        logger.info(message)
    else:
        logger.debug(message)


def log_generation(
    gen: int,
    offspring: int,
    discarded: int,
    mutations: int,
    **extra: Any,
) -> None:
    """Log generation progress (verbose level)."""
    log_event(
        f"GEN {gen:03d}",
        level=LogLevel.VERBOSE,
        offspring=offspring,
        discarded=discarded,
        mutations=mutations,
        **extra,
    )


def print_header(title: str) -> None:
    """Print a styled header."""
    if _verbosity >= LogLevel.MINIMAL:
        _console.print()
        _console.print(f"[bold blue]{'-' * 60}[/bold blue]")
        _console.print(f"[bold blue]  {title}[/bold blue]")
        _console.print(f"[bold blue]{'-' * 60}[/bold blue]")
        _console.print()


def print_result(result: str, score: float, **stats: Any) -> None:
    """Print the final result."""
    if _verbosity >= LogLevel.MINIMAL:
        _console.print()
        _console.print("[bold green]Result[/bold green]")
        _console.print(f"[dim]{'-' * 60}[/dim]")
        _console.print(result)
        _console.print(f"[dim]{'-' * 60}[/dim]")

        stat_str = f"Fitness: {score:g}"
        if stats:
            stat_str += " | " + " | ".join(f"{k}: {v}" for k, v in stats.items())
        _console.print(f"[dim]{stat_str}[/dim]")
        _console.print()
