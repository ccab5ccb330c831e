"""Utility modules for the genetic algorithms framework."""

from genetic_algorithms.utils.logging import get_console, set_verbosity, LogLevel

__all__ = [
    "get_console",
    "set_verbosity",
    "LogLevel",
]
