"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and CLI command wrappers
to ensure consistent error handling across all Typer commands.
"""
from __future__ import annotations

import logging
from typing import Callable, TypeVar

import typer

logger = logging.getLogger(__name__)

T = TypeVar('T')

EXIT_CODES = {
    "MetaNotFound": 1,
    "ValueError": 2,
    "FileNotFoundError": 4,
    "NotADirectoryError": 4,
}


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.

    Returns:
    - 1: Metadata not found (MetaNotFound)
    - 2: Invalid argument or configuration (ValueError)
    - 4: Metadata directory missing (FileNotFoundError, NotADirectoryError)
    - 3: Anything else
    """
    return EXIT_CODES.get(type(exc).__name__, 3)


def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.

    Executes the given function, reports any exception on stderr and maps it
    to an exit code using typer.Exit.

    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=exit_code_for(e)) from e
