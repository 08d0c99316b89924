"""
tuf-memstore CLI

Loads a directory of metadata files into a MemoryStore and shows how they
are indexed:
- index: List role names and version aliases with sizes
- cat: Print the bytes stored under a name, optionally size-limited
- names: List consistent (digest-addressed) names
"""
from __future__ import annotations

import logging
from pathlib import Path

import typer

from .constants import NO_SIZE_LIMIT
from .operations import load_directory, run_and_exit
from .operations.printers import print_consistent_names, print_index, write_blob
from .settings import Settings, create_settings_from_env

app = typer.Typer(name="tuf-memstore", help="In-memory trust-metadata store CLI")


def _settings() -> Settings:
    return run_and_exit(create_settings_from_env)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging from TUF_MEMSTORE_LOG_LEVEL (or --verbose)."""
    level = logging.DEBUG if verbose else _settings().log_level_value
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def index(
    directory: Path = typer.Argument(..., help="Directory of metadata files"),
) -> None:
    """List role names and version aliases with their sizes."""

    def _index() -> None:
        store = load_directory(directory, settings=_settings())
        print_index(store)

    run_and_exit(_index)


@app.command()
def cat(
    directory: Path = typer.Argument(..., help="Directory of metadata files"),
    name: str = typer.Argument(..., help="Role name, version alias or consistent name"),
    size: int = typer.Option(NO_SIZE_LIMIT, "--size", help="Maximum bytes to print (-1 for the store maximum)"),
) -> None:
    """Print the bytes stored under NAME."""

    def _cat() -> None:
        store = load_directory(directory, settings=_settings())
        write_blob(store.get_sized(name, size))

    run_and_exit(_cat)


@app.command()
def names(
    directory: Path = typer.Argument(..., help="Directory of metadata files"),
) -> None:
    """List consistent (digest-addressed) names."""

    def _names() -> None:
        store = load_directory(directory, settings=_settings())
        print_consistent_names(store)

    run_and_exit(_names)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
