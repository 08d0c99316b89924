"""
Human-readable output formatting for the CLI.
"""
from __future__ import annotations

import typer

from ..storage.memory import MemoryStore


def _format_bytes(size: float) -> str:
    """Format byte size in human-readable form."""
    for unit in ("B", "KB", "MB", "GB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} TB"


def print_index(store: MemoryStore) -> None:
    """
    Print each name listed by the store with its size and consistent name.

    Version aliases appear as their own rows since list_files() includes them;
    they have no consistent name of their own and show "-".
    """
    typer.echo(f"Location: {store.location()}")
    names = sorted(store.list_files())
    if not names:
        typer.echo("No metadata stored")
        return

    width = max(len(n) for n in names)
    for name in names:
        size = _format_bytes(len(store.get(name)))
        path = store.consistent_name_for(name) or "-"
        typer.echo(f"  {name:<{width}}  {size:>10}  {path}")
    typer.echo(f"Total: {len(names)} names, {len(list(store.consistent_names()))} consistent")


def print_consistent_names(store: MemoryStore) -> None:
    """Print every consistent name, one per line."""
    for name in sorted(store.consistent_names()):
        typer.echo(name)


def write_blob(blob: bytes) -> None:
    """Write raw bytes to stdout without decoding."""
    typer.echo(blob, nl=False)
