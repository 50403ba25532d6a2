from __future__ import annotations

"""Shared helpers for loading variables files with CLI-friendly errors."""

from pathlib import Path
from typing import Callable, TypeVar

import typer
from rich.console import Console
from rich.markup import escape

from settree.io.errors import LoaderError

R = TypeVar("R")


def load_or_exit(
    loader_fn: Callable[[str], R],
    path: str,
    *,
    console: Console,
    verbose_errors: bool = False,
) -> R:
    if not Path(path).exists():
        console.print(f"[red]Path not found:[/red] {escape(path)}")
        raise typer.Exit(code=1)
    try:
        return loader_fn(path)
    except LoaderError as err:
        if verbose_errors and err.cause:
            console.print(f"[red]Failed to load variables:[/red] {escape(err.message)}\n{escape(str(err.cause))}")
        else:
            console.print(f"[red]Failed to load variables:[/red] {escape(str(err))}")
        raise typer.Exit(code=1)


__all__ = ["load_or_exit"]
