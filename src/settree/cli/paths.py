from __future__ import annotations

"""Utilities for resolving the variables file used by the CLI."""

from pathlib import Path

DEFAULT_VARIABLES_FILE = "variables.yaml"


def variables_path(path: str | None) -> str:
    return path or str(Path.cwd() / DEFAULT_VARIABLES_FILE)


__all__ = ["DEFAULT_VARIABLES_FILE", "variables_path"]
