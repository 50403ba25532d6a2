from __future__ import annotations

"""Errors raised while loading variables files."""

import os
from typing import Any, Dict, List, Sequence

from pydantic import ValidationError

MAX_REPORTED_ERRORS = 3

# Top-level mappings whose entries are reported by name.
_NAMED_SECTIONS = {"variables": "variable", "templates": "template"}


def describe_location(loc: Sequence[Any]) -> str:
    """
    Readable location of a validation error inside a variables file.

    ``("variables", "name")`` becomes ``variable 'name'``; anything else is
    joined with dots (``syntax.opening``).
    """
    if len(loc) >= 2 and loc[0] in _NAMED_SECTIONS:
        return f"{_NAMED_SECTIONS[loc[0]]} {str(loc[1])!r}"
    return ".".join(str(entry) for entry in loc) or "<root>"


class LoaderError(RuntimeError):
    """A variables file could not be read or validated.

    Attributes:
        file_path: The file being loaded.
        message: Short description of the failure.
        cause: Underlying exception, if any.
        invalid_entries: Section name to the variable or template names that
            failed validation, e.g. ``{"variables": ["a"]}``.
    """

    def __init__(self, file_path: str, message: str, *, cause: Exception | None = None):
        self.file_path = file_path
        self.message = message
        self.cause = cause
        self.invalid_entries: Dict[str, List[str]] = {}
        if isinstance(cause, ValidationError):
            self.invalid_entries = self._collect_invalid_entries(cause.errors())
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        base = f"{self.message} ({self._display_path(self.file_path)})"
        if isinstance(self.cause, ValidationError):
            return f"{base}: {self._format_validation_errors(self.cause.errors())}"
        if self.cause:
            return f"{base}: {self.cause}"
        return base

    @staticmethod
    def _display_path(path: str) -> str:
        try:
            return os.path.relpath(path)
        except ValueError:  # pragma: no cover - different drive on Windows
            return path

    @staticmethod
    def _collect_invalid_entries(errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
        entries: Dict[str, List[str]] = {}
        for err in errors:
            loc = err.get("loc", ())
            if len(loc) < 2 or loc[0] not in _NAMED_SECTIONS:
                continue
            names = entries.setdefault(loc[0], [])
            if str(loc[1]) not in names:
                names.append(str(loc[1]))
        return entries

    @staticmethod
    def _format_validation_errors(errors: List[Dict[str, Any]]) -> str:
        snippets = [
            f"{describe_location(err.get('loc', ()))}: {err.get('msg') or err.get('type')}"
            for err in errors[:MAX_REPORTED_ERRORS]
        ]
        remaining = len(errors) - len(snippets)
        if remaining > 0:
            snippets.append(f"... ({remaining} more)")
        return "; ".join(snippets)


__all__ = ["LoaderError", "describe_location"]
