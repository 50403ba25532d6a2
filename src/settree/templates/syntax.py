"""Placeholder syntax for variable templates (``@{name}`` by default)."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import List

from pydantic import BaseModel, field_validator, model_validator


@lru_cache(maxsize=None)
def _compile_placeholder(opening: str, key_pattern: str, closing: str) -> re.Pattern[str]:
    return re.compile(f"{re.escape(opening)}(?P<key>{key_pattern}){re.escape(closing)}")


class TemplateSyntax(BaseModel):
    """
    Delimiters and key pattern of a placeholder.

    A placeholder is ``opening + key + closing`` where the key matches
    ``key_pattern``. The key pattern is wrapped in a group named ``key``,
    so it must not define a group of that name itself.
    """

    opening: str = "@{"
    closing: str = "}"
    key_pattern: str = "[A-Za-z0-9]+"

    @field_validator("opening", "closing")
    @classmethod
    def validate_delimiter(cls, v: str) -> str:
        if not v:
            raise ValueError("delimiter must not be empty")
        return v

    @field_validator("key_pattern")
    @classmethod
    def validate_key_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as exc:
            raise ValueError(f"invalid key pattern: {exc}") from exc
        return v

    @model_validator(mode="after")
    def validate_placeholder_pattern(self) -> TemplateSyntax:
        try:
            _compile_placeholder(self.opening, self.key_pattern, self.closing)
        except re.error as exc:
            raise ValueError(f"key pattern {self.key_pattern!r} does not fit in a placeholder: {exc}") from exc
        return self

    @property
    def pattern(self) -> re.Pattern[str]:
        """Compiled placeholder regex; built once per distinct syntax."""
        return _compile_placeholder(self.opening, self.key_pattern, self.closing)

    def placeholder(self, key: str) -> str:
        return f"{self.opening}{key}{self.closing}"

    def find_keys(self, text: str) -> List[str]:
        """Keys referenced by ``text``, in order of appearance (repeats kept)."""
        return [match.group("key") for match in self.pattern.finditer(text)]

    def substitute(self, text: str, key: str, value: str) -> str:
        """Replace every placeholder for ``key`` in ``text`` with ``value``."""
        return text.replace(self.placeholder(key), value)


__all__ = ["TemplateSyntax"]
