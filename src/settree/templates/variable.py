"""Variable payload stored in template dependency trees."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Variable(BaseModel):
    """
    A named string value that may reference other variables.

    Two variables are equal when both key and value are equal, which is what
    the set tree compares when looking for self-references.
    """

    model_config = ConfigDict(validate_assignment=True)

    key: str
    value: str

    def __str__(self) -> str:
        return f"{self.key}={self.value!r}"


__all__ = ["Variable"]
