from __future__ import annotations

"""Error types raised by the set tree and its consumers."""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from settree.core.set_tree import SetTree


class SetTreeError(Exception):
    """Base class for settree errors."""


class DuplicateValueError(SetTreeError):
    """Raised when a new child would repeat a value already on its ancestor chain.

    The tree is left exactly as it was before the failing insertion.

    Attributes:
        node: The existing node whose value conflicts with the rejected one.
        value: The value that could not be inserted.
        parent: The node the value was being added to, if known.
    """

    def __init__(self, node: SetTree[Any], value: Any, parent: Optional[SetTree[Any]] = None):
        self.node = node
        self.value = value
        self.parent = parent
        super().__init__(f"Node with value '{node.value}' already exists in this branch")


class UnknownVariableError(SetTreeError):
    """Raised in strict resolution when a placeholder names no known variable."""

    def __init__(self, key: str, referenced_by: str):
        self.key = key
        self.referenced_by = referenced_by
        super().__init__(f"Unknown variable '{key}' referenced by '{referenced_by}'")


__all__ = ["SetTreeError", "DuplicateValueError", "UnknownVariableError"]
