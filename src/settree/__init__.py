"""
Settree - a tree whose branches never repeat a value.

The set tree drives dependency expansion: each node expands into the values
it depends on, duplicates along a branch are rejected (so self-references
cannot loop), and a bottom-up pairing walk folds results back to the root.
Variable templates (``@{name}`` placeholders) are the bundled consumer.
"""

from importlib.metadata import PackageNotFoundError, version

from settree.core import DuplicateValueError, SetTree, SetTreeError, UnknownVariableError
from settree.templates import TemplateSyntax, Variable, VariableResolver

try:
    __version__ = version("settree")
except PackageNotFoundError:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "SetTree",
    "SetTreeError",
    "DuplicateValueError",
    "UnknownVariableError",
    "Variable",
    "TemplateSyntax",
    "VariableResolver",
]
