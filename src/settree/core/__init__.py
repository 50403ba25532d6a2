"""
Set tree core.

Components:
- SetTree: Node of a tree whose branches never repeat a value
- SetTreeError: Base class for library errors
- DuplicateValueError: A value already exists on the branch
- UnknownVariableError: Strict resolution met an undefined placeholder

Example:
    from settree.core import SetTree

    root = SetTree("a")
    root.add_child("b").add_child("c")
    print(root)  # a -> [b -> [c -> []]]
"""

from settree.core.errors import DuplicateValueError, SetTreeError, UnknownVariableError
from settree.core.set_tree import SetTree

__all__ = [
    "SetTree",
    "SetTreeError",
    "DuplicateValueError",
    "UnknownVariableError",
]
