"""Formatting helpers for CLI presentation."""

from __future__ import annotations

from typing import Dict, Mapping

from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from settree.core.errors import DuplicateValueError
from settree.core.set_tree import SetTree
from settree.templates.variable import Variable


def format_variable(variable: Variable) -> str:
    return f"[bold]{escape(variable.key)}[/bold] = {escape(repr(variable.value))}"


def build_variable_tree(root: SetTree[Variable]) -> Tree:
    """Render an expanded dependency tree, root first."""
    view = Tree(format_variable(root.value))
    branches: Dict[int, Tree] = {id(root): view}
    for node in root.preorder():
        if node is root:
            continue
        branches[id(node)] = branches[id(node.parent)].add(format_variable(node.value))
    return view


def build_variables_table(variables: Mapping[str, str], title: str = "Variables") -> Table:
    table = Table(title=title)
    table.add_column("Key")
    table.add_column("Value")
    for key, value in variables.items():
        table.add_row(escape(key), escape(value))
    return table


def format_duplicate(err: DuplicateValueError) -> str:
    """Describe a self-reference as the branch that closes the loop."""
    if err.parent is None or not isinstance(err.value, Variable):
        return str(err)
    branch = err.parent.path()
    loop = branch[next(i for i, node in enumerate(branch) if node is err.node):]
    keys = [node.value.key for node in loop] + [err.value.key]
    return " -> ".join(keys)


__all__ = [
    "build_variable_tree",
    "build_variables_table",
    "format_duplicate",
    "format_variable",
]
