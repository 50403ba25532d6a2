"""
Variable resolution driven by a set tree.

A template becomes the root of a ``SetTree[Variable]``. Invalidating the
tree expands every node into the variables its text references, so the tree
ends up mirroring the reference graph. Walking the tree bottom-up with
``iterate_pairs`` then substitutes each child's (already resolved) value into
its parent until the root holds the final text.

Because the tree rejects a value repeated along a branch, a variable that
references itself, directly or through others, raises DuplicateValueError
instead of expanding forever.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Mapping, Optional, Union

from settree.core.errors import DuplicateValueError, UnknownVariableError
from settree.core.set_tree import SetTree
from settree.templates.syntax import TemplateSyntax
from settree.templates.variable import Variable
from settree.utils.logging import log_calls

logger = logging.getLogger(__name__)

VariableSource = Union[Mapping[str, str], Iterable[Variable]]


class VariableResolver:
    """
    Resolves ``@{name}`` placeholders against a fixed set of variables.

    Args:
        variables: Either a ``{key: value}`` mapping or Variable instances.
            A later variable with the same key replaces an earlier one.
        syntax: Placeholder syntax (default ``@{key}``).
        strict: Raise UnknownVariableError for placeholders naming no
            variable instead of leaving them in place.
    """

    def __init__(
        self,
        variables: VariableSource,
        syntax: Optional[TemplateSyntax] = None,
        *,
        strict: bool = False,
    ):
        if isinstance(variables, Mapping):
            items = [Variable(key=key, value=value) for key, value in variables.items()]
        else:
            items = list(variables)
        self.variables: Dict[str, Variable] = {item.key: item for item in items}
        self.syntax = syntax or TemplateSyntax()
        self.strict = strict

    def expand(self, node: SetTree[Variable]) -> List[Variable]:
        """
        Variables referenced by a node's text, in order of appearance.

        Copies are returned so that resolving never rewrites the resolver's
        own variables.
        """
        children: List[Variable] = []
        for key in self.syntax.find_keys(node.value.value):
            variable = self.variables.get(key)
            if variable is None:
                if self.strict:
                    raise UnknownVariableError(key, node.value.key)
                logger.debug("Leaving unknown variable '%s' in '%s'", key, node.value.key)
                continue
            children.append(variable.model_copy())
        return children

    def tree(self, template: str, key: str = "root") -> SetTree[Variable]:
        """Unexpanded tree whose root holds ``template``."""
        return SetTree(Variable(key=key, value=template))

    def invalidate(self, tree: SetTree[Variable]) -> None:
        """Rebuild ``tree`` below its root from the current variables."""
        tree.invalidate(self.expand)

    def build(self, tree: SetTree[Variable]) -> str:
        """
        Substitute child values into their parents, bottom-up.

        The values held by the tree are rewritten in place; the resolved text
        of the root is returned.
        """

        def substitute(parent: Variable, child: Variable) -> None:
            parent.value = self.syntax.substitute(parent.value, child.key, child.value)

        tree.iterate_pairs(substitute)
        return tree.value.value

    @log_calls()
    def resolve(self, template: str, key: str = "root") -> str:
        """
        Resolve every placeholder of ``template``.

        Raises:
            DuplicateValueError: If a referenced variable refers back to
                itself or to the template.
            UnknownVariableError: In strict mode, for an undefined key.
        """
        tree = self.tree(template, key)
        self.invalidate(tree)
        return self.build(tree)

    def find_self_references(self) -> Dict[str, DuplicateValueError]:
        """
        Map each variable that cannot be expanded to the error it raises.

        Every variable is expanded as its own root, so a variable that leads
        back to itself, or into any other cycle, is reported.
        """
        failures: Dict[str, DuplicateValueError] = {}
        for key, variable in self.variables.items():
            try:
                self.invalidate(SetTree(variable.model_copy()))
            except DuplicateValueError as exc:
                failures[key] = exc
        return failures


__all__ = ["VariableResolver", "VariableSource"]
