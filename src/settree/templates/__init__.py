"""
Variable templates resolved through a set tree.

Components:
- Variable: Named string value, the tree payload
- TemplateSyntax: Placeholder delimiters (``@{name}``) and key pattern
- VariableResolver: Expands and substitutes placeholders

Example:
    from settree.templates import VariableResolver

    resolver = VariableResolver({"name": "Scarlet"})
    resolver.resolve("Hello, @{name}!")  # 'Hello, Scarlet!'
"""

from settree.templates.resolver import VariableResolver, VariableSource
from settree.templates.syntax import TemplateSyntax
from settree.templates.variable import Variable

__all__ = [
    "Variable",
    "TemplateSyntax",
    "VariableResolver",
    "VariableSource",
]
