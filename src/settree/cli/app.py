"""
Settree CLI: resolve variable templates and inspect their dependency trees.

Variables are read from a YAML file (``./variables.yaml`` unless ``--vars``
is given). See settree.io.file_spec for the format.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from settree.cli.formatters import (
    build_variable_tree,
    build_variables_table,
    format_duplicate,
)
from settree.cli.load_helpers import load_or_exit
from settree.cli.paths import variables_path
from settree.core.errors import DuplicateValueError, UnknownVariableError
from settree.core.set_tree import SetTree
from settree.io.file_spec import VariablesFileSpec
from settree.io.variables_loader import load_variables
from settree.templates.resolver import VariableResolver
from settree.templates.variable import Variable
from settree.utils.logging import configure_logging

app = typer.Typer(help="Settree CLI: resolve @{name} variable templates through a set tree.")
console = Console()

VARS_OPTION = typer.Option(None, "--vars", help="Path to the variables YAML file")
STRICT_OPTION = typer.Option(False, "--strict", help="Fail on placeholders naming no variable")
SHOW_TREE_OPTION = typer.Option(False, "--show-tree", help="Print the dependency tree before the result")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose)


def _load_spec(vars_path: Optional[str], *, verbose_load: bool = False) -> VariablesFileSpec:
    return load_or_exit(load_variables, variables_path(vars_path), console=console, verbose_errors=verbose_load)


def _expand_or_exit(resolver: VariableResolver, tree: SetTree[Variable]) -> None:
    try:
        resolver.invalidate(tree)
    except DuplicateValueError as err:
        console.print(f"[red]Self-referencing variable:[/red] {escape(format_duplicate(err))}")
        raise typer.Exit(code=1)
    except UnknownVariableError as err:
        console.print(f"[red]Cannot resolve:[/red] {escape(str(err))}")
        raise typer.Exit(code=1)


def _resolve_and_print(resolver: VariableResolver, template: str, key: str, show_tree: bool) -> None:
    tree = resolver.tree(template, key)
    _expand_or_exit(resolver, tree)
    if show_tree:
        console.print(build_variable_tree(tree))
    console.print(resolver.build(tree), markup=False, highlight=False, soft_wrap=True)


@app.command()
def resolve(
    template: str = typer.Argument(..., help="Template text, e.g. 'Hello, @{name}!'"),
    vars_path: Optional[str] = VARS_OPTION,
    strict: bool = STRICT_OPTION,
    show_tree: bool = SHOW_TREE_OPTION,
) -> None:
    """Resolve an inline template."""
    spec = _load_spec(vars_path)
    _resolve_and_print(spec.build_resolver(strict=strict), template, "root", show_tree)


@app.command()
def render(
    name: str = typer.Argument(..., help="Name of a template defined in the variables file"),
    vars_path: Optional[str] = VARS_OPTION,
    strict: bool = STRICT_OPTION,
    show_tree: bool = SHOW_TREE_OPTION,
) -> None:
    """Resolve a named template from the variables file."""
    spec = _load_spec(vars_path)
    template = spec.templates.get(name)
    if template is None:
        console.print(f"[red]Unknown template:[/red] {escape(name)}")
        raise typer.Exit(code=1)
    _resolve_and_print(spec.build_resolver(strict=strict), template, name, show_tree)


@app.command()
def tree(
    template: str = typer.Argument(..., help="Template text to expand"),
    vars_path: Optional[str] = VARS_OPTION,
) -> None:
    """Show the dependency tree of a template without substituting."""
    spec = _load_spec(vars_path)
    resolver = spec.build_resolver()
    root = resolver.tree(template)
    _expand_or_exit(resolver, root)
    console.print(build_variable_tree(root))


@app.command()
def check(
    vars_path: Optional[str] = VARS_OPTION,
    show: bool = typer.Option(False, "--show", help="List the loaded variables"),
    verbose: bool = typer.Option(False, "--verbose-load", help="Display full validation trace on loader errors"),
) -> None:
    """Check that every variable and named template can be expanded."""
    spec = _load_spec(vars_path, verbose_load=verbose)
    resolver = spec.build_resolver()

    console.print(f"[green]OK[/green] Loaded {len(spec.variables)} variable(s)")
    console.print(f"[green]OK[/green] Loaded {len(spec.templates)} template(s)")
    if show:
        console.print(build_variables_table(spec.variables))

    problems = [f"variable {key}: {format_duplicate(err)}" for key, err in resolver.find_self_references().items()]
    for name, template in spec.templates.items():
        try:
            resolver.invalidate(resolver.tree(template, name))
        except DuplicateValueError as err:
            problems.append(f"template {name}: {format_duplicate(err)}")

    if problems:
        console.print("[red]Self-references detected:[/red]")
        for problem in problems:
            console.print(f" - {escape(problem)}")
        raise typer.Exit(code=1)

    console.print("[green]No self-references found[/green]")


__all__ = ["app"]
