"""
Shared fixtures for the settree test suite.
"""

import textwrap

import pytest

from settree.core import SetTree


@pytest.fixture
def example_tree() -> SetTree[int]:
    """
    The reference tree used throughout the traversal tests.

              1
             / \\
            2   3
           /   / \\
          4   5   7
    """
    root = SetTree(1)
    two = root.add_child(2)
    three = root.add_child(3)
    two.add_child(4)
    three.add_child(5)
    three.add_child(7)
    return root


@pytest.fixture
def variables_file(tmp_path):
    """Variables file holding the greeting example plus a named template."""
    path = tmp_path / "variables.yaml"
    path.write_text(
        textwrap.dedent(
            """
            variables:
              name: Scarlet
              message: Message with @{part1} and @{part2}
              part1: "**part1**"
              part2: "&&part2&&"
            templates:
              greeting: "Hello, @{name}! @{message}."
              signed: "@{greeting} From @{part1}."
            """
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def looping_file(tmp_path):
    """Variables file where 'a' and 'b' reference each other."""
    path = tmp_path / "looping.yaml"
    path.write_text(
        textwrap.dedent(
            """
            variables:
              a: "A needs @{b}"
              b: "B needs @{a}"
              c: "plain"
            templates:
              broken: "@{a}"
              fine: "@{c}"
            """
        ),
        encoding="utf-8",
    )
    return path
