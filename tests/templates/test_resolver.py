"""
Tests for variable resolution through a set tree.

Tests cover:
- Expansion of a template into its dependency tree
- Bottom-up substitution
- Self-reference detection
- Unknown variables in lenient and strict mode
"""

import pytest

from settree.core import DuplicateValueError, SetTree, UnknownVariableError
from settree.templates import TemplateSyntax, Variable, VariableResolver

GREETING = "Hello, @{name}! @{message}."

VARIABLES = {
    "name": "Scarlet",
    "message": "Message with @{part1} and @{part2}",
    "part1": "**part1**",
    "part2": "&&part2&&",
}


@pytest.fixture
def resolver() -> VariableResolver:
    return VariableResolver(VARIABLES)


class TestVariable:
    """Tests for the Variable payload."""

    def test_equality_is_field_wise(self):
        assert Variable(key="a", value="1") == Variable(key="a", value="1")
        assert Variable(key="a", value="1") != Variable(key="a", value="2")
        assert Variable(key="a", value="1") != Variable(key="b", value="1")

    def test_str(self):
        assert str(Variable(key="name", value="Scarlet")) == "name='Scarlet'"

    def test_assignment_is_validated(self):
        variable = Variable(key="a", value="1")
        variable.value = "2"

        assert variable.value == "2"


class TestResolve:
    """End-to-end resolution."""

    def test_greeting(self, resolver):
        """Nested references are resolved before their parents."""
        assert resolver.resolve(GREETING) == "Hello, Scarlet! Message with **part1** and &&part2&&."

    def test_template_without_placeholders(self, resolver):
        assert resolver.resolve("nothing to do") == "nothing to do"

    def test_same_variable_at_several_depths(self, resolver):
        """A variable may appear on different branches."""
        result = resolver.resolve("Hello, @{name}! @{message}. From @{part1}.")

        assert result == "Hello, Scarlet! Message with **part1** and &&part2&&. From **part1**."

    def test_repeated_placeholder(self, resolver):
        assert resolver.resolve("@{name} and @{name}") == "Scarlet and Scarlet"

    def test_resolve_is_repeatable(self, resolver):
        """Resolving never rewrites the resolver's own variables."""
        first = resolver.resolve(GREETING)
        second = resolver.resolve(GREETING)

        assert first == second
        assert resolver.variables["message"].value == "Message with @{part1} and @{part2}"

    def test_accepts_variable_instances(self):
        resolver = VariableResolver([Variable(key="who", value="world")])

        assert resolver.resolve("hello @{who}") == "hello world"

    def test_custom_syntax(self):
        resolver = VariableResolver({"who": "world"}, TemplateSyntax(opening="{{", closing="}}"))

        assert resolver.resolve("hello {{who}} @{who}") == "hello world @{who}"


class TestTreeShape:
    """The expanded tree mirrors the reference graph."""

    def test_expanded_tree(self, resolver):
        tree = resolver.tree(GREETING)
        resolver.invalidate(tree)

        assert tree.value.key == "root"
        assert [child.value.key for child in tree.children] == ["name", "message"]
        message = tree.children[1]
        assert [child.value.key for child in message.children] == ["part1", "part2"]

    def test_pairs_follow_dependencies(self, resolver):
        tree = resolver.tree(GREETING)
        resolver.invalidate(tree)

        keys = [(parent.key, child.key) for parent, child in tree.pairs()]

        assert keys == [
            ("root", "name"),
            ("message", "part1"),
            ("message", "part2"),
            ("root", "message"),
        ]

    def test_build_rewrites_tree_values(self, resolver):
        tree = resolver.tree(GREETING)
        resolver.invalidate(tree)

        resolver.build(tree)

        assert tree.children[1].value.value == "Message with **part1** and &&part2&&"

    def test_reinvalidate_after_edit(self, resolver):
        """Changing the root text and invalidating again regrows the tree."""
        tree = resolver.tree(GREETING)
        resolver.invalidate(tree)

        tree.value = Variable(key="root", value="@{message}")
        resolver.invalidate(tree)

        assert [child.value.key for child in tree.children] == ["message"]
        assert resolver.build(tree) == "Message with **part1** and &&part2&&"


class TestSelfReference:
    """Cycles between variables are rejected."""

    def test_direct_self_reference(self):
        resolver = VariableResolver({"a": "I am @{a}"})

        with pytest.raises(DuplicateValueError):
            resolver.resolve("@{a}")

    def test_indirect_self_reference(self):
        resolver = VariableResolver({"a": "@{b}", "b": "@{c}", "c": "@{a}"})

        with pytest.raises(DuplicateValueError) as exc_info:
            resolver.resolve("start @{a}")

        assert exc_info.value.value.key == "a"

    def test_find_self_references(self):
        resolver = VariableResolver({"a": "@{b}", "b": "@{a}", "c": "fine", "d": "@{c}"})

        failures = resolver.find_self_references()

        assert sorted(failures) == ["a", "b"]
        assert all(isinstance(err, DuplicateValueError) for err in failures.values())

    def test_no_self_references(self, resolver):
        assert resolver.find_self_references() == {}


class TestUnknownVariables:
    """Placeholders naming no variable."""

    def test_left_in_place(self, resolver):
        assert resolver.resolve("@{name} @{missing}") == "Scarlet @{missing}"

    def test_strict_mode_raises(self):
        resolver = VariableResolver(VARIABLES, strict=True)

        with pytest.raises(UnknownVariableError) as exc_info:
            resolver.resolve("@{name} @{missing}")

        assert exc_info.value.key == "missing"
        assert exc_info.value.referenced_by == "root"

    def test_expand_skips_unknown(self, resolver):
        node = SetTree(Variable(key="t", value="@{missing} @{name}"))

        assert [variable.key for variable in resolver.expand(node)] == ["name"]
