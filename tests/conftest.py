"""Shared test helpers — tree-sitter parsing and fake scope predicates."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest
import tree_sitter

from purelint.parsing import parse_source


def parse_program(source: str, language: str = "typescript") -> tree_sitter.Node:
    """Parse source and return the program root node."""
    tree = parse_source(source, language)
    assert tree is not None, f"grammar for {language} not installed"
    return tree.root_node


def first_statement(source: str) -> tree_sitter.Node:
    """The first top-level statement of a TypeScript snippet."""
    return parse_program(source).named_children[0]


def first_expression(source: str) -> tree_sitter.Node:
    """The expression wrapped by the first expression statement."""
    statement = first_statement(source)
    assert statement.type == "expression_statement"
    return statement.named_children[0]


def find_first(node: tree_sitter.Node, node_type: str) -> tree_sitter.Node:
    """Depth-first search for the first descendant of a given type."""
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == node_type:
            return current
        stack.extend(reversed(current.children))
    raise LookupError(f"no {node_type} node found")


@dataclass
class FakeScope:
    """Scope predicates with fixed answers; records every question."""

    function: bool = False
    klass: bool = False
    interface: bool = False
    calls: list[str] = field(default_factory=list)

    def in_function(self, node: tree_sitter.Node) -> bool:
        self.calls.append("function")
        return self.function

    def in_class(self, node: tree_sitter.Node) -> bool:
        self.calls.append("class")
        return self.klass

    def in_interface(self, node: tree_sitter.Node) -> bool:
        self.calls.append("interface")
        return self.interface


@pytest.fixture
def scope() -> FakeScope:
    """Scope that reports the node is outside every function/class/interface."""
    return FakeScope()
