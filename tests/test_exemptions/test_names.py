"""Tests for name resolution over tree-sitter nodes."""

from __future__ import annotations

from purelint.exemptions.names import resolve_names
from tests.conftest import (
    find_first,
    first_expression,
    first_statement,
    parse_program,
)


class TestIdentifiers:
    def test_identifier(self) -> None:
        node = first_expression("counter;")
        assert node.type == "identifier"
        assert resolve_names(node) == ["counter"]

    def test_this(self) -> None:
        assert resolve_names(first_expression("this;")) == ["this"]

    def test_text_is_verbatim(self) -> None:
        """No case folding or normalization."""
        assert resolve_names(first_expression("$MixedCase_1;")) == [
            "$MixedCase_1"
        ]


class TestDeclarations:
    def test_single_declarator(self) -> None:
        assert resolve_names(first_statement("let x = 1;")) == ["x"]

    def test_declarators_in_source_order(self) -> None:
        node = first_statement("let a = 1, b = 2;")
        assert resolve_names(node) == ["a", "b"]

    def test_var_declaration(self) -> None:
        node = first_statement("var legacy = true;")
        assert node.type == "variable_declaration"
        assert resolve_names(node) == ["legacy"]

    def test_duplicates_are_kept(self) -> None:
        node = first_statement("var a = 1, a = 2;")
        assert resolve_names(node) == ["a", "a"]

    def test_declarator(self) -> None:
        declarator = find_first(
            first_statement("const y = 2;"), "variable_declarator"
        )
        assert resolve_names(declarator) == ["y"]

    def test_destructuring_declarator_has_no_name(self) -> None:
        node = first_statement("const { a, b } = obj;")
        assert resolve_names(node) == []

    def test_mixed_destructuring_keeps_named_declarators(self) -> None:
        node = first_statement("let [first] = xs, rest = 1;")
        assert resolve_names(node) == ["rest"]

    def test_type_alias(self) -> None:
        node = first_statement("type MutableShape = { value: number };")
        assert node.type == "type_alias_declaration"
        assert resolve_names(node) == ["MutableShape"]

    def test_property_signature(self) -> None:
        root = parse_program("interface Point { mutableX: number; }")
        signature = find_first(root, "property_signature")
        assert resolve_names(signature) == ["mutableX"]


class TestExpressions:
    def test_member_expression(self) -> None:
        assert resolve_names(first_expression("foo.bar;")) == ["foo.bar"]

    def test_nested_member_expression(self) -> None:
        node = first_expression("foo.bar.baz;")
        assert resolve_names(node) == ["foo.bar.baz"]

    def test_member_on_this(self) -> None:
        node = first_expression("this.mutableField;")
        assert resolve_names(node) == ["this.mutableField"]

    def test_member_with_unnamed_object_is_dropped(self) -> None:
        node = first_expression("(a ?? b).c;")
        assert node.type == "member_expression"
        assert resolve_names(node) == []

    def test_assignment_uses_left_side(self) -> None:
        node = first_expression("this.count = other.value;")
        assert node.type == "assignment_expression"
        assert resolve_names(node) == ["this.count"]

    def test_augmented_assignment(self) -> None:
        node = first_expression("total += 1;")
        assert resolve_names(node) == ["total"]

    def test_computed_member_uses_index_name(self) -> None:
        node = first_expression("xs[i] = 1;")
        assert resolve_names(node) == ["xs.i"]

    def test_computed_member_with_literal_index_has_no_name(self) -> None:
        assert resolve_names(first_expression("xs[0] = 1;")) == []

    def test_call_uses_callee_text(self) -> None:
        node = first_expression("console.log(1);")
        assert node.type == "call_expression"
        assert resolve_names(node) == ["console.log"]

    def test_call_callee_is_verbatim_source(self) -> None:
        """Callees are not rebuilt structurally."""
        node = first_expression('registry["key"](1);')
        assert resolve_names(node) == ['registry["key"]']

    def test_expression_statement_unwraps_call(self) -> None:
        node = first_statement("doThing(1);")
        assert node.type == "expression_statement"
        assert resolve_names(node) == ["doThing"]

    def test_expression_statement_without_call(self) -> None:
        assert resolve_names(first_statement("x = 1;")) == []


class TestUnrecognized:
    def test_other_node_types_resolve_to_nothing(self) -> None:
        root = parse_program("if (ready) { go(); }")
        assert resolve_names(root) == []
        assert resolve_names(root.named_children[0]) == []

    def test_number_literal(self) -> None:
        assert resolve_names(first_expression("42;")) == []

    def test_javascript_grammar(self) -> None:
        root = parse_program("let a = 1, b = 2;", language="javascript")
        assert resolve_names(root.named_children[0]) == ["a", "b"]
