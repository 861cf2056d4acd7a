"""Shared constants — syntax node kinds recognized by the exemption core.

NodeKind members are str-compatible, so they compare equal to the
plain strings used in CLI and JSON output.
"""

from __future__ import annotations

from enum import StrEnum


class NodeKind(StrEnum):
    """Closed set of node shapes the name resolver understands."""

    IDENTIFIER = "identifier"
    VARIABLE_DECLARATION = "variable_declaration"
    VARIABLE_DECLARATOR = "variable_declarator"
    TYPE_ALIAS_DECLARATION = "type_alias_declaration"
    EXPRESSION_STATEMENT = "expression_statement"
    ASSIGNMENT_EXPRESSION = "assignment_expression"
    MEMBER_EXPRESSION = "member_expression"
    CALL_EXPRESSION = "call_expression"
    PROPERTY_SIGNATURE = "property_signature"
    OTHER = "other"


# tree-sitter node type → NodeKind, for the TypeScript/JavaScript grammars
NODE_KINDS: dict[str, NodeKind] = {
    "identifier": NodeKind.IDENTIFIER,
    "property_identifier": NodeKind.IDENTIFIER,
    "type_identifier": NodeKind.IDENTIFIER,
    "shorthand_property_identifier": NodeKind.IDENTIFIER,
    "private_property_identifier": NodeKind.IDENTIFIER,
    "this": NodeKind.IDENTIFIER,
    "lexical_declaration": NodeKind.VARIABLE_DECLARATION,
    "variable_declaration": NodeKind.VARIABLE_DECLARATION,
    "variable_declarator": NodeKind.VARIABLE_DECLARATOR,
    "type_alias_declaration": NodeKind.TYPE_ALIAS_DECLARATION,
    "expression_statement": NodeKind.EXPRESSION_STATEMENT,
    "assignment_expression": NodeKind.ASSIGNMENT_EXPRESSION,
    "augmented_assignment_expression": NodeKind.ASSIGNMENT_EXPRESSION,
    "member_expression": NodeKind.MEMBER_EXPRESSION,
    "subscript_expression": NodeKind.MEMBER_EXPRESSION,
    "call_expression": NodeKind.CALL_EXPRESSION,
    "property_signature": NodeKind.PROPERTY_SIGNATURE,
}


def node_kind(node_type: str) -> NodeKind:
    """Map a tree-sitter node type to its NodeKind (OTHER if unknown)."""
    return NODE_KINDS.get(node_type, NodeKind.OTHER)
