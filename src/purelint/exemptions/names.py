"""Derive canonical dotted names from tree-sitter syntax nodes."""

from __future__ import annotations

from collections.abc import Sequence

import tree_sitter

from purelint.constants import NodeKind, node_kind


def resolve_names(node: tree_sitter.Node) -> list[str]:
    """Return the names a node is known by, in source order.

    Member accesses become ``object.property``; a call resolves to the
    verbatim source text of its callee. Unrecognized shapes resolve to
    an empty list. Duplicates are kept.
    """
    names: Sequence[str | None]
    match node_kind(node.type):
        case NodeKind.IDENTIFIER:
            names = [_text(node)]
        case NodeKind.VARIABLE_DECLARATION:
            names = [
                name
                for declarator in node.named_children
                if declarator.type == "variable_declarator"
                for name in resolve_names(declarator)
            ]
        case NodeKind.VARIABLE_DECLARATOR | NodeKind.TYPE_ALIAS_DECLARATION:
            names = _resolve_field(node, "name")
        case NodeKind.EXPRESSION_STATEMENT:
            inner = node.named_children[0] if node.named_children else None
            if (
                inner is not None
                and node_kind(inner.type) is NodeKind.CALL_EXPRESSION
            ):
                names = resolve_names(inner)
            else:
                names = []
        case NodeKind.ASSIGNMENT_EXPRESSION:
            names = _resolve_field(node, "left")
        case NodeKind.MEMBER_EXPRESSION:
            names = [_member_name(node)]
        case NodeKind.CALL_EXPRESSION:
            callee = node.child_by_field_name("function")
            names = [_text(callee) if callee is not None else None]
        case NodeKind.PROPERTY_SIGNATURE:
            names = _resolve_field(node, "name")
        case _:
            names = []

    return [name for name in names if name]


def _resolve_field(node: tree_sitter.Node, field: str) -> list[str]:
    child = node.child_by_field_name(field)
    return resolve_names(child) if child is not None else []


def _member_name(node: tree_sitter.Node) -> str | None:
    """Join the first name of the object and property parts.

    Computed access (``obj[key]``) uses its index as the property.
    None when either part has no name (e.g. ``(a ?? b).c``, ``xs[0]``).
    """
    object_names = _resolve_field(node, "object")
    field = "property" if node.type == "member_expression" else "index"
    property_names = _resolve_field(node, field)
    if not object_names or not property_names:
        return None
    return f"{object_names[0]}.{property_names[0]}"


def _text(node: tree_sitter.Node) -> str | None:
    return node.text.decode("utf-8") if node.text else None
