"""Parse TypeScript/JavaScript sources into tree-sitter syntax trees."""

from __future__ import annotations

import importlib
import logging
import threading
from collections.abc import Iterator
from pathlib import Path

import tree_sitter

from purelint.config import EXTENSION_MAP, GRAMMAR_MODULES

logger = logging.getLogger(__name__)

# Statement types handed to the exemption engine as-is.
_DECLARATION_TYPES = frozenset({
    "lexical_declaration",
    "variable_declaration",
    "type_alias_declaration",
    "interface_declaration",
    "class_declaration",
    "function_declaration",
})

_ASSIGNMENT_TYPES = frozenset({
    "assignment_expression",
    "augmented_assignment_expression",
})


def language_for_path(path: Path) -> str | None:
    """Return the grammar language for a file extension, if supported."""
    return EXTENSION_MAP.get(path.suffix)


def parse_source(source: str, language: str) -> tree_sitter.Tree | None:
    """Parse source text. Returns None when no grammar is available."""
    parser = get_parser(language)
    if parser is None:
        return None
    return parser.parse(source.encode("utf-8"))


def iter_checkable_nodes(
    root: tree_sitter.Node,
) -> Iterator[tree_sitter.Node]:
    """Yield the top-level nodes a rule would pass to ``should_ignore``.

    Export wrappers are unwrapped to their declaration. An assignment
    inside an expression statement is yielded as the assignment itself;
    every other expression statement is yielded whole.
    """
    for child in root.named_children:
        node = child
        if node.type == "export_statement":
            declaration = node.child_by_field_name("declaration")
            if declaration is None:
                continue
            node = declaration

        if node.type in _DECLARATION_TYPES:
            yield node
        elif node.type == "expression_statement":
            inner = node.named_children[0] if node.named_children else None
            if inner is not None and inner.type in _ASSIGNMENT_TYPES:
                yield inner
            else:
                yield node


# ---------------------------------------------------------------------------
# Parser cache
# ---------------------------------------------------------------------------

# Parsers are not safe to share between threads, so each thread keeps
# its own cache.
_local = threading.local()


def get_parser(language: str) -> tree_sitter.Parser | None:
    """Get or create a cached tree-sitter parser for the calling thread."""
    cache: dict[str, tree_sitter.Parser] = _local.__dict__.setdefault(
        "parsers", {}
    )
    if language in cache:
        return cache[language]

    grammar = GRAMMAR_MODULES.get(language)
    if grammar is None:
        logger.warning("No tree-sitter grammar for language %r", language)
        return None

    module_name, factory = grammar
    try:
        mod = importlib.import_module(module_name)
        capsule: object = getattr(mod, factory)()
        lang = tree_sitter.Language(capsule)
        parser = tree_sitter.Parser(lang)
    except (ImportError, AttributeError):
        logger.warning(
            "Grammar module %s unavailable for %r",
            module_name,
            language,
            exc_info=True,
        )
        return None

    cache[language] = parser
    return parser
