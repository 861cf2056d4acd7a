"""Decide whether a rule should skip a syntax node.

Every rule calls :func:`should_ignore` before reporting. Scope
exemptions are answered by the host through :class:`ScopePredicates`;
name exemptions resolve the node's names and test each one against the
configured patterns, prefixes and suffixes.
"""

from __future__ import annotations

import logging
from typing import Protocol

import tree_sitter

from purelint.exemptions.names import resolve_names
from purelint.exemptions.options import IgnoreOptions
from purelint.exemptions.patterns import (
    is_ignored_pattern,
    is_ignored_prefix,
    is_ignored_suffix,
)

logger = logging.getLogger(__name__)


class ScopePredicates(Protocol):
    """Lexical scope questions answered by the host rule runner."""

    def in_function(self, node: tree_sitter.Node) -> bool: ...
    def in_class(self, node: tree_sitter.Node) -> bool: ...
    def in_interface(self, node: tree_sitter.Node) -> bool: ...


class TopLevelScope:
    """Scope answers for direct children of the program root."""

    def in_function(self, node: tree_sitter.Node) -> bool:
        return False

    def in_class(self, node: tree_sitter.Node) -> bool:
        return False

    def in_interface(self, node: tree_sitter.Node) -> bool:
        return False


def should_ignore(
    node: tree_sitter.Node,
    scope: ScopePredicates,
    options: IgnoreOptions,
) -> bool:
    """Should the given node be skipped by the calling rule?

    Scope checks run first. A node with several names (e.g. a
    declaration with two declarators) is only ignored when every name
    is exempt; a node with no resolvable name is never ignored by name.
    """
    if options.ignore_local and scope.in_function(node):
        logger.debug("Ignoring %s inside a function", node.type)
        return True

    if options.ignore_class and scope.in_class(node):
        logger.debug("Ignoring %s inside a class", node.type)
        return True

    if options.ignore_interface and scope.in_interface(node):
        logger.debug("Ignoring %s inside an interface", node.type)
        return True

    if not options.has_name_checks:
        return False

    names = resolve_names(node)
    if names and all(is_ignored_name(name, options) for name in names):
        logger.debug("Ignoring %s named %s", node.type, ", ".join(names))
        return True

    return False


def is_ignored_name(name: str, options: IgnoreOptions) -> bool:
    """Does a single resolved name satisfy any configured name exemption?"""
    if options.ignore_pattern and is_ignored_pattern(
        name, options.ignore_pattern
    ):
        return True

    if options.ignore_prefix and is_ignored_prefix(
        name, options.ignore_prefix
    ):
        return True

    if options.ignore_suffix and is_ignored_suffix(
        name, options.ignore_suffix
    ):
        return True

    return False
