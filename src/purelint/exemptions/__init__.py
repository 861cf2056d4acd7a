"""Exemption resolution — name derivation and dotted-glob matching."""

from purelint.exemptions.ignore import (
    ScopePredicates,
    TopLevelScope,
    is_ignored_name,
    should_ignore,
)
from purelint.exemptions.names import resolve_names
from purelint.exemptions.options import IgnoreOptions
from purelint.exemptions.patterns import (
    is_ignored_pattern,
    is_ignored_prefix,
    is_ignored_suffix,
    matches,
)

__all__ = [
    "IgnoreOptions",
    "ScopePredicates",
    "TopLevelScope",
    "is_ignored_name",
    "is_ignored_pattern",
    "is_ignored_prefix",
    "is_ignored_suffix",
    "matches",
    "resolve_names",
    "should_ignore",
]
