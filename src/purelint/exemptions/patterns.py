"""Dotted glob patterns over names such as ``this.foo.bar``.

Segments are separated by ``.``. A pattern segment may be:

- ``*``: exactly one name segment
- ``**``: zero or more name segments
- a literal, in which ``*`` matches any run of characters without
  crossing a segment boundary (``mutable*``)

Once a ``**`` has been consumed, trailing name segments left over after
the rest of the pattern matched are accepted.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from functools import lru_cache

from purelint.exemptions.options import as_alternatives

_ANY_DEPTH = "**"
_ANY_SEGMENT = "*"


def matches(pattern: str, name: str) -> bool:
    """Return True if the dotted name matches the dotted glob pattern."""
    return _match_segments(tuple(pattern.split(".")), tuple(name.split(".")))


def is_ignored_pattern(name: str, patterns: str | Sequence[str]) -> bool:
    """Return True if the name matches any of the patterns."""
    return any(matches(pattern, name) for pattern in as_alternatives(patterns))


def is_ignored_prefix(name: str, prefixes: str | Sequence[str]) -> bool:
    """Return True if the name starts with any of the prefixes."""
    return any(
        name.startswith(prefix) for prefix in as_alternatives(prefixes)
    )


def is_ignored_suffix(name: str, suffixes: str | Sequence[str]) -> bool:
    """Return True if the name ends with any of the suffixes."""
    return any(
        name.endswith(suffix) for suffix in as_alternatives(suffixes)
    )


def _match_segments(
    pattern: tuple[str, ...],
    parts: tuple[str, ...],
    allow_extra: bool = False,
) -> bool:
    if not pattern:
        return allow_extra or not parts

    head, rest = pattern[0], pattern[1:]

    if head == _ANY_DEPTH:
        if not parts:
            return _match_segments(rest, (), allow_extra)
        return any(
            _match_segments(rest, parts[offset:], True)
            for offset in range(len(parts))
        )

    if not parts:
        return False

    if head == _ANY_SEGMENT or _segment_regex(head).fullmatch(parts[0]):
        return _match_segments(rest, parts[1:], allow_extra)
    return False


@lru_cache(maxsize=512)
def _segment_regex(segment: str) -> re.Pattern[str]:
    """Compile a literal segment; embedded ``*`` matches any characters."""
    return re.compile(re.escape(segment).replace(r"\*", ".*"))
