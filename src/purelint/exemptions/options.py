"""Immutable ignore options threaded through every exemption check."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class IgnoreOptions(BaseModel):
    """User-configured exemptions for a single rule invocation.

    A name field left as None contributes no constraint. Each accepts
    a single string or a list of alternatives; camelCase keys such as
    ``ignorePattern`` are accepted for rule configuration blocks.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    ignore_pattern: tuple[str, ...] | None = None
    ignore_prefix: tuple[str, ...] | None = None
    ignore_suffix: tuple[str, ...] | None = None
    ignore_local: bool = False
    ignore_class: bool = False
    ignore_interface: bool = False

    @field_validator(
        "ignore_pattern", "ignore_prefix", "ignore_suffix", mode="before"
    )
    @classmethod
    def _normalize(cls, v: Any) -> Any:
        """Wrap a lone string; drop empty alternatives.

        An option left with no alternatives means "not configured".
        """
        if isinstance(v, str):
            return (v,) if v else None
        if isinstance(v, Sequence):
            return tuple(s for s in v if s != "") or None
        return v

    @property
    def has_name_checks(self) -> bool:
        """True if any pattern, prefix or suffix exemption is configured."""
        return bool(
            self.ignore_pattern or self.ignore_prefix or self.ignore_suffix
        )


def as_alternatives(value: str | Sequence[str]) -> tuple[str, ...]:
    """Normalize a single string or a collection of strings to a tuple."""
    if isinstance(value, str):
        return (value,)
    return tuple(value)
