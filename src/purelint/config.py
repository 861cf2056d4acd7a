"""Environment-based configuration and grammar constants."""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode

from purelint.exemptions.options import IgnoreOptions

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and PURELINT_* environment variables."""

    # Name-based exemptions
    ignore_pattern: Annotated[list[str], NoDecode] = []
    ignore_prefix: Annotated[list[str], NoDecode] = []
    ignore_suffix: Annotated[list[str], NoDecode] = []

    # Scope-based exemptions
    ignore_local: bool = False
    ignore_class: bool = False
    ignore_interface: bool = False

    # Parsing
    default_language: str = "typescript"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = (
        "INFO"
    )

    @field_validator(
        "ignore_pattern", "ignore_prefix", "ignore_suffix", mode="before"
    )
    @classmethod
    def _parse_list(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        if isinstance(v, str):
            if v.lstrip().startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("ignore_pattern")
    @classmethod
    def _warn_duplicate_patterns(cls, v: list[str]) -> list[str]:
        seen: set[str] = set()
        dupes: list[str] = []
        for p in v:
            if p in seen:
                dupes.append(p)
            seen.add(p)
        if dupes:
            logger.warning(
                "Duplicate patterns in PURELINT_IGNORE_PATTERN: %s",
                ", ".join(dupes),
            )
        return v

    def ignore_options(self) -> IgnoreOptions:
        """Build the immutable ignore options value from these settings."""
        return IgnoreOptions(
            ignore_pattern=self.ignore_pattern or None,
            ignore_prefix=self.ignore_prefix or None,
            ignore_suffix=self.ignore_suffix or None,
            ignore_local=self.ignore_local,
            ignore_class=self.ignore_class,
            ignore_interface=self.ignore_interface,
        )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "PURELINT_",
        "extra": "ignore",
    }


# File extension → language name mapping
EXTENSION_MAP: dict[str, str] = {
    # TypeScript
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    # JavaScript
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
}

# Language name → (import path, language factory) for tree-sitter grammars
GRAMMAR_MODULES: dict[str, tuple[str, str]] = {
    "typescript": ("tree_sitter_typescript", "language_typescript"),
    "tsx": ("tree_sitter_typescript", "language_tsx"),
    "javascript": ("tree_sitter_javascript", "language"),
}
