"""Singleton logging configuration.

setup_logging() configures the root logger once; later calls are
no-ops so the CLI and embedding rule runners can both call it safely.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"

# Third-party loggers to suppress to WARNING
_SUPPRESSED_LOGGERS = (
    "tree_sitter",
    "tree_sitter_typescript",
    "tree_sitter_javascript",
)

_setup_done = False


def setup_logging(level: str = "INFO") -> None:
    """Configure root logger and quiet the grammar bindings.

    Idempotent: second call is a no-op.
    """
    global _setup_done  # noqa: PLW0603
    if _setup_done:
        return
    _setup_done = True

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    for name in _SUPPRESSED_LOGGERS:
        lg = logging.getLogger(name)
        lg.setLevel(logging.WARNING)


def set_level(level: str) -> None:
    """Change the root logger level after setup (e.g. for --verbose)."""
    logging.getLogger().setLevel(getattr(logging, level.upper()))
