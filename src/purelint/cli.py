"""CLI entry point — ``purelint match`` and ``purelint names``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import tree_sitter
from pydantic import ValidationError

from purelint import __version__
from purelint.config import Settings
from purelint.exemptions import (
    IgnoreOptions,
    TopLevelScope,
    matches,
    resolve_names,
    should_ignore,
)
from purelint.logging_config import set_level, setup_logging
from purelint.parsing import (
    iter_checkable_nodes,
    language_for_path,
    parse_source,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_MATCH = 1
EXIT_USAGE = 2


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"Invalid settings: {exc}", file=sys.stderr)
        return EXIT_USAGE
    setup_logging(settings.log_level)

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_level("DEBUG")

    if args.version:
        print(f"purelint {__version__}")
        return EXIT_OK

    if args.command == "match":
        return _run_match(args)
    if args.command == "names":
        return _run_names(args, settings)

    parser.print_help()
    return EXIT_USAGE


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="purelint",
        description=(
            "Resolve lint exemptions: dotted-name patterns, "
            "prefixes and suffixes over TypeScript/JavaScript sources."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    sub = parser.add_subparsers(dest="command")

    match_parser = sub.add_parser(
        "match",
        help="Test dotted names against a pattern",
    )
    match_parser.add_argument("pattern", help="Dotted glob pattern")
    match_parser.add_argument(
        "names",
        nargs="+",
        help="Dotted names to test",
    )

    names = sub.add_parser(
        "names",
        help="Resolve names of top-level nodes and report exemptions",
    )
    names.add_argument("file", type=str, help="Source file to inspect")
    names.add_argument(
        "--language",
        "-l",
        choices=["typescript", "tsx", "javascript"],
        default=None,
        help="Grammar to parse with (default: from file extension)",
    )
    names.add_argument(
        "--ignore-pattern",
        action="append",
        default=None,
        help="Dotted glob pattern to exempt (repeatable)",
    )
    names.add_argument(
        "--ignore-prefix",
        action="append",
        default=None,
        help="Name prefix to exempt (repeatable)",
    )
    names.add_argument(
        "--ignore-suffix",
        action="append",
        default=None,
        help="Name suffix to exempt (repeatable)",
    )
    names.add_argument(
        "--json",
        action="store_true",
        help="Emit a JSON array instead of text",
    )
    return parser


def _run_match(args: argparse.Namespace) -> int:
    all_matched = True
    for name in args.names:
        ok = matches(args.pattern, name)
        all_matched = all_matched and ok
        print(f"{name}\t{'match' if ok else 'no-match'}")
    return EXIT_OK if all_matched else EXIT_NO_MATCH


def _run_names(args: argparse.Namespace, settings: Settings) -> int:
    path = Path(args.file)
    language = (
        args.language
        or language_for_path(path)
        or settings.default_language
    )

    try:
        options = _resolve_options(args, settings)
    except ValidationError as exc:
        print(f"Invalid ignore options: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        source = path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Cannot read {path}: {exc}", file=sys.stderr)
        return EXIT_USAGE

    tree = parse_source(source, language)
    if tree is None:
        print(f"No grammar available for {language}", file=sys.stderr)
        return EXIT_USAGE

    reports = inspect_source(tree.root_node, options)
    logger.debug("Inspected %d nodes in %s", len(reports), path)

    if args.json:
        print(json.dumps(reports, indent=2))
    else:
        for report in reports:
            verdict = "ignored" if report["ignored"] else "checked"
            print(
                f"{path}:{report['line']}\t{report['type']}\t"
                f"{','.join(report['names']) or '-'}\t{verdict}"
            )
    return EXIT_OK


def _resolve_options(
    args: argparse.Namespace, settings: Settings
) -> IgnoreOptions:
    """Flags override settings field by field."""
    defaults = settings.ignore_options()
    overrides = {
        field: value
        for field, value in (
            ("ignore_pattern", args.ignore_pattern),
            ("ignore_prefix", args.ignore_prefix),
            ("ignore_suffix", args.ignore_suffix),
        )
        if value is not None
    }
    return IgnoreOptions.model_validate(
        {**defaults.model_dump(), **overrides}
    )


def inspect_source(
    root: tree_sitter.Node, options: IgnoreOptions
) -> list[dict[str, Any]]:
    """Resolve names and ignore verdicts for each top-level node."""
    scope = TopLevelScope()
    return [
        {
            "line": node.start_point[0] + 1,
            "type": node.type,
            "names": resolve_names(node),
            "ignored": should_ignore(node, scope, options),
        }
        for node in iter_checkable_nodes(root)
    ]


if __name__ == "__main__":
    sys.exit(main())
