"""Command-line interface for depthlint."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from lint.output import render_json, render_text
from lint.runner import lint_paths
from rules import RULES
from rules.config import ConfigError, load_config


def _add_common_paths(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "root",
        nargs="?",
        default=".",
        help="Directory to lint (default: .)",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="depthlint")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser(
        "check", help="Report relative imports that climb too many directories"
    )
    _add_common_paths(check_parser)
    check_parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum number of '../' segments (default: config max_depth)",
    )
    check_parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )

    subparsers.add_parser("rules", help="List available rules")

    return parser


def _handle_check(root: Path, max_depth: int | None, output_format: str) -> int:
    try:
        config = load_config(root)
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2

    if max_depth is not None:
        if max_depth < 0:
            sys.stderr.write(f"error: --max-depth must be >= 0, got {max_depth}\n")
            return 2
        config = config.model_copy(update={"max_depth": max_depth})

    if not root.is_dir():
        sys.stderr.write(f"error: not a directory: {root}\n")
        return 2

    result = lint_paths(root, config)
    render = render_json if output_format == "json" else render_text
    sys.stdout.write(render(result))
    return 0 if result.ok else 1


def _handle_rules() -> int:
    for name in sorted(RULES):
        sys.stdout.write(f"{name}\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "check":
        root = Path(args.root).expanduser().resolve()
        return _handle_check(root, args.max_depth, args.format)

    if args.command == "rules":
        return _handle_rules()

    raise AssertionError


if __name__ == "__main__":
    raise SystemExit(main())
