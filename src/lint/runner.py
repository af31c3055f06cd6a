"""Run depth rules over source text, files and directory trees."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from lint.models import Finding, LintResult
from parse.module_refs import extract_module_reference
from parse.traverse import traverse
from parse.treesitter_modules import dialect_for_path, parse_source
from rules.no_deep_relative_imports import DEFAULT_MAX_DEPTH, NoDeepRelativeImports
from scan.files import find_source_files

if TYPE_CHECKING:
    from tree_sitter import Node

    from parse.treesitter_modules import Dialect
    from rules.config import DepthLintConfig


def _finding_from_node(
    node: Node, message: str, *, path: str, rule: str
) -> Finding:
    reference = extract_module_reference(node)
    return Finding(
        path=path,
        line=node.start_point[0] + 1,
        col=node.start_point[1] + 1,
        end_line=node.end_point[0] + 1,
        end_col=node.end_point[1] + 1,
        rule=rule,
        specifier=reference.specifier if reference is not None else None,
        message=message,
    )


def lint_source(
    source_bytes: bytes,
    *,
    path: str = "<source>",
    dialect: Dialect = "javascript",
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Finding]:
    """Lint one source buffer and return findings in document order."""
    reported: list[tuple[Node, str]] = []

    def report(node: Node, message: str) -> None:
        reported.append((node, message))

    rule = NoDeepRelativeImports(report, max_depth=max_depth)
    tree = parse_source(source_bytes, dialect)
    traverse(tree.root_node, rule.visitor)

    return [
        _finding_from_node(node, message, path=path, rule=rule.name)
        for node, message in reported
    ]


def lint_file(
    file_path: Path,
    root: Path,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> list[Finding]:
    """Lint a single file; unreadable or unsupported files yield no findings.

    Finding paths are posix paths relative to ``root``.
    """
    dialect = dialect_for_path(file_path)
    if dialect is None:
        return []

    try:
        source_bytes = Path(file_path).read_bytes()
    except OSError:
        return []

    try:
        relative_path = Path(file_path).resolve().relative_to(root.resolve()).as_posix()
    except (OSError, ValueError):
        relative_path = Path(file_path).as_posix()

    return lint_source(
        source_bytes, path=relative_path, dialect=dialect, max_depth=max_depth
    )


def lint_paths(root: Path, config: DepthLintConfig) -> LintResult:
    """Lint every source file under ``root`` selected by ``config``.

    Files are processed one at a time in sorted relative-path order, so the
    result is deterministic.
    """
    result = LintResult()
    for file_path in find_source_files(
        root,
        extensions=config.extensions,
        include_patterns=config.include,
        exclude_patterns=config.exclude,
        nested_gitignore=config.nested_gitignore,
    ):
        result.files_checked += 1
        result.findings.extend(lint_file(file_path, root, max_depth=config.max_depth))
    return result


__all__ = ["lint_file", "lint_paths", "lint_source"]
