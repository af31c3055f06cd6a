"""Source file discovery for depthlint."""

from __future__ import annotations

import os
from fnmatch import fnmatch
from pathlib import Path
from typing import TYPE_CHECKING, cast

from gitignore_parser import parse_gitignore  # type: ignore[import-untyped]

from parse.treesitter_modules import SUPPORTED_EXTENSIONS

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

ALWAYS_SKIPPED_DIRS = frozenset({"node_modules", ".git"})


def _should_include_file(
    path: Path,
    directory: Path,
    extensions: frozenset[str],
    gitignore_matches: Callable[[str], bool] | None,
    include_patterns: list[str] | None,
    exclude_patterns: list[str] | None,
) -> bool:
    """Check if a file should be included based on all filtering rules."""
    if path.suffix.lower() not in extensions:
        return False

    if not path.is_file() or path.is_symlink():
        return False

    if not _is_within_root(path, directory):
        return False

    try:
        rel_path = path.relative_to(directory)
    except ValueError:
        return False

    if any(part in ALWAYS_SKIPPED_DIRS for part in rel_path.parts[:-1]):
        return False

    rel_path_str = rel_path.as_posix()

    if gitignore_matches is not None and _is_ignored(
        directory, rel_path, gitignore_matches
    ):
        return False

    if include_patterns and not any(
        fnmatch(rel_path_str, pat) for pat in include_patterns
    ):
        return False

    has_excluded_match = exclude_patterns and any(
        fnmatch(rel_path_str, pat) for pat in exclude_patterns
    )
    return not has_excluded_match


def _is_ignored(
    directory: Path,
    rel_path: Path,
    gitignore_matches: Callable[[str], bool],
) -> bool:
    """Return True when the path or any directory above it is gitignored.

    gitignore_parser matches a directory pattern such as ``dist`` against the
    directory itself, not against files below it.
    """
    for i in range(1, len(rel_path.parts) + 1):
        if gitignore_matches(str(directory.joinpath(*rel_path.parts[:i]))):
            return True
    return False


def _is_within_root(path: Path, root: Path) -> bool:
    """Return True when the resolved path stays within the resolved root."""
    try:
        root_resolved = root.resolve()
        path_resolved = path.resolve()
    except OSError:
        return False

    try:
        path_resolved.relative_to(root_resolved)
    except ValueError:
        return False

    return True


def _walk_files(
    root: Path,
    gitignore_matches: Callable[[str], bool] | None,
) -> Iterator[Path]:
    """Yield files under root without descending into pruned directories.

    Skipped: ``ALWAYS_SKIPPED_DIRS``, gitignored directories and symlinked
    directories.
    """
    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)
        dirnames[:] = sorted(
            name
            for name in dirnames
            if name not in ALWAYS_SKIPPED_DIRS
            and not (current / name).is_symlink()
            and not (
                gitignore_matches is not None
                and gitignore_matches(str(current / name))
            )
        )
        for name in filenames:
            yield current / name


def _iter_gitignore_files(root: Path) -> list[Path]:
    """Return sorted list of .gitignore files under root (including root)."""
    gitignore_paths = [root / ".gitignore"]
    gitignore_paths.extend(
        path for path in _walk_files(root, None) if path.name == ".gitignore"
    )
    unique_paths = {
        path for path in gitignore_paths if path.is_file() and not path.is_symlink()
    }
    return sorted(unique_paths, key=lambda p: p.relative_to(root).as_posix())


def _build_gitignore_matcher(
    root: Path,
    *,
    nested_gitignore: bool,
) -> Callable[[str], bool] | None:
    if not nested_gitignore:
        gitignore_path = root / ".gitignore"
        if gitignore_path.is_file():
            return cast("Callable[[str], bool]", parse_gitignore(gitignore_path))
        return None

    gitignore_paths = _iter_gitignore_files(root)
    if not gitignore_paths:
        return None

    matchers = [parse_gitignore(path) for path in gitignore_paths]

    def matches(path_str: str) -> bool:
        for matcher in matchers:
            try:
                if matcher(path_str):
                    return True
            except ValueError:
                continue
        return False

    return matches


def find_source_files(
    directory: Path,
    *,
    extensions: Iterable[str] = SUPPORTED_EXTENSIONS,
    include_patterns: list[str] | None = None,
    exclude_patterns: list[str] | None = None,
    nested_gitignore: bool = False,
) -> Iterator[Path]:
    """Find JavaScript/TypeScript files in a directory, respecting .gitignore.

    Args:
        directory: Directory to search
        extensions: File suffixes to consider (e.g. ".js", ".tsx")
        include_patterns: Optional list of fnmatch patterns; if provided,
            files must match at least one pattern to be included
        exclude_patterns: Optional list of fnmatch patterns; files matching
            any pattern are excluded
        nested_gitignore: Also honor .gitignore files below the root

    Yields:
        Path objects for each source file found, sorted lexicographically
        by relative path for deterministic ordering. Files under gitignored
        directories and ``node_modules`` are never yielded.
    """
    wanted = frozenset(ext.lower() for ext in extensions)
    gitignore_matches = _build_gitignore_matcher(
        directory,
        nested_gitignore=nested_gitignore,
    )

    matched_files = [
        path
        for path in _walk_files(directory, gitignore_matches)
        if _should_include_file(
            path,
            directory,
            wanted,
            gitignore_matches,
            include_patterns,
            exclude_patterns,
        )
    ]

    matched_files.sort(key=lambda p: p.relative_to(directory).as_posix())

    yield from matched_files


__all__ = ["_should_include_file", "find_source_files"]
