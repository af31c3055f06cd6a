"""Relative specifier depth classification."""

from __future__ import annotations

from dataclasses import dataclass

RELATIVE_MARKER = "."
PARENT_SEGMENT = "../"


@dataclass(frozen=True)
class Violation:
    """A specifier whose upward traversal depth exceeds the limit."""

    specifier: str
    limit: int
    depth: int

    @property
    def message(self) -> str:
        return format_message(self.specifier, self.limit)


def format_message(specifier: str, limit: int) -> str:
    return (
        f'Import/export path "{specifier}" must not exceed the maximum depth '
        f"({limit} levels)"
    )


def is_relative(specifier: str) -> bool:
    """Return True for specifiers resolved against the referencing file."""
    return specifier.startswith(RELATIVE_MARKER)


def count_parent_segments(specifier: str) -> int:
    """Count non-overlapping ``../`` occurrences anywhere in the specifier.

    No normalization happens: ``./a/../../b`` counts 2.
    """
    return specifier.count(PARENT_SEGMENT)


def classify(specifier: str, limit: int) -> Violation | None:
    """Classify a module specifier against a maximum parent depth.

    Args:
        specifier: Literal module specifier as written in source.
        limit: Maximum permitted number of ``../`` segments.

    Returns:
        A Violation when the specifier is relative and its depth exceeds
        the limit, otherwise None. Bare and absolute specifiers are never
        checked.
    """
    if not is_relative(specifier):
        return None

    depth = count_parent_segments(specifier)
    if depth > limit:
        return Violation(specifier=specifier, limit=limit, depth=depth)
    return None


__all__ = [
    "Violation",
    "classify",
    "count_parent_segments",
    "format_message",
    "is_relative",
]
