"""Rule: relative module specifiers must not climb too many directories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from parse.module_refs import extract_module_reference
from rules.depth import Violation, classify

if TYPE_CHECKING:
    from collections.abc import Callable

    from tree_sitter import Node

    from parse.module_refs import ModuleReference

    Report = Callable[[Node, str], None]

DEFAULT_MAX_DEPTH = 2

# Tree-sitter node kinds that can carry a module specifier.
IMPORT_STATEMENT = "import_statement"
CALL_EXPRESSION = "call_expression"
EXPORT_STATEMENT = "export_statement"


def validate_max_depth(max_depth: object) -> int:
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        msg = f"max_depth must be an integer, got {max_depth!r}"
        raise TypeError(msg)
    if max_depth < 0:
        msg = f"max_depth must be >= 0, got {max_depth}"
        raise ValueError(msg)
    return max_depth


class NoDeepRelativeImports:
    """Flags imports, requires and re-exports with too many ``../`` segments.

    The rule does not walk the tree itself. A traversal engine calls the
    callbacks in :attr:`visitor` for matching nodes in document order, and
    every violation is delivered through the injected ``report`` callback
    together with the offending node.
    """

    name = "no-deep-relative-imports"

    def __init__(self, report: Report, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._report = report
        self.max_depth = validate_max_depth(max_depth)

    @property
    def visitor(self) -> dict[str, Callable[[Node], None]]:
        return {
            IMPORT_STATEMENT: self.visit_reference,
            CALL_EXPRESSION: self.visit_reference,
            EXPORT_STATEMENT: self.visit_reference,
        }

    def visit_reference(self, node: Node) -> None:
        reference = extract_module_reference(node)
        if reference is not None:
            self.check_reference(reference)

    def check_reference(self, reference: ModuleReference) -> Violation | None:
        """Classify one reference and report it when it is too deep.

        References without a static specifier (computed ``import(name)``,
        ``export { a }``) are skipped.
        """
        if reference.specifier is None:
            return None

        violation = classify(reference.specifier, self.max_depth)
        if violation is not None:
            self._report(reference.node, violation.message)
        return violation


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "NoDeepRelativeImports",
    "validate_max_depth",
]
