"""Document-order syntax tree traversal with per-kind callbacks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from tree_sitter import Node


def traverse(root: Node, visitor: Mapping[str, Callable[[Node], None]]) -> int:
    """Walk ``root`` depth-first, pre-order, dispatching on node type.

    Each node whose ``type`` has a registered callback is passed to it
    before any of its descendants, so callbacks fire in document order.
    An explicit stack keeps deeply nested sources (minified bundles) from
    hitting the interpreter recursion limit.

    Returns:
        Number of callbacks invoked.
    """
    invoked = 0
    stack: list[Node] = [root]
    while stack:
        node = stack.pop()
        callback = visitor.get(node.type)
        if callback is not None:
            callback(node)
            invoked += 1
        stack.extend(reversed(node.children))
    return invoked


__all__ = ["traverse"]
