"""Module references: the syntax forms that carry a module specifier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from parse.treesitter_modules import string_literal_value

if TYPE_CHECKING:
    from tree_sitter import Node

ReferenceKind = Literal["static_import", "dynamic_import", "require", "re_export"]

REQUIRE_NAME = "require"


@dataclass(frozen=True)
class StaticImport:
    """``import x from "spec"`` or ``import "spec"``."""

    node: Node
    specifier: str | None
    kind: ReferenceKind = "static_import"


@dataclass(frozen=True)
class DynamicImportCall:
    """``import("spec")``."""

    node: Node
    specifier: str | None
    kind: ReferenceKind = "dynamic_import"


@dataclass(frozen=True)
class RequireCall:
    """``require("spec")`` and member-access variants."""

    node: Node
    specifier: str | None
    kind: ReferenceKind = "require"


@dataclass(frozen=True)
class ReExport:
    """``export { a } from "spec"`` or ``export * from "spec"``.

    ``specifier`` is None for named exports of local bindings.
    """

    node: Node
    specifier: str | None
    wildcard: bool = False
    kind: ReferenceKind = "re_export"


ModuleReference = StaticImport | DynamicImportCall | RequireCall | ReExport


def _identifier_is(node: Node | None, name: str) -> bool:
    return (
        node is not None
        and node.type == "identifier"
        and node.text is not None
        and node.text.decode("utf8", errors="replace") == name
    )


def _first_argument(call: Node) -> Node | None:
    arguments = call.child_by_field_name("arguments")
    if arguments is None:
        return None
    for child in arguments.named_children:
        if child.type != "comment":
            return child
    return None


def _unwrap_parentheses(node: Node | None) -> Node | None:
    while node is not None and node.type == "parenthesized_expression":
        inner = [child for child in node.named_children if child.type != "comment"]
        if len(inner) != 1:
            return node
        node = inner[0]
    return node


def is_dynamic_import_callee(callee: Node | None) -> bool:
    return callee is not None and callee.type == "import"


def is_require_callee(callee: Node | None) -> bool:
    """Match ``require``, ``require.resolve`` and ``window.require`` callees."""
    callee = _unwrap_parentheses(callee)
    if callee is None:
        return False
    if _identifier_is(callee, REQUIRE_NAME):
        return True
    if callee.type != "member_expression":
        return False

    object_node = callee.child_by_field_name("object")
    if _identifier_is(_unwrap_parentheses(object_node), REQUIRE_NAME):
        return True

    property_node = callee.child_by_field_name("property")
    return (
        property_node is not None
        and property_node.type == "property_identifier"
        and property_node.text is not None
        and property_node.text.decode("utf8", errors="replace") == REQUIRE_NAME
    )


def _is_wildcard_export(node: Node) -> bool:
    return any(child.type in ("*", "namespace_export") for child in node.children)


def extract_module_reference(node: Node) -> ModuleReference | None:
    """Build the module reference carried by a syntax node, if any.

    Returns None for nodes that are not one of the four reference forms
    (ordinary calls, ``export const``, ``export default``). A reference
    whose specifier is not a plain string literal is returned with
    ``specifier=None``.
    """
    if node.type == "import_statement":
        source = node.child_by_field_name("source")
        return StaticImport(node=node, specifier=string_literal_value(source))

    if node.type == "call_expression":
        callee = node.child_by_field_name("function")
        if is_dynamic_import_callee(callee):
            return DynamicImportCall(
                node=node, specifier=string_literal_value(_first_argument(node))
            )
        if is_require_callee(callee):
            return RequireCall(
                node=node, specifier=string_literal_value(_first_argument(node))
            )
        return None

    if node.type == "export_statement":
        source = node.child_by_field_name("source")
        wildcard = _is_wildcard_export(node)
        if source is None and not wildcard:
            if node.child_by_field_name("declaration") is not None:
                return None
            if node.child_by_field_name("value") is not None:
                return None
        return ReExport(
            node=node,
            specifier=string_literal_value(source),
            wildcard=wildcard,
        )

    return None


__all__ = [
    "DynamicImportCall",
    "ModuleReference",
    "ReExport",
    "ReferenceKind",
    "RequireCall",
    "StaticImport",
    "extract_module_reference",
    "is_dynamic_import_callee",
    "is_require_callee",
]
