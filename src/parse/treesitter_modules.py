"""Tree-sitter parsers for JavaScript and TypeScript sources."""

from __future__ import annotations

import html
from pathlib import PurePath
from typing import TYPE_CHECKING, Literal

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

if TYPE_CHECKING:
    from pathlib import Path

Dialect = Literal["javascript", "typescript", "tsx"]

EXTENSION_DIALECTS: dict[str, Dialect] = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

SUPPORTED_EXTENSIONS = tuple(EXTENSION_DIALECTS)

_PARSERS: dict[str, Parser] = {}

_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


def _load_language(dialect: Dialect) -> Language:
    if dialect == "javascript":
        return Language(tree_sitter_javascript.language())
    if dialect == "typescript":
        return Language(tree_sitter_typescript.language_typescript())
    if dialect == "tsx":
        return Language(tree_sitter_typescript.language_tsx())
    msg = f"Unsupported dialect: {dialect!r}"
    raise ValueError(msg)


def get_parser(dialect: Dialect = "javascript") -> Parser:
    """Initialize (once) and return the Tree-sitter parser for a dialect."""
    parser = _PARSERS.get(dialect)
    if parser is None:
        parser = Parser(_load_language(dialect))
        _PARSERS[dialect] = parser
    return parser


def dialect_for_path(path: str | Path) -> Dialect | None:
    """Pick the grammar for a file based on its extension."""
    return EXTENSION_DIALECTS.get(PurePath(path).suffix.lower())


def parse_source(source_bytes: bytes, dialect: Dialect = "javascript") -> Tree:
    return get_parser(dialect).parse(source_bytes)


def _decode_node_text(node: Node) -> str:
    return (node.text or b"").decode("utf8", errors="replace")


def _decode_escape(sequence: str) -> str:
    body = sequence[1:]
    if not body or body[0] in "\n\r\u2028\u2029":
        # Line continuation.
        return ""
    if body in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[body]
    if body.startswith("u{") and body.endswith("}"):
        return chr(int(body[2:-1], 16))
    if body[0] in "ux" and len(body) > 1:
        return chr(int(body[1:], 16))
    return body


def string_literal_value(node: Node | None) -> str | None:
    """Return the value of a plain string literal node.

    Template strings and every other expression yield None: their value
    cannot be known without evaluating the program.
    """
    if node is None or node.type != "string":
        return None

    parts: list[str] = []
    for child in node.named_children:
        text = _decode_node_text(child)
        if child.type == "escape_sequence":
            try:
                parts.append(_decode_escape(text))
            except (ValueError, OverflowError):
                parts.append(text)
        elif child.type == "html_character_reference":
            parts.append(html.unescape(text))
        else:
            parts.append(text)
    return "".join(parts)


__all__ = [
    "EXTENSION_DIALECTS",
    "SUPPORTED_EXTENSIONS",
    "Dialect",
    "dialect_for_path",
    "get_parser",
    "parse_source",
    "string_literal_value",
]
