"""
Human-readable rendering of parsed documents.

    app_name: Pokedex_API
    missing_data: null
    database:
      host: 127.0.0.1
    whitelist:
      - Prof_Oak
      - Mom

Strings print bare unless they would read as another value: the empty
string, ``null``/``true``/``false`` and numeric text are JSON-quoted.
"""

import json
import sys
from typing import Any, TextIO

from .lexer import coerce_number
from .values import Document


_BARE_WORDS = frozenset({"null", "true", "false"})


def format_scalar(value: Any) -> str:
    """Render a scalar value inline."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        if not value or value in _BARE_WORDS or coerce_number(value) is not None:
            return json.dumps(value, ensure_ascii=False)
        return value
    return repr(value)


def _entry(prefix: str, value: Any) -> str | None:
    """Single-line form of value after prefix, or None if it spans lines."""
    if isinstance(value, dict):
        return None if value else f"{prefix} {{}}"
    if isinstance(value, list):
        return None if value else f"{prefix} []"
    return f"{prefix} {format_scalar(value)}"


class DocumentPrinter:
    """Renders a document as indented ``key: value`` lines."""

    def __init__(self, indent: str = "  ", sort_keys: bool = False):
        self.indent = indent
        self.sort_keys = sort_keys
        self.lines: list[str] = []

    def render(self, document: Document) -> str:
        self.lines = []
        self._render_mapping(document, 0)
        return "".join(f"{line}\n" for line in self.lines)

    def _render_node(self, node: Any, level: int) -> None:
        if isinstance(node, dict):
            self._render_mapping(node, level)
        else:
            self._render_sequence(node, level)

    def _render_mapping(self, mapping: dict[str, Any], level: int) -> None:
        pad = self.indent * level
        keys = sorted(mapping) if self.sort_keys else list(mapping)

        for key in keys:
            self._render_item(f"{pad}{key}:", mapping[key], level)

    def _render_sequence(self, items: list[Any], level: int) -> None:
        pad = self.indent * level

        for item in items:
            self._render_item(f"{pad}-", item, level)

    def _render_item(self, prefix: str, value: Any, level: int) -> None:
        line = _entry(prefix, value)
        if line is not None:
            self.lines.append(line)
            return
        self.lines.append(prefix)
        self._render_node(value, level + 1)


def render(document: Document, indent: str = "  ", sort_keys: bool = False) -> str:
    """Convenience function to render a document to a string."""
    return DocumentPrinter(indent, sort_keys).render(document)


def print_document(
    document: Document,
    file: TextIO | None = None,
    sort_keys: bool = False,
) -> None:
    """Write the rendered document to a stream (stdout by default)."""
    stream = file if file is not None else sys.stdout
    stream.write(render(document, sort_keys=sort_keys))
