"""
Document loader with file reading and diagnostics.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..const import DEFAULT_MAX_ARRAY_DEPTH
from ..logging import DocumentAdapter, get_logger
from .errors import BsonError
from .lexer import Token, tokenize
from .parser import parse
from .values import Document


class LoadError(Exception):
    """Exception raised when a document cannot be read."""

    pass


@dataclass
class DocumentSummary:
    """Counts collected from a parsed document."""

    keys: int = 0
    sections: int = 0
    arrays: int = 0
    max_stage: int = 0


class DocumentLoader:
    """
    Loads documents from files or strings.

    Usage:
        loader = DocumentLoader()
        document = loader.load_file("settings.bson")
        # or
        document = loader.load_string(text)

    Format errors propagate as the original ``BsonError`` subclass so callers
    can match on ``kind``; only file-system problems become ``LoadError``.
    """

    def __init__(self, max_array_depth: int = DEFAULT_MAX_ARRAY_DEPTH):
        self.max_array_depth = max_array_depth
        self.last_tokens: list[Token] | None = None
        self.logger = get_logger("loader")

    def load_file(self, path: str | Path) -> Document:
        """
        Load a document from a file.

        Args:
            path: Path to the document file

        Returns:
            Parsed document

        Raises:
            LoadError: If the file cannot be read
            BsonError: If the contents are not a valid document
        """
        path = Path(path)

        if not path.exists():
            raise LoadError(f"Document file not found: {path}")

        if not path.is_file():
            raise LoadError(f"Not a file: {path}")

        try:
            source = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise LoadError(f"Document is not valid UTF-8: {path}") from e
        except OSError as e:
            raise LoadError(f"Failed to read document: {e}") from e

        DocumentAdapter(self.logger, str(path)).debug(f"Read {len(source)} characters")
        return self.load_string(source, str(path))

    def load_string(self, source: str, filename: str = "<string>") -> Document:
        """
        Load a document from a string.

        Args:
            source: Document source text
            filename: Document name for log records and errors

        Returns:
            Parsed document
        """
        log = DocumentAdapter(self.logger, filename)

        try:
            tokens = tokenize(source, filename, self.max_array_depth)
            document = parse(tokens, self.max_array_depth, filename)
        except BsonError as e:
            log.warning(str(e), extra={"line": e.line})
            raise

        self.last_tokens = tokens
        log.debug(f"{len(tokens)} tokens, {len(document)} top-level entries")
        return document

    def summarize(self, document: Document) -> DocumentSummary:
        """Count keys, sections and arrays in a document."""
        summary = DocumentSummary()
        self._walk(document, 0, summary)
        return summary

    def _walk(self, node: dict[str, Any], stage: int, summary: DocumentSummary) -> None:
        summary.max_stage = max(summary.max_stage, stage)

        for value in node.values():
            if isinstance(value, dict):
                summary.sections += 1
                self._walk(value, stage + 1, summary)
            else:
                summary.keys += 1
                summary.arrays += self._count_arrays(value)

    def _count_arrays(self, value: Any) -> int:
        if not isinstance(value, list):
            return 0
        return 1 + sum(self._count_arrays(item) for item in value)
