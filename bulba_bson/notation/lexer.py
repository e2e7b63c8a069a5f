"""
Lexer (tokenizer) for the BULBA! notation.

The notation is line oriented:
- First line is the ``BULBA!`` header
- ``zZz`` starts a comment that runs to the end of the line
- Indentation is spaces only, four per level (tabs are rejected)
- ``(o) name (o)``, ``(O) name (O)``, ``(@) name (@)`` open sections
- ``key ~~~~> value`` assigns a value (one or more ``~`` then ``>``)
- Values: "strings", numbers, SuperEffective, NotVeryEffective, MissingNo
  and ``<| a, b |>`` arrays (arrays may nest)
"""

from dataclasses import dataclass
from enum import Enum, auto
import math
import re

from ..const import (
    ARRAY_CLOSE,
    ARRAY_OPEN,
    ARRAY_SEPARATOR,
    COMMENT_MARKER,
    DEFAULT_MAX_ARRAY_DEPTH,
    FALSE_KEYWORD,
    HEADER,
    INDENT_WIDTH,
    NULL_KEYWORD,
    SECTION_MARKERS,
    TRUE_KEYWORD,
)
from .errors import (
    BsonError,
    HeaderError,
    IndentError,
    StatementError,
    TabCharacterError,
    ValueTypeError,
)


class TokenType(Enum):
    """Token types for the BULBA! notation."""

    # Structure
    HEADER = auto()         # BULBA!
    INDENT = auto()         # leading spaces, level = count / 4
    SECTION_OPEN = auto()   # (o), (O), (@) before the name
    SECTION_CLOSE = auto()  # (o), (O), (@) after the name
    IDENTIFIER = auto()     # key or section name
    ASSIGN = auto()         # ~~~~>

    # Literals
    STRING = auto()         # "text"
    NUMBER = auto()         # 100, 1.5
    BOOLEAN = auto()        # SuperEffective, NotVeryEffective
    NULL = auto()           # MissingNo

    # Arrays
    ARRAY_START = auto()    # <|
    ARRAY_END = auto()      # |>
    COMMA = auto()          # ,

    EOF = auto()            # end of input


@dataclass
class Token:
    """A single token from the lexer."""

    type: TokenType
    literal: str = ""
    line: int = 0
    level: int = 0  # Only meaningful for INDENT and SECTION_OPEN/CLOSE

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r}, line={self.line}, level={self.level})"


_ASSIGNMENT_RE = re.compile(r"([A-Za-z0-9_]+)\s*(~+>)\s*(.*)")
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def coerce_number(text: str) -> int | float | None:
    """
    Convert numeric text to int or float.

    Integer form is tried first, then float. Returns None when the text
    is neither (``inf``, ``nan``, hex and underscores are not numbers here)
    or when a float literal overflows, such as ``1e400``.
    """
    if _INT_RE.fullmatch(text):
        return int(text)
    if _FLOAT_RE.fullmatch(text):
        value = float(text)
        if math.isfinite(value):
            return value
    return None


def split_array_items(inner: str) -> list[str]:
    """
    Split array contents on top-level commas.

    Commas inside double quotes or inside nested ``<| |>`` arrays do not split.

        '"a,b", <| 1, 2 |>'  ->  ['"a,b"', ' <| 1, 2 |>']
    """
    items: list[str] = []
    current: list[str] = []
    depth = 0
    quoted = False
    pos = 0

    while pos < len(inner):
        char = inner[pos]

        if char == '"':
            quoted = not quoted
        elif not quoted:
            if inner.startswith(ARRAY_OPEN, pos):
                depth += 1
                current.append(ARRAY_OPEN)
                pos += len(ARRAY_OPEN)
                continue
            if depth and inner.startswith(ARRAY_CLOSE, pos):
                depth -= 1
                current.append(ARRAY_CLOSE)
                pos += len(ARRAY_CLOSE)
                continue
            if char == ARRAY_SEPARATOR and depth == 0:
                items.append("".join(current))
                current = []
                pos += 1
                continue

        current.append(char)
        pos += 1

    items.append("".join(current))
    return items


class Lexer:
    """
    Tokenizer for the BULBA! notation.

    Example source:
        BULBA!
        app_name ~~~~> "Pokedex_API"
        (o) database (o)
            host ~~~~> "127.0.0.1"
            (O) pool (O)
                max_connections ~~~~> 100
    """

    def __init__(
        self,
        source: str,
        filename: str = "<string>",
        max_array_depth: int = DEFAULT_MAX_ARRAY_DEPTH,
    ):
        self.source = source
        self.filename = filename
        self.max_array_depth = max_array_depth
        self.line = 0
        self.tokens: list[Token] = []

    def _emit(self, token_type: TokenType, literal: str = "", level: int = 0) -> None:
        self.tokens.append(Token(token_type, literal, self.line, level))

    def _count_indent(self, line: str) -> int:
        """Count leading spaces, rejecting tabs and other whitespace."""
        leading = line[: len(line) - len(line.lstrip())]

        if "\t" in leading:
            raise TabCharacterError(self.line)
        if leading.strip(" "):
            raise IndentError(self.line)

        return len(leading)

    def _tokenize_section(self, body: str) -> bool:
        """Emit tokens for a section header. Returns False if body is not one."""
        for stage, marker in SECTION_MARKERS.items():
            prefix = f"{marker} "
            suffix = f" {marker}"
            if not (body.startswith(prefix) and body.endswith(suffix)):
                continue

            # "(o) (o)" matches both ends with overlap and has no name
            if len(body) <= len(prefix) + len(suffix):
                raise StatementError(self.line)

            name = body[len(prefix):len(body) - len(suffix)]

            self._emit(TokenType.SECTION_OPEN, marker, level=stage)
            self._emit(TokenType.IDENTIFIER, name)
            self._emit(TokenType.SECTION_CLOSE, marker, level=stage)
            return True

        return False

    def _tokenize_assignment(self, body: str) -> None:
        match = _ASSIGNMENT_RE.fullmatch(body)
        if match is None:
            raise StatementError(self.line)

        key, operator, value = match.groups()
        self._emit(TokenType.IDENTIFIER, key)
        self._emit(TokenType.ASSIGN, operator)
        self._tokenize_value(value)

    def _tokenize_value(self, text: str, depth: int = 0) -> None:
        """Emit tokens for a value, recursing into array items."""
        text = text.strip()
        if not text:
            return

        if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
            self._emit(TokenType.STRING, text[1:-1])
            return

        if text == TRUE_KEYWORD:
            self._emit(TokenType.BOOLEAN, "true")
            return
        if text == FALSE_KEYWORD:
            self._emit(TokenType.BOOLEAN, "false")
            return
        if text == NULL_KEYWORD:
            self._emit(TokenType.NULL, text)
            return

        if (
            len(text) >= len(ARRAY_OPEN) + len(ARRAY_CLOSE)
            and text.startswith(ARRAY_OPEN)
            and text.endswith(ARRAY_CLOSE)
        ):
            if depth >= self.max_array_depth:
                raise StatementError(self.line)

            self._emit(TokenType.ARRAY_START, ARRAY_OPEN)
            inner = text[len(ARRAY_OPEN):len(text) - len(ARRAY_CLOSE)].strip()
            if inner:
                for index, item in enumerate(split_array_items(inner)):
                    if index > 0:
                        self._emit(TokenType.COMMA, ARRAY_SEPARATOR)
                    self._tokenize_value(item, depth + 1)
            self._emit(TokenType.ARRAY_END, ARRAY_CLOSE)
            return

        if coerce_number(text) is not None:
            self._emit(TokenType.NUMBER, text)
            return

        raise ValueTypeError(self.line)

    def _tokenize_line(self, raw_line: str) -> None:
        line = raw_line.removesuffix("\r")

        # Comments run from the marker to the end of the line
        marker = line.find(COMMENT_MARKER)
        if marker != -1:
            line = line[:marker]

        line = line.rstrip()
        if not line:
            return

        indent = self._count_indent(line)
        if indent % INDENT_WIDTH != 0:
            raise IndentError(self.line)
        self._emit(TokenType.INDENT, level=indent // INDENT_WIDTH)

        body = line.lstrip()
        if not self._tokenize_section(body):
            self._tokenize_assignment(body)

    def tokenize(self) -> list[Token]:
        """Tokenize the whole source. The list always ends with an EOF token."""
        self.tokens = []

        try:
            self._tokenize_source()
        except BsonError as e:
            e.filename = self.filename
            raise

        return self.tokens

    def _tokenize_source(self) -> None:
        lines = self.source.split("\n")

        self.line = 1
        if lines[0].removesuffix("\r") != HEADER:
            raise HeaderError(self.line)
        self._emit(TokenType.HEADER, HEADER)

        for number, raw_line in enumerate(lines[1:], start=2):
            self.line = number
            self._tokenize_line(raw_line)

        self.line = len(lines)
        self._emit(TokenType.EOF)


def tokenize(
    content: str,
    filename: str = "<string>",
    max_array_depth: int = DEFAULT_MAX_ARRAY_DEPTH,
) -> list[Token]:
    """Convenience function to tokenize a source string."""
    return Lexer(content, filename, max_array_depth).tokenize()
