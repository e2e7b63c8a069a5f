"""
Structural parser for the BULBA! notation.

Consumes the lexer's token stream and builds a nested dict. Sections nest in
three fixed evolution stages; a context stack tracks which sections are open.
"""

from dataclasses import dataclass
from pathlib import Path

from ..const import DEFAULT_MAX_ARRAY_DEPTH, MAX_STAGE
from .errors import BadgesError, BsonError, IndentError, StatementError
from .lexer import Token, TokenType, tokenize
from .values import Document, parse_value, validate_key


@dataclass
class Frame:
    """An open section on the context stack."""

    node: Document
    level: int


class DocumentParser:
    """
    Stack-based parser for the BULBA! token stream.

    Grammar:
        document   := HEADER? statement* EOF
        statement  := INDENT (section | assignment)
        section    := SECTION_OPEN IDENTIFIER SECTION_CLOSE
        assignment := IDENTIFIER ASSIGN value

    The stack always holds ``current_level + 1`` frames between statements;
    frame 0 is the root document.
    """

    def __init__(
        self,
        tokens: list[Token],
        max_array_depth: int = DEFAULT_MAX_ARRAY_DEPTH,
        filename: str = "<string>",
    ):
        self.tokens = tokens
        self.filename = filename
        self.max_array_depth = max_array_depth
        self.pos = 0
        self.stack: list[Frame] = []
        self.current_level = 0

    def _current(self) -> Token | None:
        if self.pos >= len(self.tokens):
            return None
        return self.tokens[self.pos]

    def _last_line(self) -> int:
        return self.tokens[-1].line if self.tokens else 0

    def _advance(self) -> Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def _check(self, token_type: TokenType) -> bool:
        token = self._current()
        return token is not None and token.type == token_type

    def _expect(self, token_type: TokenType) -> Token:
        """Expect current token to be of given type, advance and return it."""
        token = self._current()
        if token is None:
            raise StatementError(self._last_line())
        if token.type != token_type:
            raise StatementError(token.line)
        return self._advance()

    def parse(self) -> Document:
        """Parse the whole token stream into a document."""
        root: Document = {}
        self.stack = [Frame(root, 0)]
        self.current_level = 0
        self.pos = 0

        try:
            self._parse_statements()
        except BsonError as e:
            e.filename = self.filename
            raise

        return root

    def _parse_statements(self) -> None:
        if self._check(TokenType.HEADER):
            self._advance()

        while self._current() is not None and not self._check(TokenType.EOF):
            indent = self._expect(TokenType.INDENT)

            if self._check(TokenType.SECTION_OPEN):
                self._parse_section(indent)
            elif self._check(TokenType.IDENTIFIER):
                self._parse_assignment(indent)
            else:
                token = self._current()
                raise StatementError(token.line if token else indent.line)

    def _parse_section(self, indent: Token) -> None:
        opener = self._advance()
        stage = opener.level

        if not 1 <= stage <= MAX_STAGE:
            raise StatementError(opener.line)

        # A stage-S header sits exactly at indent level S - 1
        if indent.level != stage - 1:
            raise IndentError(opener.line)

        # Stages 1..S-1 must all be open
        if len(self.stack) < stage:
            raise BadgesError(opener.line)

        name = self._expect(TokenType.IDENTIFIER)
        validate_key(name.literal, name.line)

        closer = self._expect(TokenType.SECTION_CLOSE)
        if closer.level != stage:
            raise StatementError(closer.line)

        del self.stack[stage:]
        section: Document = {}
        self.stack[-1].node[name.literal] = section
        self.stack.append(Frame(section, stage))
        self.current_level = stage

    def _parse_assignment(self, indent: Token) -> None:
        level = indent.level

        if level != self.current_level:
            if level > self.current_level:
                # Keys cannot go deeper without a section header
                raise IndentError(indent.line)
            del self.stack[level + 1:]
            self.current_level = level

        key = self._advance()
        validate_key(key.literal, key.line)
        self._expect(TokenType.ASSIGN)

        value, self.pos = parse_value(self.tokens, self.pos, max_depth=self.max_array_depth)
        self.stack[-1].node[key.literal] = value


def parse(
    tokens: list[Token],
    max_array_depth: int = DEFAULT_MAX_ARRAY_DEPTH,
    filename: str = "<string>",
) -> Document:
    """Convenience function to parse a token stream."""
    return DocumentParser(tokens, max_array_depth, filename).parse()


def parse_document(
    content: str,
    filename: str = "<string>",
    max_array_depth: int = DEFAULT_MAX_ARRAY_DEPTH,
) -> Document:
    """
    Tokenize and parse a source string.

    Args:
        content: Whole document text, starting with the header line
        filename: Document name attached to errors
        max_array_depth: Deepest array nesting accepted

    Returns:
        Parsed document
    """
    tokens = tokenize(content, filename, max_array_depth)
    return parse(tokens, max_array_depth, filename)


def parse_document_file(path: str | Path) -> Document:
    """
    Parse a UTF-8 document file.

    Args:
        path: Path to the document

    Returns:
        Parsed document
    """
    path = Path(path)
    source = path.read_text(encoding="utf-8")
    return parse_document(source, str(path))
