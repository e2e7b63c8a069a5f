"""
Error taxonomy for the BULBA! notation.

Every error kind carries a fixed display text. Callers match on the text
(prefix or substring) or, preferably, on ``BsonError.kind``. The source line
and document name are kept as attributes so the display text stays exactly
the fixed string.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of parse failures, valued by their display text."""

    HEADER = "Status: Fainted"
    TAB = "Poison Type: Tab character detected"
    INDENTATION = "The attack missed!"
    BADGES = "Not enough badges!"
    SYNTAX = "It hurt itself in its confusion!"
    TYPE = "Target is immune!"
    RESERVED_KEY = "It burns the bulb"

    @property
    def message(self) -> str:
        return self.value


class BsonError(Exception):
    """Base exception for lexer and parser failures."""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, line: int = 0):
        self.kind = kind
        self.line = line
        self.filename: str | None = None
        super().__init__(kind.message)

    @property
    def location(self) -> str:
        """Position for diagnostics, e.g. ``settings.bson:12``."""
        if self.filename is None:
            return f"line {self.line}"
        return f"{self.filename}:{self.line}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name}, {self.location})"


class HeaderError(BsonError):
    """First line is not the header sentinel."""

    def __init__(self, line: int = 1):
        super().__init__(ErrorKind.HEADER, line)


class TabCharacterError(BsonError):
    """A tab character appears in the indentation run."""

    def __init__(self, line: int = 0):
        super().__init__(ErrorKind.TAB, line)


class IndentError(BsonError):
    """Indentation is not a multiple of four or does not fit the structure."""

    def __init__(self, line: int = 0):
        super().__init__(ErrorKind.INDENTATION, line)


class BadgesError(BsonError):
    """A section stage was opened without its parent stages."""

    def __init__(self, line: int = 0):
        super().__init__(ErrorKind.BADGES, line)


class StatementError(BsonError):
    """Line shape not recognized or an expected token is missing."""

    def __init__(self, line: int = 0):
        super().__init__(ErrorKind.SYNTAX, line)


class ValueTypeError(BsonError):
    """A value is none of string, number, bool, null or array."""

    def __init__(self, line: int = 0):
        super().__init__(ErrorKind.TYPE, line)


class ReservedKeyError(BsonError):
    """A key or section name uses the reserved name."""

    def __init__(self, line: int = 0):
        super().__init__(ErrorKind.RESERVED_KEY, line)

