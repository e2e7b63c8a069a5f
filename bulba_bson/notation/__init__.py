"""
BULBA! notation: lexer, parser, loader and printer.
"""

from .errors import (
    BadgesError,
    BsonError,
    ErrorKind,
    HeaderError,
    IndentError,
    ReservedKeyError,
    StatementError,
    TabCharacterError,
    ValueTypeError,
)
from .lexer import Lexer, Token, TokenType, tokenize
from .loader import DocumentLoader, DocumentSummary, LoadError
from .parser import DocumentParser, parse, parse_document, parse_document_file
from .printer import print_document, render
from .values import Document, parse_value, validate_key

__all__ = [
    "BadgesError",
    "BsonError",
    "Document",
    "DocumentLoader",
    "DocumentParser",
    "DocumentSummary",
    "ErrorKind",
    "HeaderError",
    "IndentError",
    "Lexer",
    "LoadError",
    "ReservedKeyError",
    "StatementError",
    "TabCharacterError",
    "Token",
    "TokenType",
    "ValueTypeError",
    "parse",
    "parse_document",
    "parse_document_file",
    "parse_value",
    "print_document",
    "render",
    "tokenize",
    "validate_key",
]
