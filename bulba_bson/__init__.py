"""
Bulba BSON: lexer and parser for the indentation-sensitive BULBA! notation.
"""

from .const import APP_VERSION
from .notation import (
    BsonError,
    DocumentLoader,
    ErrorKind,
    LoadError,
    parse,
    parse_document,
    parse_document_file,
    render,
    tokenize,
)

__version__ = APP_VERSION

__all__ = [
    "__version__",
    "BsonError",
    "DocumentLoader",
    "ErrorKind",
    "LoadError",
    "parse",
    "parse_document",
    "parse_document_file",
    "render",
    "tokenize",
]
