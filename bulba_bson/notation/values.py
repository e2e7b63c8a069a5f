"""
Value grammar shared by the parser for assignments and array items.

    value := STRING | NUMBER | BOOLEAN | NULL | array
    array := ARRAY_START (value | COMMA)* ARRAY_END

Values map onto plain Python objects: str, int, float, bool, None, list
and dict (sections).
"""

from typing import Any

from ..const import DEFAULT_MAX_ARRAY_DEPTH, RESERVED_KEY
from .errors import ReservedKeyError, StatementError, ValueTypeError
from .lexer import Token, TokenType, coerce_number

Document = dict[str, Any]

# Tokens that start a new statement; seeing one where a value is expected
# means the value is missing.
_STATEMENT_BOUNDARY = (TokenType.INDENT, TokenType.EOF)


def validate_key(name: str, line: int = 0) -> None:
    """Reject the reserved name as a key or section name."""
    if name == RESERVED_KEY:
        raise ReservedKeyError(line)


def _line_at(tokens: list[Token], cursor: int) -> int:
    if not tokens:
        return 0
    return tokens[min(cursor, len(tokens) - 1)].line


def parse_value(
    tokens: list[Token],
    cursor: int,
    depth: int = 0,
    max_depth: int = DEFAULT_MAX_ARRAY_DEPTH,
) -> tuple[Any, int]:
    """
    Parse one value starting at ``tokens[cursor]``.

    Args:
        tokens: Token stream from the lexer
        cursor: Index of the first token of the value
        depth: Current array nesting depth
        max_depth: Deepest array nesting accepted

    Returns:
        Tuple of (value, index of the first token after the value)

    Raises:
        StatementError: Tokens run out or the value is missing
        ValueTypeError: Token cannot start a value
    """
    if cursor >= len(tokens):
        raise StatementError(_line_at(tokens, cursor))

    token = tokens[cursor]

    if token.type == TokenType.STRING:
        return token.literal, cursor + 1

    if token.type == TokenType.NUMBER:
        number = coerce_number(token.literal)
        if number is None:
            raise ValueTypeError(token.line)
        return number, cursor + 1

    if token.type == TokenType.BOOLEAN:
        return token.literal == "true", cursor + 1

    if token.type == TokenType.NULL:
        return None, cursor + 1

    if token.type == TokenType.ARRAY_START:
        return _parse_array(tokens, cursor, depth, max_depth)

    if token.type in _STATEMENT_BOUNDARY:
        raise StatementError(token.line)

    raise ValueTypeError(token.line)


def _parse_array(
    tokens: list[Token],
    cursor: int,
    depth: int,
    max_depth: int,
) -> tuple[list[Any], int]:
    if depth >= max_depth:
        raise StatementError(tokens[cursor].line)

    items: list[Any] = []
    position = cursor + 1

    while position < len(tokens):
        token = tokens[position]

        if token.type == TokenType.ARRAY_END:
            return items, position + 1

        if token.type == TokenType.COMMA:
            position += 1
            continue

        value, position = parse_value(tokens, position, depth + 1, max_depth)
        items.append(value)

    # Ran out of tokens before the closing delimiter
    raise StatementError(_line_at(tokens, position))
