from __future__ import annotations

from .tokens import Token, TokenKind


class ParseError(Exception):
    """Raised for the first syntax error found; parsing never resumes after one."""


class UnexpectedToken(ParseError):
    def __init__(self, expected: TokenKind, found: Token):
        self.expected = expected
        self.found = found
        super().__init__(f"expected next token to be {expected}, got {found} instead")


class InvalidToken(ParseError):
    def __init__(self, found: Token):
        self.found = found
        super().__init__(f"invalid token {found}")


class InvalidIntegerLiteral(ParseError):
    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f'could not parse "{literal}" as integer')
