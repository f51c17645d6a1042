from __future__ import annotations

from typing import Iterator

from .tokens import EOF_TOKEN, Token, TokenKind, lookup_ident

_WHITESPACE = frozenset(" \t\r\n")

_SINGLE_CHAR_TOKENS = {
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "!": TokenKind.BANG,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}

# `=` and `!` become `==` and `!=` when followed by `=`.
_TWO_CHAR_TOKENS = {
    "==": TokenKind.EQ,
    "!=": TokenKind.NOT_EQ,
}


def _is_letter(ch: str) -> bool:
    return ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """
    Scans source text into tokens on demand.

    Once the input is exhausted `next_token()` keeps returning the EOF token,
    so a consumer may pull past the end without special casing.
    """

    def __init__(self, source: str):
        self.source = source
        self.position = 0

    def _peek_char(self, offset: int = 0) -> str:
        index = self.position + offset
        if index < len(self.source):
            return self.source[index]
        return ""

    def _skip_whitespace(self) -> None:
        while self._peek_char() in _WHITESPACE:
            self.position += 1

    def _read_while(self, predicate) -> str:
        start = self.position
        while self._peek_char() and predicate(self._peek_char()):
            self.position += 1
        return self.source[start : self.position]

    def next_token(self) -> Token:
        self._skip_whitespace()
        ch = self._peek_char()
        if not ch:
            return EOF_TOKEN

        pair = ch + self._peek_char(1)
        if pair in _TWO_CHAR_TOKENS:
            self.position += 2
            return Token(_TWO_CHAR_TOKENS[pair], pair)

        if ch in _SINGLE_CHAR_TOKENS:
            self.position += 1
            return Token(_SINGLE_CHAR_TOKENS[ch], ch)

        if _is_letter(ch):
            literal = self._read_while(_is_letter)
            return Token(lookup_ident(literal), literal)

        if _is_digit(ch):
            return Token(TokenKind.INT, self._read_while(_is_digit))

        self.position += 1
        return Token(TokenKind.ILLEGAL, ch)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, EOF."""
        while True:
            token = self.next_token()
            if token.kind is TokenKind.EOF:
                return
            yield token
