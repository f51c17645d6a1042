import logging

from .common import InvalidIntegerLiteral, InvalidToken, ParseError, UnexpectedToken
from .core import RunResult
from .functions import Function
from .lexer import Lexer
from .main import Interpreter
from .objects import FALSE, NULL, TRUE, Boolean, Error, Integer, Null, Object, ReturnValue
from .parser import Parser, Precedence, parse
from .scopes import Environment
from .tokens import Token, TokenKind

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FALSE",
    "NULL",
    "TRUE",
    "Boolean",
    "Environment",
    "Error",
    "Function",
    "Integer",
    "Interpreter",
    "InvalidIntegerLiteral",
    "InvalidToken",
    "Lexer",
    "Null",
    "Object",
    "ParseError",
    "Parser",
    "Precedence",
    "ReturnValue",
    "RunResult",
    "Token",
    "TokenKind",
    "UnexpectedToken",
    "parse",
]
