from __future__ import annotations

import enum
import logging
from typing import Callable, Dict, List, Optional, Protocol

from .common import InvalidIntegerLiteral, InvalidToken, UnexpectedToken
from .lexer import Lexer
from .nodes import (
    BlockStatement,
    BooleanLiteral,
    CallExpression,
    Expression,
    ExpressionStatement,
    FunctionLiteral,
    Identifier,
    IfExpression,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
    Statement,
)
from .tokens import EOF_TOKEN, Token, TokenKind

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class Precedence(enum.IntEnum):
    LOWEST = 1
    EQUALS = 2
    LESSGREATER = 3
    SUM = 4
    PRODUCT = 5
    PREFIX = 6
    CALL = 7


PRECEDENCES: Dict[TokenKind, Precedence] = {
    TokenKind.EQ: Precedence.EQUALS,
    TokenKind.NOT_EQ: Precedence.EQUALS,
    TokenKind.LT: Precedence.LESSGREATER,
    TokenKind.GT: Precedence.LESSGREATER,
    TokenKind.PLUS: Precedence.SUM,
    TokenKind.MINUS: Precedence.SUM,
    TokenKind.ASTERISK: Precedence.PRODUCT,
    TokenKind.SLASH: Precedence.PRODUCT,
    TokenKind.LPAREN: Precedence.CALL,
}


class TokenSource(Protocol):
    def next_token(self) -> Token: ...


class Parser:
    """
    Pratt parser over a token source.

    Keeps two tokens of lookahead: `cur_token` is the token being parsed and
    `peek_token` the one after it. Each `parse_*` method starts with its first
    token in `cur_token` and leaves `cur_token` on its last token.
    """

    def __init__(self, tokens: TokenSource):
        self.tokens = tokens
        self.cur_token: Token = EOF_TOKEN
        self.peek_token: Token = EOF_TOKEN
        self._exhausted = False

        self.prefix_parse_fns: Dict[TokenKind, Callable[[], Expression]] = {
            TokenKind.IDENT: self.parse_identifier,
            TokenKind.INT: self.parse_integer_literal,
            TokenKind.TRUE: self.parse_boolean,
            TokenKind.FALSE: self.parse_boolean,
            TokenKind.BANG: self.parse_prefix_expression,
            TokenKind.MINUS: self.parse_prefix_expression,
            TokenKind.LPAREN: self.parse_grouped_expression,
            TokenKind.IF: self.parse_if_expression,
            TokenKind.FUNCTION: self.parse_function_literal,
        }
        self.infix_parse_fns: Dict[TokenKind, Callable[[Expression], Expression]] = {
            kind: self.parse_infix_expression for kind in PRECEDENCES if kind is not TokenKind.LPAREN
        }
        self.infix_parse_fns[TokenKind.LPAREN] = self.parse_call_expression

        self.next_token()
        self.next_token()

    # ----- token helpers -----

    def next_token(self) -> None:
        self.cur_token = self.peek_token
        # EOF is terminal: the source is never pulled again once it yields one.
        if not self._exhausted:
            self.peek_token = self.tokens.next_token()
            self._exhausted = self.peek_token.kind is TokenKind.EOF

    def cur_token_is(self, kind: TokenKind) -> bool:
        return self.cur_token.kind is kind

    def peek_token_is(self, kind: TokenKind) -> bool:
        return self.peek_token.kind is kind

    def expect_peek(self, kind: TokenKind) -> None:
        if not self.peek_token_is(kind):
            raise UnexpectedToken(kind, self.peek_token)
        self.next_token()

    def peek_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.peek_token.kind, Precedence.LOWEST)

    def cur_precedence(self) -> Precedence:
        return PRECEDENCES.get(self.cur_token.kind, Precedence.LOWEST)

    # ----- statements -----

    def parse_program(self) -> Program:
        program = Program()
        while not self.cur_token_is(TokenKind.EOF):
            program.statements.append(self.parse_statement())
            self.next_token()
        logger.debug("parsed program with %d statement(s)", len(program.statements))
        return program

    def parse_statement(self) -> Statement:
        if self.cur_token_is(TokenKind.LET):
            return self.parse_let_statement()
        if self.cur_token_is(TokenKind.RETURN):
            return self.parse_return_statement()
        return self.parse_expression_statement()

    def parse_let_statement(self) -> LetStatement:
        self.expect_peek(TokenKind.IDENT)
        name = Identifier(self.cur_token.literal)
        self.expect_peek(TokenKind.ASSIGN)
        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        if self.peek_token_is(TokenKind.SEMICOLON):
            self.next_token()
        return LetStatement(name, value)

    def parse_return_statement(self) -> ReturnStatement:
        self.next_token()
        value = self.parse_expression(Precedence.LOWEST)
        if self.peek_token_is(TokenKind.SEMICOLON):
            self.next_token()
        return ReturnStatement(value)

    def parse_expression_statement(self) -> ExpressionStatement:
        expression = self.parse_expression(Precedence.LOWEST)
        if self.peek_token_is(TokenKind.SEMICOLON):
            self.next_token()
        return ExpressionStatement(expression)

    def parse_block_statement(self) -> BlockStatement:
        block = BlockStatement()
        self.next_token()
        while not self.cur_token_is(TokenKind.RBRACE):
            if self.cur_token_is(TokenKind.EOF):
                raise UnexpectedToken(TokenKind.RBRACE, self.cur_token)
            block.statements.append(self.parse_statement())
            self.next_token()
        return block

    # ----- expressions -----

    def parse_expression(self, precedence: Precedence) -> Expression:
        prefix = self.prefix_parse_fns.get(self.cur_token.kind)
        if prefix is None:
            raise InvalidToken(self.cur_token)
        left = prefix()

        while not self.peek_token_is(TokenKind.SEMICOLON) and precedence < self.peek_precedence():
            infix = self.infix_parse_fns.get(self.peek_token.kind)
            if infix is None:
                return left
            self.next_token()
            left = infix(left)
        return left

    def parse_identifier(self) -> Identifier:
        return Identifier(self.cur_token.literal)

    def parse_integer_literal(self) -> IntegerLiteral:
        literal = self.cur_token.literal
        try:
            value = int(literal)
        except ValueError:
            raise InvalidIntegerLiteral(literal) from None
        if not INT64_MIN <= value <= INT64_MAX:
            raise InvalidIntegerLiteral(literal)
        return IntegerLiteral(value)

    def parse_boolean(self) -> BooleanLiteral:
        return BooleanLiteral(self.cur_token_is(TokenKind.TRUE))

    def parse_prefix_expression(self) -> PrefixExpression:
        operator = self.cur_token.literal
        self.next_token()
        return PrefixExpression(operator, self.parse_expression(Precedence.PREFIX))

    def parse_infix_expression(self, left: Expression) -> InfixExpression:
        operator = self.cur_token.literal
        precedence = self.cur_precedence()
        self.next_token()
        return InfixExpression(left, operator, self.parse_expression(precedence))

    def parse_grouped_expression(self) -> Expression:
        self.next_token()
        expression = self.parse_expression(Precedence.LOWEST)
        self.expect_peek(TokenKind.RPAREN)
        return expression

    def parse_if_expression(self) -> IfExpression:
        self.expect_peek(TokenKind.LPAREN)
        self.next_token()
        condition = self.parse_expression(Precedence.LOWEST)
        self.expect_peek(TokenKind.RPAREN)
        self.expect_peek(TokenKind.LBRACE)
        consequence = self.parse_block_statement()

        alternative: Optional[BlockStatement] = None
        if self.peek_token_is(TokenKind.ELSE):
            self.next_token()
            self.expect_peek(TokenKind.LBRACE)
            alternative = self.parse_block_statement()
        return IfExpression(condition, consequence, alternative)

    def parse_function_literal(self) -> FunctionLiteral:
        self.expect_peek(TokenKind.LPAREN)
        parameters = self.parse_function_parameters()
        self.expect_peek(TokenKind.LBRACE)
        return FunctionLiteral(parameters, self.parse_block_statement())

    def parse_function_parameters(self) -> List[Identifier]:
        parameters: List[Identifier] = []
        if self.peek_token_is(TokenKind.RPAREN):
            self.next_token()
            return parameters

        self.expect_peek(TokenKind.IDENT)
        parameters.append(Identifier(self.cur_token.literal))
        while self.peek_token_is(TokenKind.COMMA):
            self.next_token()
            self.expect_peek(TokenKind.IDENT)
            parameters.append(Identifier(self.cur_token.literal))
        self.expect_peek(TokenKind.RPAREN)
        return parameters

    def parse_call_expression(self, function: Expression) -> CallExpression:
        return CallExpression(function, self.parse_call_arguments())

    def parse_call_arguments(self) -> List[Expression]:
        arguments: List[Expression] = []
        if self.peek_token_is(TokenKind.RPAREN):
            self.next_token()
            return arguments

        self.next_token()
        arguments.append(self.parse_expression(Precedence.LOWEST))
        while self.peek_token_is(TokenKind.COMMA):
            self.next_token()
            self.next_token()
            arguments.append(self.parse_expression(Precedence.LOWEST))
        self.expect_peek(TokenKind.RPAREN)
        return arguments


def parse(source: str) -> Program:
    """Parse `source` into a Program, raising ParseError on the first syntax error."""
    return Parser(Lexer(source)).parse_program()
