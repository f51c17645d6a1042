"""
Syntax tree for the language.

Every node owns its children outright; nothing is shared between parents.
`str()` renders the canonical form: infix and prefix expressions are fully
parenthesized and statements are joined with `; `, so the rendering parses
back to an equal tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass
class Identifier:
    value: str

    def __str__(self) -> str:
        return self.value


@dataclass
class IntegerLiteral:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass
class BooleanLiteral:
    value: bool

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass
class PrefixExpression:
    operator: str
    right: "Expression"

    def __str__(self) -> str:
        return f"({self.operator}{self.right})"


@dataclass
class InfixExpression:
    left: "Expression"
    operator: str
    right: "Expression"

    def __str__(self) -> str:
        return f"({self.left} {self.operator} {self.right})"


@dataclass
class BlockStatement:
    statements: List["Statement"] = field(default_factory=list)

    def __str__(self) -> str:
        return "; ".join(str(stmt) for stmt in self.statements)


@dataclass
class IfExpression:
    condition: "Expression"
    consequence: BlockStatement
    alternative: Optional[BlockStatement] = None

    def __str__(self) -> str:
        out = f"if ({self.condition}) {{ {self.consequence} }}"
        if self.alternative is not None:
            out += f" else {{ {self.alternative} }}"
        return out


@dataclass
class FunctionLiteral:
    parameters: List[Identifier]
    body: BlockStatement

    @property
    def parameter_names(self) -> List[str]:
        return [param.value for param in self.parameters]

    def __str__(self) -> str:
        params = ", ".join(str(param) for param in self.parameters)
        return f"fn ({params}) {{ {self.body} }}"


@dataclass
class CallExpression:
    function: "Expression"
    arguments: List["Expression"] = field(default_factory=list)

    def __str__(self) -> str:
        args = ", ".join(str(arg) for arg in self.arguments)
        return f"{self.function}({args})"


Expression = Union[
    Identifier,
    IntegerLiteral,
    BooleanLiteral,
    PrefixExpression,
    InfixExpression,
    IfExpression,
    FunctionLiteral,
    CallExpression,
]


@dataclass
class LetStatement:
    name: Identifier
    value: Expression

    def __str__(self) -> str:
        return f"let {self.name} = {self.value}"


@dataclass
class ReturnStatement:
    value: Expression

    def __str__(self) -> str:
        return f"return {self.value}"


@dataclass
class ExpressionStatement:
    expression: Expression

    def __str__(self) -> str:
        return str(self.expression)


Statement = Union[LetStatement, ReturnStatement, ExpressionStatement]


@dataclass
class Program:
    statements: List[Statement] = field(default_factory=list)

    def __str__(self) -> str:
        return "; ".join(str(stmt) for stmt in self.statements)
