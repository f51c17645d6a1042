from __future__ import annotations

import logging
from typing import Callable, Dict, List

from .functions import Function
from .nodes import (
    BooleanLiteral,
    CallExpression,
    Expression,
    FunctionLiteral,
    Identifier,
    IfExpression,
    InfixExpression,
    IntegerLiteral,
    PrefixExpression,
)
from .objects import (
    FALSE,
    NULL,
    TRUE,
    Boolean,
    Error,
    Integer,
    Null,
    Object,
    ReturnValue,
    is_error,
    is_truthy,
    native_bool_to_boolean,
)
from .parser import INT64_MAX, INT64_MIN
from .scopes import Environment

logger = logging.getLogger(__name__)


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


_INTEGER_ARITHMETIC: Dict[str, Callable[[int, int], int]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _truncating_div,
}

_INTEGER_COMPARISONS: Dict[str, Callable[[int, int], bool]] = {
    "<": lambda a, b: a < b,
    ">": lambda a, b: a > b,
    "==": lambda a, b: a == b,
    "!=": lambda a, b: a != b,
}


class ExpressionMixin:
    def eval_IntegerLiteral(self, node: IntegerLiteral, env: Environment) -> Object:
        return Integer(node.value)

    def eval_BooleanLiteral(self, node: BooleanLiteral, env: Environment) -> Object:
        return native_bool_to_boolean(node.value)

    def eval_Identifier(self, node: Identifier, env: Environment) -> Object:
        value = env.load(node.value)
        if value is None:
            return self._error(f"identifier not found: {node.value}")
        return value

    # ----- operators -----

    def eval_PrefixExpression(self, node: PrefixExpression, env: Environment) -> Object:
        right = self.eval_expr(node.right, env)
        if is_error(right):
            return right
        if node.operator == "!":
            return self._eval_bang_operator(right)
        if node.operator == "-":
            return self._eval_minus_prefix_operator(right)
        return self._error(f"unknown operator: {node.operator}{right.type_name}")

    def _eval_bang_operator(self, right: Object) -> Object:
        if isinstance(right, Boolean):
            return native_bool_to_boolean(not right.value)
        if isinstance(right, Null):
            return TRUE
        return FALSE

    def _eval_minus_prefix_operator(self, right: Object) -> Object:
        if not isinstance(right, Integer):
            return self._error(f"unknown operator: -{right.type_name}")
        return self._checked_integer(-right.value, f"-{right.type_name}")

    def eval_InfixExpression(self, node: InfixExpression, env: Environment) -> Object:
        left = self.eval_expr(node.left, env)
        if is_error(left):
            return left
        right = self.eval_expr(node.right, env)
        if is_error(right):
            return right
        return self._apply_infix(node.operator, left, right)

    def _apply_infix(self, operator: str, left: Object, right: Object) -> Object:
        if isinstance(left, Integer) and isinstance(right, Integer):
            return self._apply_integer_infix(operator, left.value, right.value)
        if left.type_name != right.type_name:
            return self._error(f"type mismatch: {left.type_name} {operator} {right.type_name}")
        if isinstance(left, Boolean) and operator == "==":
            return native_bool_to_boolean(left.value == right.value)
        if isinstance(left, Boolean) and operator == "!=":
            return native_bool_to_boolean(left.value != right.value)
        return self._error(f"unknown operator: {left.type_name} {operator} {right.type_name}")

    def _apply_integer_infix(self, operator: str, left: int, right: int) -> Object:
        compare = _INTEGER_COMPARISONS.get(operator)
        if compare is not None:
            return native_bool_to_boolean(compare(left, right))
        arith = _INTEGER_ARITHMETIC.get(operator)
        if arith is None:
            return self._error(f"unknown operator: INTEGER {operator} INTEGER")
        if operator == "/" and right == 0:
            return self._error("division by zero")
        return self._checked_integer(arith(left, right), f"INTEGER {operator} INTEGER")

    def _checked_integer(self, value: int, description: str) -> Object:
        # Python ints never overflow; values are kept to the signed 64-bit range.
        if not INT64_MIN <= value <= INT64_MAX:
            return self._error(f"integer overflow: {description}")
        return Integer(value)

    # ----- control flow -----

    def eval_IfExpression(self, node: IfExpression, env: Environment) -> Object:
        condition = self.eval_expr(node.condition, env)
        if is_error(condition):
            return condition
        if is_truthy(condition):
            return self.exec_block(node.consequence, env)
        if node.alternative is not None:
            return self.exec_block(node.alternative, env)
        return NULL

    # ----- functions -----

    def eval_FunctionLiteral(self, node: FunctionLiteral, env: Environment) -> Object:
        logger.debug("creating closure fn (%s)", ", ".join(node.parameter_names))
        return Function(node.parameter_names, node.body, env)

    def eval_CallExpression(self, node: CallExpression, env: Environment) -> Object:
        function = self.eval_expr(node.function, env)
        if is_error(function):
            return function
        args = self._eval_arguments(node.arguments, env)
        if len(args) == 1 and is_error(args[0]):
            return args[0]
        return self.apply_function(function, args)

    def _eval_arguments(self, exprs: List[Expression], env: Environment) -> List[Object]:
        result: List[Object] = []
        for expr in exprs:
            value = self.eval_expr(expr, env)
            if is_error(value):
                return [value]
            result.append(value)
        return result

    def apply_function(self, function: Object, args: List[Object]) -> Object:
        if not isinstance(function, Function):
            return self._error(f"not a function: {function.type_name}")
        frame = function.bind_arguments(args)
        if isinstance(frame, Error):
            logger.debug("runtime error: %s", frame.message)
            return frame
        result = self.exec_block(function.body, frame)
        if isinstance(result, ReturnValue):
            return result.value
        return result

    def _error(self, message: str) -> Error:
        logger.debug("runtime error: %s", message)
        return Error(message)
