from __future__ import annotations

from .nodes import BlockStatement, ExpressionStatement, LetStatement, ReturnStatement
from .objects import NULL, Error, Object, ReturnValue, is_error
from .scopes import Environment


class StatementMixin:
    def exec_block(self, block: BlockStatement, env: Environment) -> Object:
        # A ReturnValue is passed up unchanged so that enclosing blocks stop
        # too; only a function call or the program unwraps it.
        result: Object = NULL
        for stmt in block.statements:
            result = self.exec_stmt(stmt, env)
            if isinstance(result, (ReturnValue, Error)):
                return result
        return result

    def exec_LetStatement(self, node: LetStatement, env: Environment) -> Object:
        value = self.eval_expr(node.value, env)
        if is_error(value):
            return value
        return env.store(node.name.value, value)

    def exec_ReturnStatement(self, node: ReturnStatement, env: Environment) -> Object:
        value = self.eval_expr(node.value, env)
        if is_error(value):
            return value
        return ReturnValue(value)

    def exec_ExpressionStatement(self, node: ExpressionStatement, env: Environment) -> Object:
        return self.eval_expr(node.expression, env)
