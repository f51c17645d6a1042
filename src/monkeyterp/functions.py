from __future__ import annotations

import logging
from typing import List, Sequence

from .nodes import BlockStatement
from .objects import FUNCTION, Error, Object
from .scopes import Environment

logger = logging.getLogger(__name__)


class Function(Object):
    """
    A function value: parameters and body paired with the environment that was
    current when the literal was evaluated.

    The environment is shared, not copied, so bindings added to it later stay
    visible to the function.
    """

    type_name = FUNCTION

    def __init__(self, parameters: Sequence[str], body: BlockStatement, env: Environment):
        self.parameters: List[str] = list(parameters)
        self.body = body
        self.env = env

    @property
    def arity(self) -> int:
        return len(self.parameters)

    def bind_arguments(self, args: Sequence[Object]) -> Environment | Error:
        """Build the call frame for `args`, or an Error when the count is wrong."""
        if len(args) != self.arity:
            return Error(f"wrong number of arguments: want={self.arity}, got={len(args)}")
        logger.debug("calling function with %d argument(s)", len(args))
        frame = self.env.enclosed()
        for name, value in zip(self.parameters, args):
            frame.store(name, value)
        return frame

    def __str__(self) -> str:
        return f"fn ({', '.join(self.parameters)}) {{ {self.body} }}"

    def __repr__(self) -> str:
        return f"<Function ({', '.join(self.parameters)})>"
