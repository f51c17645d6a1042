"""Runtime values produced by the evaluator and stored in environments."""

from __future__ import annotations

from dataclasses import dataclass

INTEGER = "INTEGER"
BOOLEAN = "BOOLEAN"
NULL_TYPE = "NULL"
RETURN_VALUE = "RETURN_VALUE"
ERROR = "ERROR"
FUNCTION = "FUNCTION"


class Object:
    type_name = "OBJECT"

    def inspect(self) -> str:
        return str(self)


@dataclass(frozen=True)
class Integer(Object):
    value: int

    type_name = INTEGER

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Boolean(Object):
    value: bool

    type_name = BOOLEAN

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Null(Object):
    type_name = NULL_TYPE

    def __str__(self) -> str:
        return "null"


@dataclass(frozen=True)
class ReturnValue(Object):
    """Wraps the value of a `return` while it unwinds to the enclosing body."""

    value: Object

    type_name = RETURN_VALUE

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Error(Object):
    message: str

    type_name = ERROR

    def __str__(self) -> str:
        return f"Error: {self.message}"


TRUE = Boolean(True)
FALSE = Boolean(False)
NULL = Null()


def native_bool_to_boolean(value: bool) -> Boolean:
    return TRUE if value else FALSE


def is_error(obj: Object) -> bool:
    return isinstance(obj, Error)


def is_truthy(obj: Object) -> bool:
    if isinstance(obj, Null):
        return False
    if isinstance(obj, Boolean):
        return obj.value
    return True
