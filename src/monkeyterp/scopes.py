from __future__ import annotations

from typing import Dict, Iterator, Optional

from .objects import Object


class Environment:
    """
    Name bindings for one scope, chained to the scope that encloses it.

    Closures hold a reference to the environment they were created in, so a
    frame stays alive for as long as any function defined in it does.
    """

    def __init__(self, outer: Optional["Environment"] = None):
        self.bindings: Dict[str, Object] = {}
        self.outer = outer

    def enclosed(self) -> "Environment":
        return Environment(outer=self)

    def load(self, name: str) -> Optional[Object]:
        """Resolve `name` through the chain; None when no scope binds it."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.bindings:
                return env.bindings[name]
            env = env.outer
        return None

    def store(self, name: str, value: Object) -> Object:
        self.bindings[name] = value
        return value

    def __contains__(self, name: str) -> bool:
        return self.load(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def __repr__(self) -> str:
        depth = 0
        env = self.outer
        while env is not None:
            depth += 1
            env = env.outer
        return f"<Environment names={sorted(self.bindings)!r} depth={depth}>"
