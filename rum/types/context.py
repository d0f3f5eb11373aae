"""Runtime environment for rum.

A Context maps identifier names to Values and links to an optional parent.
Lookups walk outward through the parents. A Context belongs to the call that
created it, but a Closure created during that call keeps a reference to it,
so it stays alive as long as that closure does.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any, Callable, Optional

from rum.errors import UnknownVariableError
from rum.types.adapters import Adapter
from rum.types.callables import HostFunction
from rum.types.values import Identifier, Value

logger = logging.getLogger(__name__)


def _name(identifier: Identifier | str) -> str:
    return identifier.name if isinstance(identifier, Identifier) else identifier


class Context:
    """Hierarchical mapping from identifier names to values."""

    __slots__ = ("vars", "parent")

    def __init__(self, parent: Optional[Context] = None):
        self.vars: dict[str, Value] = {}
        self.parent: Context | None = parent

    def child(self) -> Context:
        return Context(parent=self)

    def root(self) -> Context:
        env = self
        while env.parent is not None:
            env = env.parent
        return env

    def define(self, identifier: Identifier | str, value: Value) -> Value:
        """Bind `identifier` in this Context. An existing binding here is overwritten."""
        self.vars[_name(identifier)] = value
        return value

    def find(self, identifier: Identifier | str) -> Optional[Context]:
        """Find the nearest Context in the chain binding `identifier`."""
        name = _name(identifier)
        env: Optional[Context] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.parent
        return None

    def get(self, identifier: Identifier | str) -> Value:
        """Look up `identifier`, walking the parents.

        Raises UnknownVariableError, located at the identifier, if no Context
        in the chain binds it.
        """
        env = self.find(identifier)
        if env is None:
            ref = identifier.ref if isinstance(identifier, Identifier) else None
            raise UnknownVariableError(f"{_name(identifier)!r} does not exist", ref)
        return env.vars[_name(identifier)]

    def __contains__(self, identifier: Identifier | str) -> bool:
        return self.find(identifier) is not None

    def register_function(
        self,
        name: Identifier | str,
        fn: Callable[..., Any],
        *adapters: Adapter,
        unwrap: bool = True,
    ) -> HostFunction:
        """Expose the Python callable `fn` as `name`, behind `adapters`."""
        host = HostFunction(_name(name), fn, adapters, unwrap=unwrap)
        logger.debug("registering host function %s (%d adapters)", host.name, len(adapters))
        self.define(name, host)
        return host

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        depth = 0
        env = self.parent
        while env is not None:
            depth += 1
            env = env.parent
        return f"<Context {len(self.vars)} bindings, depth {depth}>"
