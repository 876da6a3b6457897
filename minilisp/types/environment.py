"""Runtime environment for minilisp.

The Environment stores bindings of Symbols to evaluated Lisp values. Each
frame keeps every binding it was ever given, in insertion order, and never
drops one; lookups return the most recent binding. A function call runs in a
child frame linked to the caller's environment through `outer`, so the callee
sees all of the caller's bindings while its own definitions vanish with the
frame when the call returns.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from minilisp import LispValue
from minilisp.errors import MiniLispInvalidSymbol, MiniLispUnboundSymbol
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Chain of append-only binding frames mapping Symbols to Lisp values."""

    __slots__ = ("bindings", "vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        # Every (name, value) ever defined in this frame, oldest first
        self.bindings: list[tuple[Symbol, LispValue]] = []
        # Newest value per name in this frame
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Append a binding of `name` to `value` in this frame.

        Older bindings of the same name are shadowed, not replaced.
        Raises MiniLispInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise MiniLispInvalidSymbol(f"Cannot define {name} as a symbol")
        logger.debug("define %s", name)
        self.bindings.append((name, value))
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the most recent value bound to `name`.

        Raises MiniLispUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise MiniLispUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def extend(self) -> Environment:
        """Return a fresh child frame for a function call."""
        return Environment(outer=self)

    def as_of(self, mark: int) -> Environment:
        """Return this frame as it stood when it held `mark` bindings.

        Returns `self` when nothing was defined since; otherwise a detached
        copy of the first `mark` bindings sharing the same `outer`.
        """
        if mark == len(self.bindings):
            return self
        frame = Environment(outer=self.outer)
        for name, value in self.bindings[:mark]:
            frame.bindings.append((name, value))
            frame.vars[name] = value
        return frame

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's visible variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
