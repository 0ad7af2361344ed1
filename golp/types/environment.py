"""Runtime environment for Golp.

The Environment stores bindings of Symbols to evaluated Lisp values and supports
nested scopes via an `outer` link. Frames are plain Python objects, so a frame
captured by a closure stays alive exactly as long as something references it.
"""

from __future__ import annotations

from typing import Iterable, Optional

from golp import LispValue
from golp.types.errors import GolpInvalidSymbol, GolpUnboundVariable
from golp.types.nil import Nil
from golp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer", "strict")

    def __init__(self, outer: Optional[Environment] = None, strict: bool | None = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer
        # Symbol-miss policy is fixed at the root and inherited by every child frame
        if strict is None:
            strict = outer.strict if outer is not None else False
        self.strict: bool = strict

    @classmethod
    def for_call(
        cls, formals: Iterable[Symbol], args: Iterable[LispValue], outer: Environment
    ) -> Environment:
        """Build a call frame by zipping formals with args positionally.

        Formals beyond the supplied args stay unbound in the new frame; args
        beyond the formals are ignored.
        """
        frame = cls(outer=outer)
        for name, value in zip(formals, args):
            frame.define(name, value)
        return frame

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame only, shadowing any outer binding.

        Raises GolpInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise GolpInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def get(self, symbol: Symbol) -> LispValue:
        """Return the binding of `symbol` in this frame; callers `find` first."""
        return self.vars[symbol]

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name` in the environment chain.

        Raises GolpUnboundVariable if the symbol is not found.
        """
        env = self.find(name)
        if env is None:
            raise GolpUnboundVariable(f"Cannot set unbound symbol {name}")
        env.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name` anywhere in the chain.

        A miss yields Nil, or raises GolpUnboundVariable on a strict chain.
        """
        env = self.find(name)
        if env is not None:
            return env.get(name)
        if self.strict:
            raise GolpUnboundVariable(f"Cannot lookup unbound symbol {name}")
        return Nil

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)
