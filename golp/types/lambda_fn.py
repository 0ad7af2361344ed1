"""Closure representation for Golp."""

from __future__ import annotations

from golp import SExpression, LispValue
from golp.types.environment import Environment
from golp.types.symbol import Symbol


class Lambda:
    """A first-class lambda with formal parameters, body, and closure env."""

    __slots__ = ("formals", "body", "env")

    def __init__(self, formals: list[Symbol], body: SExpression, env: Environment):
        self.formals: list[Symbol] = formals
        self.body: SExpression = body
        # Captured by reference: later definitions in `env` are visible at call time
        self.env: Environment = env

    def __str__(self) -> str:
        from golp.debug_utils.pprint import to_lisp_string
        return to_lisp_string(self)

    def __repr__(self) -> str:
        """Return the Lisp-style representation of the lambda."""
        return str(self)

    def extend_env(self, args: list[LispValue]) -> Environment:
        """
        Bind the given argument values to this lambda's formal parameters and
        return a new Environment, parented to the captured environment, for
        evaluating the body.
        """
        return Environment.for_call(self.formals, args, self.env)
