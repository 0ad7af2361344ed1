"""Built-in procedures for the Golp root environment.

The fixed table covers integer arithmetic and ordering. Every builtin takes
the calling environment and the list of evaluated arguments, and rejects any
argument that is not an Integer.
"""
from __future__ import annotations

from typing import Callable

from golp import LispValue
from golp.types.environment import Environment
from golp.types.symbol import Symbol
from golp.types.errors import GolpTypeMismatch

Builtin = Callable[[Environment, list[LispValue]], LispValue]

_MASK = (1 << 64) - 1
_SIGN = 1 << 63


def wrap_int64(value: int) -> int:
    """Reduce `value` to the signed 64-bit range with two's-complement wraparound."""
    value &= _MASK
    return value - (1 << 64) if value & _SIGN else value


def _check_integers(name: str, args: list[LispValue]) -> list[int]:
    for arg in args:
        # bool is an int subclass but not an Integer value
        if isinstance(arg, bool) or not isinstance(arg, int):
            raise GolpTypeMismatch(f"All arguments to {name} must be integers, got {arg!r}")
    return args


def builtin(name: str) -> Callable[[Builtin], Builtin]:
    """Tag a Python function with the Lisp name it is registered under."""
    def decorate(fn: Builtin) -> Builtin:
        fn.lisp_name = name
        return fn
    return decorate


# -------------------------------
# Arithmetic
# -------------------------------
@builtin("+")
def add(env: Environment, expr: list[LispValue]) -> int:
    """Return the sum of all arguments; 0 with no arguments."""
    return wrap_int64(sum(_check_integers("+", expr)))


@builtin("-")
def sub(env: Environment, expr: list[LispValue]) -> int:
    """Subtract all subsequent integers from the first; unary negation for one arg."""
    args = _check_integers("-", expr)
    if not args:
        return 0
    if len(args) == 1:
        return wrap_int64(-args[0])
    result = args[0]
    for x in args[1:]:
        result -= x
    return wrap_int64(result)


@builtin("*")
def mul(env: Environment, expr: list[LispValue]) -> int:
    """Return the product of all arguments; 1 with no arguments."""
    result = 1
    for x in _check_integers("*", expr):
        result = wrap_int64(result * x)
    return result


# -------------------------------
# Comparison
# -------------------------------
@builtin("<=")
def lte(env: Environment, expr: list[LispValue]) -> bool:
    """True if the arguments are non-decreasing; vacuously true for zero or one."""
    args = _check_integers("<=", expr)
    return all(a <= b for a, b in zip(args, args[1:]))


BUILTINS: dict[Symbol, Builtin] = {
    Symbol(fn.lisp_name): fn for fn in (add, sub, mul, lte)
}


def register(env: Environment) -> None:
    """Register all builtin procedures into the given environment."""
    env.update(BUILTINS)


def make_root_environment(strict: bool | None = None) -> Environment:
    """Create a root environment populated with the builtins.

    `strict` selects the symbol-miss policy; None defers to GOLP_STRICT.
    """
    if strict is None:
        from golp.config import is_strict
        strict = is_strict()
    env = Environment(strict=strict)
    register(env)
    return env
