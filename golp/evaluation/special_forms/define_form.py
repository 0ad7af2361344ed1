from golp import EvaluatorFn
from golp import SExpression, LispValue
from golp.types.errors import GolpArityError, GolpInvalidSymbol
from golp.types.nil import Nil
from golp.types.symbol import Symbol
from golp.types.environment import Environment


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value) / (def name value)
    Always binds in the current frame, shadowing any outer binding.
    """
    if len(tail) != 2:
        raise GolpArityError("define requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise GolpInvalidSymbol(f"define first argument must be a Symbol, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return Nil
