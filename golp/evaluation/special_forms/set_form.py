from golp import EvaluatorFn
from golp import SExpression, LispValue
from golp.types.errors import GolpInvalidSymbol, GolpArityError
from golp.types.nil import Nil
from golp.types.symbol import Symbol
from golp.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise GolpArityError("set! requires exactly 2 arguments: (set! var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise GolpInvalidSymbol(f"set! first argument must be a Symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr, env)
    # Lenient chains ignore assignments to unbound names; strict ones raise from env.set
    if env.find(var_sym) is None and not env.strict:
        return Nil
    env.set(var_sym, value)

    return value
