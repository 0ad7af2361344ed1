from golp.types.errors import GolpArityError, GolpInvalidSymbol
from golp.types.lambda_fn import Lambda

from golp import EvaluatorFn
from golp import SExpression, LispValue
from golp.types.environment import Environment
from golp.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body) takes a single body expression; sequences need begin.
    if len(tail) != 2:
        raise GolpArityError("lambda requires a parameter list and exactly one body expression")

    params, body = tail
    if not isinstance(params, list) or not all(isinstance(p, Symbol) for p in params):
        raise GolpInvalidSymbol(f"lambda parameters must be a list of symbols, got {params!r}")

    return Lambda(list(params), body, env)
