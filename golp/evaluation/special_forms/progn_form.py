from golp import EvaluatorFn
from golp import SExpression, LispValue
from golp.types.environment import Environment


def progn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = []
    for e in tail:
        result = evaluate_fn(e, env)
    return result
