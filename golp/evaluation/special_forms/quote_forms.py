from golp import SExpression, LispValue, EvaluatorFn
from golp.types.environment import Environment
from golp.types.errors import GolpArityError


def quote_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise GolpArityError("quote expects exactly 1 argument")
    return tail[0]
