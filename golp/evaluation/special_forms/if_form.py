from golp import EvaluatorFn
from golp import SExpression, LispValue
from golp.types.errors import GolpArityError, GolpTypeMismatch
from golp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(if test then else); the test must evaluate to a boolean."""
    if len(tail) != 3:
        raise GolpArityError("if requires a test, a then-expression and an else-expression")

    test, then, else_ = tail
    cond = evaluate_fn(test, env)
    if not isinstance(cond, bool):
        raise GolpTypeMismatch(f"if test must be a boolean, got {cond!r}")

    return evaluate_fn(then if cond else else_, env)
