"""Application engine for Golp.

Centralizes procedure application so the evaluator and builtins share one
NotCallable check:
- Lambda closures run their body in a fresh frame parented to the captured
  environment (never the caller's).
- Python callables registered in the environment are invoked with the
  caller's environment and the evaluated argument list.
"""

from typing import Callable

from golp import LispValue, EvaluatorFn
from golp.types.environment import Environment
from golp.types.lambda_fn import Lambda
from golp.types.errors import GolpNotCallable


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a Lisp Lambda value to already-evaluated arguments.

    Formals are zipped positionally with `args`; missing arguments leave their
    formals unbound and surplus arguments are ignored.
    """
    new_env = fn.extend_env(args)
    return evaluate_fn(fn.body, new_env)


def apply(
    head: Lambda | Callable[[Environment, list[LispValue]], LispValue] | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a Python callable; anything else is not callable."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        from golp.debug_utils.pprint import to_lisp_string
        raise GolpNotCallable(f"Cannot apply non-procedure {to_lisp_string(head)}")
