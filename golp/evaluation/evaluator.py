"""Core tree-walking evaluator for the Golp interpreter.

Dispatches special forms through SPECIAL_FORMS and treats every other
non-empty list as a procedure application. There is no tail-call
elimination: each nested call is a Python call.
"""

from __future__ import annotations

import logging

from golp import SExpression, LispValue
from golp.types.environment import Environment
from golp.types.symbol import Symbol
from golp.evaluation.apply import apply
from golp.evaluation.special_forms import SPECIAL_FORMS

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("eval expression: %r (%s)", expr, type(expr).__name__)

    match expr:
        case Symbol():
            return env.lookup(expr)

        case [Symbol() as head, *tail_args] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail_args, env, evaluate)

        case [head, *tail_args]:
            # Head and arguments are evaluated left to right before application.
            fn = evaluate(head, env)
            args = [evaluate(arg, env) for arg in tail_args]
            return apply(fn, args, env, evaluate)

    # --- Atoms and the empty list return as-is ---
    return expr
