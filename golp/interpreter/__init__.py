from __future__ import annotations

import logging

from golp import SExpression, LispValue
from golp.reader.parser import parse
from golp.types.environment import Environment
from golp.evaluation.evaluator import evaluate
from golp.builtin.env_builtin import make_root_environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating Golp code one expression at a time.
    Maintains a single root Environment across calls, so definitions persist
    for the whole session and survive failed evaluations.
    """

    def __init__(self, strict: bool | None = None):
        self.env: Environment = make_root_environment(strict)

    def parse(self, code: str) -> SExpression:
        expr = parse(code)
        logger.debug("parsed %r -> %r", code, expr)
        return expr

    def eval(self, code: str) -> LispValue:
        return evaluate(self.parse(code), self.env)
