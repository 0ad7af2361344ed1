# Core type aliases for Golp's data model.
# Plain Python types (bool, int, float, list) represent both code (forms) and
# runtime values; Symbol, Lambda and Nil are the only dedicated classes.
#
# Naming guidance:
# - SExpression: use in reader code to denote syntactic forms (code-as-data).
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed into special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
