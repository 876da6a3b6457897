# Core type aliases for minilisp's data model.
# Forms and runtime values share one representation: int, float, str, list,
# plus the Symbol, Pair, T and Nil types from `minilisp.types`.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
