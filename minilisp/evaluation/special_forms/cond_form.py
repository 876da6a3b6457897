"""Special form: cond, the multi-branch conditional."""

from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.errors import MiniLispTypeError
from minilisp.printer import to_string
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil, is_true


def cond_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """(cond (test form...) ...)

    Runs the forms of the first clause whose test is true and returns the
    last value. A clause without forms returns its test value. NIL when no
    clause matches.
    """
    for clause in tail:
        if not isinstance(clause, list) or not clause:
            raise MiniLispTypeError(f"cond clause must be a non-empty list, got {to_string(clause)}")
        test, *body = clause
        result = evaluate_fn(test, env)
        if is_true(result):
            for expr in body:
                result = evaluate_fn(expr, env)
            return result
    return Nil
