from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.errors import MiniLispArityError
from minilisp.types.environment import Environment


def quote_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    if len(tail) != 1:
        raise MiniLispArityError("Quote expects exactly 1 argument")
    return tail[0]
