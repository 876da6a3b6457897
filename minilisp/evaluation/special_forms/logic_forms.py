from minilisp import SExpression, LispValue, EvaluatorFn
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil, T, is_nil


def and_form(tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn) -> LispValue:
    """Short-circuiting logical AND special form.

    (and a b c ...) evaluates each operand left-to-right and returns NIL as
    soon as one is NIL or the empty list. Otherwise returns T, also with zero
    operands.
    """
    for expr in tail:
        if is_nil(evaluate_fn(expr, env)):
            return Nil
    return T
