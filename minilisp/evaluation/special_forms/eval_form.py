from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError
from minilisp.types.environment import Environment


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise MiniLispArityError("eval expects exactly one argument")
    expr_to_eval = evaluate_fn(tail[0], env)
    return evaluate_fn(expr_to_eval, env)
