from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError, MiniLispInvalidSymbol, MiniLispTypeError
from minilisp.printer import to_string
from minilisp.types.environment import Environment
from minilisp.types.nil import is_nil
from minilisp.types.symbol import Symbol


def apply_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (apply fname args)
    Both arguments are evaluated. fname must name a function and args must be
    a list; the call form (fname arg...) is then built and evaluated, so the
    elements of args are evaluated once more as the call's actual arguments.
    """
    if len(tail) != 2:
        raise MiniLispArityError(
            "apply expects exactly two arguments: function name and argument list"
        )

    fn_expr, args_expr = tail
    fn_val = evaluate_fn(fn_expr, env)
    args_val = evaluate_fn(args_expr, env)

    if not isinstance(fn_val, Symbol):
        raise MiniLispInvalidSymbol(f"Cannot apply a non-symbol {to_string(fn_val)}")
    if is_nil(args_val):
        args_val = []
    if not isinstance(args_val, list):
        raise MiniLispTypeError(f"apply arguments must evaluate to a list, got {to_string(args_val)}")

    return evaluate_fn([fn_val, *args_val], env)
