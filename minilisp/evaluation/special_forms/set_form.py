from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispInvalidSymbol, MiniLispArityError
from minilisp.printer import to_string
from minilisp.types.symbol import Symbol
from minilisp.types.environment import Environment


def setq_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise MiniLispArityError("setq requires exactly 2 arguments: (setq var value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise MiniLispInvalidSymbol(f"Cannot setq to a non-symbol {to_string(var_sym)}")
    value = evaluate_fn(val_expr, env)
    env.define(var_sym, value)

    return value
