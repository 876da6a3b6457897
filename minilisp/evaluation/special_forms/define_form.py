from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError, MiniLispInvalidSymbol, MiniLispTypeError
from minilisp.printer import to_string
from minilisp.types.environment import Environment
from minilisp.types.nil import is_nil
from minilisp.types.symbol import Symbol


def defun_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (defun name (formals...) body...)
    Binds `name` to the list (formals body) and returns the name.
    """
    if len(tail) < 2:
        raise MiniLispArityError("defun requires a name and a formals list")

    name, formals, *body = tail
    if not isinstance(name, Symbol):
        raise MiniLispInvalidSymbol(f"Cannot defun a non-symbol {to_string(name)}")
    if is_nil(formals):
        formals = []
    if not isinstance(formals, list):
        raise MiniLispTypeError(f"Formals of {name} must be a list, got {to_string(formals)}")
    for formal in formals:
        if not isinstance(formal, Symbol):
            raise MiniLispInvalidSymbol(f"Non-symbol {to_string(formal)} found in formals of {name}")
    env.define(name, [formals, body])
    return name
