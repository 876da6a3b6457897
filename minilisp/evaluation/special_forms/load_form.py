from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError, MiniLispTypeError
from minilisp.printer import to_string
from minilisp.types.environment import Environment


def load_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(load "path") reads and evaluates every form of a file, returning T."""
    if len(tail) != 1:
        raise MiniLispArityError("load expects exactly one argument")
    path = evaluate_fn(tail[0], env)
    if not isinstance(path, str):
        raise MiniLispTypeError(f"load requires a filename string, got {to_string(path)}")
    # Lazy import: the loader depends on the evaluator module
    from minilisp.loader import load
    return load(path, env)
