"""Application of user-defined functions.

`defun` stores a function as the two-element list `(formals body)`, where body
is the list of forms to run. Calling it binds each formal to the matching
actual argument, evaluated in the caller's environment, inside a child frame
of that environment as it stood before the actuals ran, then evaluates the body forms in order. The child frame
is dropped on return, so nothing the body defines leaks back to the caller.
"""

from __future__ import annotations

import logging

from minilisp import EvaluatorFn, SExpression, LispValue
from minilisp.errors import MiniLispArityError, MiniLispInvalidSymbol, MiniLispTypeError
from minilisp.printer import to_string
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil, is_nil
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _as_list(value: LispValue) -> list | None:
    if is_nil(value):
        return []
    if isinstance(value, list):
        return value
    return None


def unpack_function(name: Symbol, fn_value: LispValue) -> tuple[list[Symbol], list[SExpression]]:
    """Split a stored function into (formals, body), validating its shape."""
    if not (isinstance(fn_value, list) and len(fn_value) == 2):
        raise MiniLispTypeError(f"{name} is not a function: {to_string(fn_value)}")
    formals, body = _as_list(fn_value[0]), _as_list(fn_value[1])
    if formals is None or body is None:
        raise MiniLispTypeError(f"{name} is not a function: {to_string(fn_value)}")
    for formal in formals:
        if not isinstance(formal, Symbol):
            raise MiniLispInvalidSymbol(f"Non-symbol {to_string(formal)} found in formals of {name}")
    return formals, body


def bind_actuals(
    name: Symbol,
    formals: list[Symbol],
    actuals: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> Environment:
    if len(actuals) != len(formals):
        raise MiniLispArityError(
            f"{name} expects {len(formals)} argument(s), got {len(actuals)}"
        )
    # The callee sees the caller's frame as it was before the actuals ran
    mark = len(env.bindings)
    values = [evaluate_fn(actual, env) for actual in actuals]
    fn_env = env.as_of(mark).extend()
    for formal, value in zip(formals, values):
        fn_env.define(formal, value)
    return fn_env


def apply_user(
    name: Symbol,
    actuals: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    formals, body = unpack_function(name, env.lookup(name))
    logger.debug("call %s with %d argument(s)", name, len(actuals))
    fn_env = bind_actuals(name, formals, actuals, env, evaluate_fn)
    result: LispValue = Nil
    for form in body:
        result = evaluate_fn(form, fn_env)
    return result
