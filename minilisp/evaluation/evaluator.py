"""Core evaluator for the minilisp interpreter.

Dispatches a list form by the symbol in head position: special forms first
(they receive their arguments unevaluated), then builtins (arguments evaluated
left to right), and finally user-defined functions looked up in the
environment.
"""

from __future__ import annotations

from minilisp import SExpression, LispValue
from minilisp.builtins import BUILTINS
from minilisp.errors import MiniLispEvalError, MiniLispTypeError
from minilisp.evaluation.apply import apply_user
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.printer import to_string
from minilisp.runtime_context import depth_guard
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    with depth_guard():
        match expr:
            case Symbol():
                return env.lookup(expr)

            case []:
                return Nil

            case [head, *tail_args]:
                if not isinstance(head, Symbol):
                    raise MiniLispTypeError(
                        f"First element of a list must be a symbol, got {to_string(head)}"
                    )
                # --- Special forms handling ---
                if head in SPECIAL_FORMS:
                    return SPECIAL_FORMS[head](tail_args, env, evaluate)
                # --- Builtins: evaluate arguments, then call ---
                if head in BUILTINS:
                    args = [evaluate(arg, env) for arg in tail_args]
                    return BUILTINS[head](env, args)
                return apply_user(head, tail_args, env, evaluate)

            case Pair():
                raise MiniLispEvalError(f"Cannot evaluate improper list {to_string(expr)}")

    # --- Atoms return as-is ---
    return expr


def evaluate_all(forms: list[SExpression], env: Environment) -> LispValue:
    """Evaluate each form in order, returning the value of the last one."""
    if not isinstance(forms, list):
        raise MiniLispTypeError(f"Expected a list of forms, got {to_string(forms)}")
    result: LispValue = Nil
    for form in forms:
        result = evaluate(form, env)
    return result
