from __future__ import annotations
import math
from typing import Any, Callable

from minilisp import LispValue
from minilisp.types import Environment, Symbol, Pair, Nil, T, is_nil, is_equal, lisp_bool
from minilisp.types.nil import TType
from minilisp.errors import MiniLispEvalError, MiniLispTypeError, MiniLispArityError
from minilisp.printer import to_string
from minilisp.reader.lexer import INT_MIN, INT_MAX
from minilisp.runtime_context import get_current_output

BuiltinFn = Callable[[Environment, list[Any]], LispValue]


def _expect_arity(name: str, expr: list[Any], count: int) -> None:
    if len(expr) != count:
        plural = "argument" if count == 1 else "arguments"
        raise MiniLispArityError(f"{name} requires exactly {count} {plural}, got {len(expr)}")

# -------------------------------
# Numeric coercion
# -------------------------------
def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float))

def to_float(name: str, value: Any) -> float:
    if not _is_number(value):
        raise MiniLispTypeError(f"All arguments to {name} must be numbers, got {to_string(value)}")
    return float(value)

def to_int32(name: str, value: Any) -> int:
    """Truncate toward zero into the 32-bit range; NaN becomes 0."""
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return INT_MAX if value > 0 else INT_MIN
        return max(INT_MIN, min(INT_MAX, math.trunc(value)))
    raise MiniLispTypeError(f"All arguments to {name} must be numbers, got {to_string(value)}")

def _check_int32(name: str, value: int) -> int:
    if not INT_MIN <= value <= INT_MAX:
        raise MiniLispEvalError(f"Integer overflow in {name}")
    return value

def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q

# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, expr: list[Any]) -> float:
    result = 0.0
    for x in expr:
        result += to_float("+", x)
    return result

def sub(env: Environment, expr: list[Any]) -> float:
    if not expr:
        raise MiniLispArityError("- requires at least 1 argument")
    result = to_float("-", expr[0])
    for x in expr[1:]:
        result -= to_float("-", x)
    return result

def mul(env: Environment, expr: list[Any]) -> float:
    result = 1.0
    for x in expr:
        result *= to_float("*", x)
    return result

def div(env: Environment, expr: list[Any]) -> float:
    if not expr:
        raise MiniLispArityError("/ requires at least 1 argument")
    result = to_float("/", expr[0])
    for x in expr[1:]:
        divisor = to_float("/", x)
        if divisor == 0.0:
            raise MiniLispEvalError("Division by zero")
        result /= divisor
    return result

def mod(env: Environment, expr: list[Any]) -> int:
    _expect_arity("mod", expr, 2)
    num, m = to_int32("mod", expr[0]), to_int32("mod", expr[1])
    if m == 0:
        raise MiniLispEvalError("Division by zero in mod")
    # Remainder takes the sign of the dividend
    _check_int32("mod", _trunc_div(num, m))
    return num - m * _trunc_div(num, m)

def floor(env: Environment, expr: list[Any]) -> int:
    if len(expr) == 1:
        expr = [expr[0], 1]
    _expect_arity("floor", expr, 2)
    num, d = to_int32("floor", expr[0]), to_int32("floor", expr[1])
    if d == 0:
        raise MiniLispEvalError("Division by zero in floor")
    return _check_int32("floor", _trunc_div(num, d))

# -------------------------------
# Comparison
# -------------------------------
def _compare(name: str, test: Callable[[float, float], bool]) -> BuiltinFn:
    def compare(env: Environment, expr: list[Any]) -> LispValue:
        _expect_arity(name, expr, 2)
        return lisp_bool(test(to_float(name, expr[0]), to_float(name, expr[1])))
    compare.__name__ = f"compare_{name}"
    return compare

lt = _compare("<", lambda a, b: a < b)
gt = _compare(">", lambda a, b: a > b)
lte = _compare("<=", lambda a, b: a <= b)
gte = _compare(">=", lambda a, b: a >= b)

# -------------------------------
# Equality and basic predicates
# -------------------------------
def eq(env: Environment, expr: list[Any]) -> LispValue:
    """Identity on symbols, T and NIL only; numbers are never eq. () is NIL."""
    _expect_arity("eq", expr, 2)
    a, b = expr
    if isinstance(a, Symbol) and isinstance(b, Symbol):
        return lisp_bool(a == b)
    if isinstance(a, TType) and isinstance(b, TType):
        return T
    if is_nil(a) and is_nil(b):
        return T
    return Nil

def equal(env: Environment, expr: list[Any]) -> LispValue:
    _expect_arity("equal", expr, 2)
    return lisp_bool(is_equal(expr[0], expr[1]))

def null(env: Environment, expr: list[Any]) -> LispValue:
    _expect_arity("null", expr, 1)
    return lisp_bool(is_nil(expr[0]))

def atom(env: Environment, expr: list[Any]) -> LispValue:
    _expect_arity("atom", expr, 1)
    value = expr[0]
    return lisp_bool(is_nil(value) or not isinstance(value, (list, Pair)))

def listp(env: Environment, expr: list[Any]) -> LispValue:
    _expect_arity("listp", expr, 1)
    value = expr[0]
    return lisp_bool(is_nil(value) or isinstance(value, (list, Pair)))

# -------------------------------
# List operations
# -------------------------------
def cons(env: Environment, expr: list[Any]) -> LispValue:
    _expect_arity("cons", expr, 2)
    head, tail = expr
    if tail is Nil:
        return [head]
    if isinstance(tail, list):
        return [head] + tail
    return Pair(head, tail)

def car(env: Environment, expr: list[Any]) -> LispValue:
    _expect_arity("car", expr, 1)
    value = expr[0]
    if is_nil(value):
        return Nil
    if isinstance(value, list):
        return value[0]
    if isinstance(value, Pair):
        return value.car
    raise MiniLispTypeError(f"Cannot call car on an atom: {to_string(value)}")

def cdr(env: Environment, expr: list[Any]) -> LispValue:
    _expect_arity("cdr", expr, 1)
    value = expr[0]
    if is_nil(value):
        return Nil
    if isinstance(value, list):
        return value[1:]
    if isinstance(value, Pair):
        return value.cdr
    raise MiniLispTypeError(f"Cannot call cdr on an atom: {to_string(value)}")

# -------------------------------
# Output
# -------------------------------
def print_builtin(env: Environment, expr: list[Any]) -> str:
    """Write the printed form and a newline; the text is also the result."""
    _expect_arity("print", expr, 1)
    text = to_string(expr[0])
    print(text, file=get_current_output())
    return text

# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[Symbol, BuiltinFn] = {
    Symbol('+'): add,
    Symbol('-'): sub,
    Symbol('*'): mul,
    Symbol('/'): div,
    Symbol('mod'): mod,
    Symbol('floor'): floor,
    Symbol('<'): lt,
    Symbol('>'): gt,
    Symbol('<='): lte,
    Symbol('>='): gte,
    Symbol('eq'): eq,
    Symbol('equal'): equal,
    Symbol('null'): null,
    Symbol('atom'): atom,
    Symbol('listp'): listp,
    Symbol('cons'): cons,
    Symbol('car'): car,
    Symbol('cdr'): cdr,
    Symbol('print'): print_builtin,
}
