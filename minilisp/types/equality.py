"""Structural equality shared by `equal`, `Pair.__eq__` and the tests."""

from __future__ import annotations

from minilisp import LispValue
from minilisp.types.nil import is_nil
from minilisp.types.pair import Pair

# Floats closer than this compare equal
FLOAT_TOLERANCE = 1e-15


def floats_equal(a: float, b: float) -> bool:
    return abs(a - b) < FLOAT_TOLERANCE


def is_equal(a: LispValue, b: LispValue) -> bool:
    # Recursively check equality; Integer and Float never compare equal
    if a is b:
        return True
    if is_nil(a) and is_nil(b):
        return True
    if type(a) is not type(b):
        return False
    if isinstance(a, float):
        return floats_equal(a, b)
    if isinstance(a, list):
        return len(a) == len(b) and all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Pair):
        return is_equal(a.car, b.car) and is_equal(a.cdr, b.cdr)
    return a == b
