"""Render expressions in their canonical textual form."""

from __future__ import annotations

import math
from decimal import Decimal
from io import StringIO

from minilisp import LispValue
from minilisp.types.nil import NilType, TType
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol


def format_float(x: float) -> str:
    """Shortest round-trip digits in plain positional notation.

    Integral values drop the fractional part, so 3.0 prints as `3`.
    """
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    if x.is_integer():
        if x == 0 and math.copysign(1.0, x) < 0:
            return "-0"
        return str(int(x))
    return format(Decimal(repr(x)), "f")


def _write(buffer: StringIO, obj: LispValue) -> None:
    if isinstance(obj, list):
        buffer.write("(")
        for i, item in enumerate(obj):
            if i:
                buffer.write(" ")
            _write(buffer, item)
        buffer.write(")")
    elif isinstance(obj, Pair):
        buffer.write("(")
        _write(buffer, obj.car)
        buffer.write(".")
        _write(buffer, obj.cdr)
        buffer.write(")")
    elif isinstance(obj, TType):
        buffer.write("T")
    elif isinstance(obj, NilType):
        buffer.write("NIL")
    elif isinstance(obj, float):
        buffer.write(format_float(obj))
    elif isinstance(obj, (int, str, Symbol)):
        buffer.write(str(obj))
    else:
        buffer.write(repr(obj))


def to_string(obj: LispValue) -> str:
    with StringIO() as buffer:
        _write(buffer, obj)
        return buffer.getvalue()
