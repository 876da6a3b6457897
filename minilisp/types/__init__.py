from minilisp.types.symbol import Symbol
from minilisp.types.nil import Nil, NilType, T, TType, is_nil, is_true, lisp_bool
from minilisp.types.pair import Pair
from minilisp.types.equality import is_equal, floats_equal
from minilisp.types.environment import Environment

__all__ = [
    "Symbol",
    "Nil",
    "NilType",
    "T",
    "TType",
    "Pair",
    "Environment",
    "is_nil",
    "is_true",
    "lisp_bool",
    "is_equal",
    "floats_equal",
]
