from __future__ import annotations

from minilisp import LispValue


class NilType:
    """The empty/false singleton. Interchangeable with the empty list."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "NIL"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


class TType:
    """The boolean-true singleton."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "T"

    def __eq__(self, other):
        return isinstance(other, TType)

    def __hash__(self):
        return hash(TType)


Nil = NilType()
T = TType()


def is_nil(value: LispValue) -> bool:
    """NIL and the empty list both denote "empty" and "false"."""
    return value is Nil or (isinstance(value, list) and not value)


def is_true(value: LispValue) -> bool:
    return not is_nil(value)


def lisp_bool(flag: bool) -> LispValue:
    return T if flag else Nil
