from __future__ import annotations

from minilisp import LispValue


class Pair:
    """Improper cons cell built by `cons` when the tail is not a list."""
    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        self.car = car
        self.cdr = cdr

    def __eq__(self, other: object) -> bool:
        from minilisp.types.equality import is_equal
        return isinstance(other, Pair) and is_equal(self, other)

    __hash__ = None

    def __repr__(self):
        return f"Pair({self.car!r}, {self.cdr!r})"
