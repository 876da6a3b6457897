from __future__ import annotations
from contextlib import contextmanager
import sys
from typing import Iterator, Optional, TextIO

from minilisp.config import Settings
from minilisp.errors import MiniLispRecursionError

# NOTE: For now this is process-global. If threading is introduced,
# consider switching to contextvars or threading.local.
_current_settings: Optional[Settings] = None
_current_output: Optional[TextIO] = None
_depth: int = 0
# Bumped whenever an outermost evaluation ends; stale inner levels skip their exit
_epoch: int = 0

# Python frames one evaluation level may hold (evaluate, special form or
# apply_user, bind_actuals, comprehension), with slack for the caller's stack
_FRAMES_PER_LEVEL = 8
_FRAME_HEADROOM = 250


def set_current_settings(settings: Optional[Settings]) -> None:
    global _current_settings
    _current_settings = settings


def get_current_settings() -> Settings:
    global _current_settings
    if _current_settings is None:
        _current_settings = Settings.from_env()
    return _current_settings


def set_current_output(stream: Optional[TextIO]) -> None:
    global _current_output
    _current_output = stream


def get_current_output() -> TextIO:
    # Resolved per call so a replaced sys.stdout is honoured
    return _current_output if _current_output is not None else sys.stdout


def current_depth() -> int:
    return _depth


def reserve_stack(max_depth: int) -> None:
    """Raise the interpreter recursion limit so `max_depth` levels fit under it."""
    needed = max_depth * _FRAMES_PER_LEVEL + _FRAME_HEADROOM
    if sys.getrecursionlimit() < needed:
        sys.setrecursionlimit(needed)


@contextmanager
def depth_guard() -> Iterator[int]:
    """Count one level of evaluation nesting for the duration of the block.

    The outermost level sizes the Python stack for the configured depth, and
    turns a Python RecursionError that still gets through into
    MiniLispRecursionError once the evaluation stack has unwound.
    """
    global _depth, _epoch
    limit = get_current_settings().max_depth
    if _depth >= limit:
        raise MiniLispRecursionError(f"Maximum evaluation depth of {limit} exceeded")
    outermost = _depth == 0
    if outermost:
        reserve_stack(limit)
    epoch = _epoch
    _depth += 1
    try:
        yield _depth
    except RecursionError as ex:
        if not outermost:
            raise
        raise MiniLispRecursionError(f"Python stack exhausted below evaluation depth {limit}") from ex
    finally:
        if outermost:
            # Also closes levels whose own exit was cut off by stack exhaustion
            _depth = 0
            _epoch += 1
        elif epoch == _epoch:
            _depth -= 1
