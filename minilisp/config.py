from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

_DEFAULT_MAX_DEPTH = 300
_TRUE_VALUES = ('1', 'true', 'yes', 'on')


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 1:
        raise ValueError(f"{var} must be positive, got {value}")
    return value


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass
class Settings:
    """Interpreter settings.

    max_depth: deepest allowed nesting of `evaluate` calls.
    lenient_parse: read an unterminated list as NIL instead of failing.
    load_path: directories searched by `load` for relative file names.
    """
    max_depth: int = _DEFAULT_MAX_DEPTH
    lenient_parse: bool = False
    load_path: List[Path] = field(default_factory=list)

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            max_depth=int_from_env('MINILISP_MAX_DEPTH', _DEFAULT_MAX_DEPTH),
            lenient_parse=flag_from_env('MINILISP_LENIENT_PARSE'),
            load_path=paths_from_env('MINILISP_LOAD_PATH', []),
        )
