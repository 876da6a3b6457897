from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from minilisp import LispValue
from minilisp.errors import MiniLispLoadError
from minilisp.evaluation.evaluator import evaluate_all
from minilisp.reader.parser import parse_program
from minilisp.runtime_context import get_current_settings
from minilisp.types.environment import Environment
from minilisp.types.nil import T

logger = logging.getLogger(__name__)


def resolve_path(path: str, roots: Iterable[Path]) -> Optional[Path]:
    """Return `path` if it names a file, else the first match under `roots`."""
    candidate = Path(path)
    if candidate.is_file():
        return candidate
    if candidate.is_absolute():
        return None
    for root in roots:
        candidate = root / path
        if candidate.is_file():
            return candidate
    return None


def read_source(path: str) -> str:
    resolved = resolve_path(path, get_current_settings().load_path)
    if resolved is None:
        raise MiniLispLoadError(f"Cannot find file '{path}'")
    try:
        return resolved.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as ex:
        raise MiniLispLoadError(f"Cannot read file '{path}': {ex}") from ex


def load(path: str, env: Environment) -> LispValue:
    """Read, parse and evaluate every top-level form of a file; returns T."""
    code = read_source(path)
    logger.debug("loading %s", path)
    evaluate_all(parse_program(code), env)
    return T
