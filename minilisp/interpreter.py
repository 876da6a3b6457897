from __future__ import annotations

from typing import Optional, TextIO

from minilisp import LispValue
from minilisp.config import Settings
from minilisp.evaluation.evaluator import evaluate
from minilisp.loader import load
from minilisp.reader.lexer import lex
from minilisp.reader.parser import TokenStream
from minilisp.runtime_context import set_current_output, set_current_settings
from minilisp.types.environment import Environment
from minilisp.types.nil import Nil


class Interpreter:
    """
    One evaluation session: a single Environment threaded through every
    call to `eval` and `load`, so definitions persist between them.
    """

    def __init__(self, settings: Optional[Settings] = None, output: Optional[TextIO] = None):
        self.settings: Settings = settings if settings is not None else Settings.from_env()
        # None means "whatever sys.stdout is at print time"
        self.output = output
        self.env: Environment = Environment()

    def _activate(self) -> None:
        set_current_settings(self.settings)
        set_current_output(self.output)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code`, returning the value of the last one."""
        self._activate()
        stream = TokenStream(lex(code), self.settings.lenient_parse)
        result: LispValue = Nil
        for expr in stream.parse_all():
            result = evaluate(expr, self.env)
        return result

    def load(self, path: str) -> LispValue:
        self._activate()
        return load(path, self.env)
