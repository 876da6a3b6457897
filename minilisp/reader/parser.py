"""
  Lisp Parser

Consumes the lexer's token stream and emits Python values:

    - lists -> Python list
    - atoms -> the atom value carried by the token (int, float, str, Symbol, T, Nil)

Quote sugar never reaches the parser; the lexer has already expanded it into
an explicit `(quote ...)` list.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from minilisp import SExpression
from minilisp.errors import MiniLispSyntaxError
from minilisp.reader.lexer import LPAREN, RPAREN, Token, lex
from minilisp.runtime_context import get_current_settings
from minilisp.types.nil import Nil

logger = logging.getLogger(__name__)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token], lenient: Optional[bool] = None):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        if lenient is None:
            lenient = get_current_settings().lenient_parse
        self.lenient = lenient

    def peek(self) -> tuple[Optional[str], Optional[SExpression]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[SExpression]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> SExpression:
        """Parse exactly one form, leaving the remaining tokens in the stream.

        An exhausted stream reads as NIL.
        """
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return Nil

        if tok_type == "atom":
            return tok_val

        if tok_type == "rparen":
            raise MiniLispSyntaxError("Unexpected ')'")

        # tok_type == "lparen"
        items: list[SExpression] = []
        while True:
            next_type, next_val = self.peek()
            if next_type is None:
                if self.lenient:
                    logger.debug("unterminated list read as NIL")
                    return Nil
                raise MiniLispSyntaxError("Unmatched '(': list is not terminated")
            if next_type == "rparen":
                self.advance()
                return items
            if next_type == "lparen":
                items.append(self.parse_expr())
            else:
                self.advance()
                items.append(next_val)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.parse_expr()


def parse(tokens: Iterable[Token], lenient: Optional[bool] = None) -> SExpression:
    """Parse a single form from `tokens`."""
    return TokenStream(tokens, lenient).parse_expr()


def parse_program(source: str, lenient: Optional[bool] = None) -> list[SExpression]:
    """Parse every top-level form of `source` into one list.

    The tokens are wrapped in an outer pair of parentheses so the whole text
    reads as a single list of forms.
    """
    stream = TokenStream([LPAREN, *lex(source), RPAREN], lenient)
    forms = stream.parse_expr()
    if not stream.at_end():
        # A stray ')' closed the implicit outer list early
        raise MiniLispSyntaxError("Unexpected ')'")
    if not isinstance(forms, list):
        # Only reachable in lenient mode, where an unterminated list reads as NIL
        return []
    logger.debug("parsed %d top-level forms", len(forms))
    return forms
