"""
  Lisp Lexer

Turns source text into a flat stream of `(token_type, token_value)` tuples:

    - ("lparen", "(")
    - ("rparen", ")")
    - ("atom", value) where value is an int, float, str, Symbol, T or Nil

Parentheses and `;;` comment markers are padded with spaces so that splitting
each line on whitespace yields one lexical unit per word. The quote sugar is
expanded here rather than in the parser: `'x` and `' (a b)` come out as the
tokens of `(quote x)` and `(quote (a b))`. A stack of pending depths tracks
which closing paren ends each open quote expansion.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from minilisp import LispValue
from minilisp.errors import MiniLispLexError
from minilisp.types.nil import Nil, T
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)

Token = tuple[str, LispValue]

LPAREN: Token = ("lparen", "(")
RPAREN: Token = ("rparen", ")")
QUOTE: Token = ("atom", Symbol("quote"))

COMMENT = ";;"

INT_RE = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def parse_int(word: str) -> int | None:
    """Return `word` as a 32-bit signed integer, or None."""
    if not INT_RE.fullmatch(word):
        return None
    n = int(word)
    if INT_MIN <= n <= INT_MAX:
        return n
    return None


def parse_float(word: str) -> float | None:
    # float() also accepts digit separators and non-ASCII digits, neither of
    # which is part of the syntax
    if "_" in word or not word.isascii():
        return None
    try:
        return float(word)
    except ValueError:
        return None


def parse_string(word: str) -> str | None:
    if not word.startswith('"'):
        return None
    if len(word) < 2 or not word.endswith('"'):
        raise MiniLispLexError(f"Unterminated string literal {word}")
    return word[1:-1]


def _pad(line: str) -> str:
    return line.replace("(", " ( ").replace(")", " ) ").replace(COMMENT, f" {COMMENT} ")


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples."""
    # One counter per open quote expansion; 0 means the next atom or group closes it
    quoted_depths: list[int] = []

    for line in source.splitlines():
        for word in _pad(line).split():
            if word == COMMENT:
                break

            if word == "(":
                yield LPAREN
                if quoted_depths:
                    quoted_depths[-1] += 1
                continue

            if word == ")":
                yield RPAREN
                if quoted_depths:
                    quoted_depths[-1] -= 1
                    if quoted_depths[-1] == 0:
                        quoted_depths.pop()
                        yield RPAREN
                continue

            closes_quote = bool(quoted_depths) and quoted_depths[-1] == 0

            lowered = word.lower()
            if lowered in ("t", "nil"):
                yield "atom", T if lowered == "t" else Nil
                if closes_quote:
                    quoted_depths.pop()
                    yield RPAREN
                continue

            if word == "'":
                yield LPAREN
                yield QUOTE
                quoted_depths.append(0)
                continue

            if closes_quote:
                yield "atom", Symbol(lowered)
                yield RPAREN
                quoted_depths.pop()
                continue

            n = parse_int(word)
            if n is not None:
                yield "atom", n
                continue

            f = parse_float(word)
            if f is not None:
                yield "atom", f
                continue

            if word.startswith("'"):
                yield LPAREN
                yield QUOTE
                yield "atom", Symbol(lowered[1:])
                yield RPAREN
                continue

            s = parse_string(word)
            if s is not None:
                yield "atom", s
                continue

            yield "atom", Symbol(lowered)


def tokenize(source: str) -> list[Token]:
    tokens = list(lex(source))
    logger.debug("tokenized %d tokens", len(tokens))
    return tokens
