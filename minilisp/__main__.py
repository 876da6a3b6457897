"""Runs a minilisp source file, or an interactive loop when no file is given."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from minilisp.errors import MiniLispError
from minilisp.interpreter import Interpreter
from minilisp.printer import to_string

logger = logging.getLogger("minilisp")

PROMPT = "> "


def repl(interp: Interpreter, stdin: TextIO, stdout: TextIO, prompt: str = PROMPT) -> None:
    """Evaluate one line at a time, printing each result; errors are reported, not fatal."""
    while True:
        if prompt:
            stdout.write(prompt)
            stdout.flush()
        line = stdin.readline()
        if not line:
            break
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except MiniLispError as ex:
            stdout.write(f"Error: {ex}\n")
            continue
        stdout.write(to_string(result) + "\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="minilisp")
    parser.add_argument("file", help="file to run (if empty, starts the interactive loop)", nargs="?")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    interp = Interpreter()
    if args.file is not None:
        try:
            interp.load(args.file)
        except MiniLispError as ex:
            logger.debug("load of %s failed", args.file, exc_info=True)
            print(f"Error: {ex}", file=sys.stderr)
            return 1
        return 0

    repl(interp, sys.stdin, sys.stdout, PROMPT if sys.stdin.isatty() else "")
    return 0


if __name__ == "__main__":
    sys.exit(main())
