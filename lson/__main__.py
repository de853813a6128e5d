"""Command line entry point: `python -m lson` or `lson`.

Usage:
    lson                 # interactive read loop
    lson program.json    # evaluate every JSON value in a file
    lson -e '["+", 1, 2]'
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from lson import __version__
from lson.codec import decode, encode
from lson.config import get_history_file, get_log_level
from lson.errors import LsonError
from lson.interpreter import Interpreter
from lson.repl import Repl, enable_line_editing


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lson",
        description="Evaluate LSON, a Lisp whose programs are JSON documents.",
    )
    parser.add_argument("file", nargs="?", type=Path, help="program file of whitespace-separated JSON values")
    parser.add_argument("-e", "--eval", dest="expr", help="evaluate one expression and print the result")
    parser.add_argument("--log-level", help="logging level (default: $LSON_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.getLevelName(args.log_level.upper()) if args.log_level else get_log_level()
    if not isinstance(level, int):
        print(f"lson: unknown log level {args.log_level!r}", file=sys.stderr)
        return 2
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    interpreter = Interpreter()

    if args.expr is not None:
        try:
            print(encode(interpreter.evaluate(decode(args.expr))))
        except LsonError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    if args.file is not None:
        try:
            interpreter.eval(args.file.read_text(encoding="utf-8"))
        except (LsonError, OSError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    enable_line_editing(get_history_file())
    Repl(interpreter).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
