"""Command-line front end: run source files or an interactive loop."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from schemer import config
from schemer.errors import SchemerError
from schemer.interpreter import Interpreter
from schemer.printer import render

PROMPT = "schemer> "

logger = logging.getLogger(__name__)


def run_files(interp: Interpreter, paths: Sequence[str], out: TextIO, err: TextIO) -> int:
    result = None
    try:
        for path in paths:
            result = interp.load(path)
    except SchemerError as e:
        print(e.describe(), file=err)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=err)
        return 1
    except RecursionError:
        logger.warning("Recursion limit reached while running %s", ", ".join(paths))
        print("RuntimeError: maximum recursion depth exceeded", file=err)
        return 1
    print(render(result), file=out)
    return 0


def repl(interp: Interpreter, stdin: TextIO, out: TextIO, err: TextIO) -> int:
    while True:
        out.write(PROMPT)
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            return 0
        if not line.strip():
            continue
        try:
            print(render(interp.eval(line)), file=out)
        except SchemerError as e:
            print(e.describe(), file=err)
        except RecursionError:
            logger.warning("Recursion limit reached while evaluating %r", line)
            print("RuntimeError: maximum recursion depth exceeded", file=err)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="schemer", description="Evaluate Schemer programs.")
    parser.add_argument("files", nargs="*", help="source files to run; starts a REPL when omitted")
    parser.add_argument("--log-level", default=None, help="logging level (default from SCHEMER_LOG_LEVEL)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    if args.log_level is None:
        level = config.get_log_level()
    else:
        level = config.parse_log_level(args.log_level)
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        interp = Interpreter()
    except SchemerError as e:
        print(e.describe(), file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: cannot load prelude: {e}", file=sys.stderr)
        return 1

    if args.files:
        return run_files(interp, args.files, sys.stdout, sys.stderr)
    return repl(interp, sys.stdin, sys.stdout, sys.stderr)
