"""
lispi command line driver.

    lispi                 # interactive REPL
    lispi script.lisp     # run a file, abort on the first error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from lispi import __version__
from lispi.config import get_log_level, get_recursion_limit
from lispi.evaluation.special_forms.import_form import read_source
from lispi.interpreter import Interpreter
from lispi.logging_setup import configure_logging
from lispi.printer import to_source
from lispi.types.errors import LispiError

logger = logging.getLogger(__name__)

PROMPT = "(lispi)=> "
CONTINUATION_PROMPT = "......=> "


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lispi",
        description="A small homoiconic Lisp interpreter",
    )
    parser.add_argument("script", nargs="?", help="source file to execute")
    parser.add_argument(
        "-p", "--print",
        action="store_true",
        help="print the value of every top-level form when running a file",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--log-level", help="log level name (default: LISPI_LOG_LEVEL or WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def report(message: str, stream: TextIO) -> None:
    print(f"error: {message}", file=stream)


def run_file(interp: Interpreter, path: str, echo: bool, out: TextIO, err: TextIO) -> int:
    try:
        for expr in read_source(Path(path)):
            result = interp.eval_form(expr)
            if echo:
                print(to_source(result), file=out)
    except LispiError as exc:
        report(str(exc), err)
        return 1
    except RecursionError:
        report("stack exhausted", err)
        return 1
    return 0


def repl(interp: Interpreter, stdin: TextIO, out: TextIO, err: TextIO) -> int:
    while True:
        prompt = CONTINUATION_PROMPT if interp.parser.depth else PROMPT
        out.write(prompt)
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            try:
                interp.parser.finish()
            except LispiError as exc:
                report(str(exc), err)
                return 1
            return 0
        try:
            forms = interp.parser.feed(line)
        except LispiError as exc:
            interp.parser.reset()
            report(str(exc), err)
            continue
        # Each completed form is evaluated and printed on its own.
        for expr in forms:
            try:
                print(to_source(interp.eval_form(expr)), file=out)
            except LispiError as exc:
                report(str(exc), err)
            except RecursionError:
                report("stack exhausted", err)


def main(argv: Optional[list[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)
    configure_logging("DEBUG" if args.verbose else (args.log_level or get_log_level()))

    limit = get_recursion_limit()
    if limit is not None:
        logger.debug("setting recursion limit to %d", limit)
        sys.setrecursionlimit(limit)

    interp = Interpreter()
    if args.script:
        return run_file(interp, args.script, args.print, sys.stdout, sys.stderr)
    return repl(interp, sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
