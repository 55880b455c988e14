"""
Interactive read-eval-print loop and console entry point.

Each input line may hold several forms; every value is printed as soon as it
is computed. A failing form is reported as `ERROR: <message>` and the next
form runs against the same global environment.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from humble import LispValue
from humble.config import get_log_level, get_prompt
from humble.errors import HumbleError, HumbleSyntaxError
from humble.interpreter import Interpreter
from humble.printer import to_string

BANNER = "Welcome to humble lisp (hit CTRL-D to quit)"


def format_outcome(outcome: LispValue | HumbleError) -> str:
    if isinstance(outcome, HumbleError):
        return f"ERROR: {outcome}"
    return to_string(outcome)


def repl(
    interp: Interpreter,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    prompt = get_prompt() if prompt is None else prompt
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:  # EOF
            stdout.write("\n")
            break
        line = line.strip()
        if not line:
            continue
        try:
            for outcome in interp.iter_outcomes(line):
                print(format_outcome(outcome), file=stdout)
        except HumbleSyntaxError as ex:
            print(format_outcome(ex), file=stdout)


def run_files(interp: Interpreter, files: list[Path], stdout: TextIO | None = None) -> int:
    """Load each file in turn, printing every result or error.

    An evaluation error is reported and the file goes on with its next form;
    a syntax error or unreadable file ends that file. Returns 1 if anything failed.
    """
    stdout = sys.stdout if stdout is None else stdout
    status = 0
    for path in files:
        try:
            for outcome in interp.iter_load(path):
                if isinstance(outcome, HumbleError):
                    print(f"ERROR: {path}: {outcome}", file=stdout)
                    status = 1
                else:
                    print(to_string(outcome), file=stdout)
        except HumbleSyntaxError as ex:
            print(f"ERROR: {path}: {ex}", file=stdout)
            status = 1
        except OSError as ex:
            print(f"ERROR: {path}: {ex.strerror or ex}", file=stdout)
            status = 1
    return status


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="humble",
        description="A minimal Scheme-like expression interpreter",
    )
    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        help="Source files to evaluate in order before (or instead of) the REPL",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Start the REPL after loading the given files",
    )
    parser.add_argument(
        "--no-prelude",
        action="store_true",
        help="Do not load the prelude into the global environment",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level())

    interp = Interpreter(prelude=None if args.no_prelude else 'auto')
    status = run_files(interp, args.files)
    if status != 0 and not args.interactive:
        return status
    if not args.files or args.interactive:
        print(BANNER)
        repl(interp)
    return status
