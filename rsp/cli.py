"""Command line entry point: `rsp run` evaluates code, `rsp repl` starts the shell."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from rsp import __version__
from rsp.errors import RspError
from rsp.interpreter import Interpreter
from rsp.logging_utils import init_logging
from rsp.printer import lisp_repr

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rsp", description="A small Lisp interpreter.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="diagnostic log level (defaults to $RSP_LOG, else WARNING)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    run = commands.add_parser("run", help="evaluate an expression or a file and print the result")
    source = run.add_mutually_exclusive_group(required=True)
    source.add_argument("-e", "--expr", help="code to evaluate")
    source.add_argument("file", nargs="?", type=Path, help="file to evaluate")

    commands.add_parser("repl", help="start the interactive shell")
    return parser


def run_command(args: argparse.Namespace) -> int:
    if args.expr is not None:
        code = args.expr
    else:
        try:
            code = args.file.read_text(encoding="utf-8")
        except OSError as e:
            print(f"Error: cannot read {args.file}: {e.strerror or e}", file=sys.stderr)
            return 1
        except UnicodeDecodeError as e:
            print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
            return 1

    interpreter = Interpreter()
    try:
        result = interpreter.eval(code)
    except RspError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("Error: maximum recursion depth exceeded", file=sys.stderr)
        return 1

    print(lisp_repr(result))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    init_logging(args.log_level)
    logger.debug("Running command %r", args.command)

    if args.command == "repl":
        from rsp.repl.shell import Shell
        Shell().run()
        return 0
    return run_command(args)
