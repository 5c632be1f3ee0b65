"""Command-line interface for calclex.

Sources an expression from an argument, a file, or stdin, tokenizes it,
and prints the tokens (or the error message).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from calclex.config import LexConfig
from calclex.lexer import tokenize
from calclex.result import LexResult
from calclex.serialization import to_json


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    from calclex import __version__

    parser = argparse.ArgumentParser(
        prog="calclex",
        description="calclex: tokenize arithmetic expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  calclex "34+ 6 + 99"
  calclex -f expression.txt --json
  echo "(1-2)*3" | calclex
        """,
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to tokenize (default: read --file or stdin)",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        help="Read the expression from a file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--eof",
        action="store_true",
        help="Append an EOF token to successful results",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _strip_newline(text: str) -> str:
    # Newlines are not whitespace in this grammar; drop the one a file or
    # pipe usually ends with.
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def read_source(args: argparse.Namespace) -> str:
    """Resolve the expression text from parsed arguments.

    Raises:
        OSError: If ``--file`` cannot be read.
    """
    if args.expression is not None:
        return args.expression
    if args.file is not None:
        return _strip_newline(args.file.read_text(encoding="utf-8"))
    return _strip_newline(sys.stdin.read())


def render(result: LexResult, *, as_json: bool = False) -> int:
    """Print a result and return the exit code.

    Args:
        result: Result to print
        as_json: Print JSON to stdout instead of the text form

    Returns:
        int: 0 on success, 1 if tokenization failed
    """
    if as_json:
        print(to_json(result))
        if result.error is not None:
            return 1
        return 0

    if result.error is not None:
        print(result.error.message, file=sys.stderr)
        return 1
    print("Tokens:", list(result.tokens))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        int: Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        source = read_source(args)
    except OSError as e:
        print(f"calclex: cannot read {args.file}: {e.strerror or e}", file=sys.stderr)
        return 2

    result = tokenize(source, config=LexConfig(emit_eof=args.eof))
    return render(result, as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
