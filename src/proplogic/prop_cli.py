"""
proplogic CLI Entrypoint.

Parses propositional-logic sentences, one per line, and prints either the
resulting expression trees or the syntax errors found on each line.

Features:
    - Read sentences from a file or from an inline string.
    - Lex and parse every non-blank line independently.
    - Print trees as `repr` or JSON; diagnostics go to stderr.
    - Exit status 0 when every line parsed, 1 otherwise.

Example usage:
    proplogic sentences.txt
    proplogic -s "p and (q -> not r)"
    proplogic -s "p and or q" --verbose

Functions:
    parse_line(text: str, line: int, sink: DiagnosticSink) -> ParseResult:
        Lexes and parses a single line, reporting lexer errors to the sink.

    run_prop(source: str, is_string: bool = False, as_json: bool = False,
             sink: DiagnosticSink | None = None) -> int:
        Runs the parser over every line of a file or string and returns the number of failed lines.

    main(argv: list[str] | None = None) -> int:
        Parses CLI arguments and invokes `run_prop`.
"""

import argparse
import json
import logging
import sys

from proplogic.prop_constants import INVALID
from proplogic.prop_errors import INVALID_CHARACTER, DiagnosticSink, PrintingSink
from proplogic.prop_lexer import tokenize
from proplogic.prop_parser import ParseResult, Parser

logger = logging.getLogger(__name__)


def parse_line(text: str, line: int, sink: DiagnosticSink) -> ParseResult:
    """
    Lex and parse one line of source.

    Lexer `INVALID` tokens are reported to `sink` here; the parser only treats
    them as forced errors and skips over them.

    Args:
        text (str): One line of source, without its newline.
        line (int): The 1-based line number used in diagnostics.
        sink (DiagnosticSink): Receiver for lexer and parser diagnostics.

    Returns:
        ParseResult: The parser's verdict for this line.
    """
    tokens = tokenize(text, line)
    for index, tok in enumerate(tokens):
        if tok.type == INVALID:
            sink.report(INVALID_CHARACTER.format(lexeme=tok.value), 0, line, index + 1)
    return Parser(tokens, line, sink).parse()


def run_prop(
    source: str,
    is_string: bool = False,
    as_json: bool = False,
    sink: DiagnosticSink | None = None,
) -> int:
    """
    Parse every non-blank line of a file or string and print the trees.

    Args:
        source (str): A file path, or raw sentences when `is_string` is True.
        is_string (bool): Treat `source` as text instead of a path. Defaults to False.
        as_json (bool): Print trees as JSON dicts instead of `repr`. Defaults to False.
        sink (DiagnosticSink | None): Receiver for diagnostics; prints to stderr when None.

    Returns:
        int: Number of lines that failed to parse.

    Raises:
        OSError: If the file cannot be read.
    """
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    if sink is None:
        sink = PrintingSink()

    failed = 0
    total = 0
    for line_no, text in enumerate(source.splitlines(), start=1):
        if not text.strip():
            continue
        total += 1
        result = parse_line(text, line_no, sink)
        if not result.ok:
            failed += 1
            continue
        if result.tree is None:
            continue  # comment-only line
        if as_json:
            print(json.dumps({"line": line_no, "tree": result.tree.to_dict()}))
        else:
            print(f"line {line_no}: {result.tree!r}")

    logger.info("parsed %d line(s), %d with errors", total, failed)
    return failed


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the proplogic CLI.

    Supported flags:
        - `-s`, `--string`: Interpret source as raw sentences instead of a file path.
        - `-j`, `--json`: Print trees as JSON.
        - `--verbose`: Log parser recovery steps to stderr.

    Returns:
        int: Process exit status.
    """
    parser = argparse.ArgumentParser(
        prog="proplogic", description="Parse propositional-logic sentences."
    )
    parser.add_argument("source", help="Filename or raw sentences (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-j", "--json", dest="as_json", action="store_true", help="Print trees as JSON"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log parser recovery to stderr"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    failed = run_prop(source=args.source, is_string=args.string, as_json=args.as_json)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
