"""
Diagnostic reporting for the proplogic parser.

The parser never raises on malformed input. Each syntax error is handed, as soon
as it is detected, to a `DiagnosticSink` injected at construction time. Any
object with a matching `report` method qualifies.

Classes and Features:
    - Diagnostic: Immutable record of one reported error.
    - DiagnosticSink (Protocol): `report(message, code, line, column) -> None`.
    - DiagnosticCollector: Keeps every report in memory (default sink, used by tests).
    - PrintingSink: Writes formatted reports to a text stream (stderr by default).

The message texts below are the parser's whole error vocabulary. The numeric
code passed with each report is opaque and forwarded verbatim.
"""

import sys
from dataclasses import dataclass
from typing import Protocol, TextIO

MISSING_LEFT_OPERAND = "missing proposition on left side of operation"
MISSING_RIGHT_OPERAND = "missing proposition on right side of operation"
MISSING_NEGATION_OPERAND = "missing proposition on right side of negation"
ADJACENT_OPERATORS = "operators are next to each other"
CLOSING_PAREN_WITHOUT_MATCH = "closing parenthesis does not have a match"
MISSING_CLOSING_PAREN = "expected closing parenthesis"
EMPTY_GROUPING = "not a proposition"
ADJACENT_LITERALS = "simple proposition is in an invalid position"
MISPLACED_GROUPING = "grouping in invalid position"
MISPLACED_NEGATION = "not operator is in an invalid position"
NESTING_TOO_DEEP = "propositions are nested too deeply"
INVALID_CHARACTER = "unexpected character {lexeme!r}"


@dataclass(frozen=True)
class Diagnostic:
    """One syntax error as delivered to a sink.

    Attributes:
        message (str): Human-readable description.
        code (int): Opaque error code.
        line (int): Source line number.
        column (int): 1-based token position within the line.
    """

    message: str
    code: int
    line: int
    column: int

    def format(self) -> str:
        return f"[line {self.line}, col {self.column}] error: {self.message}"


class DiagnosticSink(Protocol):
    """Receiver for parser diagnostics."""

    def report(self, message: str, code: int, line: int, column: int) -> None: ...  # pragma: no cover


class DiagnosticCollector:
    """Sink that stores every report, in detection order."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def report(self, message: str, code: int, line: int, column: int) -> None:
        self.diagnostics.append(Diagnostic(message, code, line, column))

    def messages(self) -> list[str]:
        return [d.message for d in self.diagnostics]

    def clear(self) -> None:
        self.diagnostics.clear()

    def __len__(self) -> int:
        return len(self.diagnostics)


class PrintingSink:
    """Sink that prints each report on its own line.

    Attributes:
        stream (TextIO): Destination; resolved to the current `sys.stderr` when omitted.
        count (int): Number of reports written so far.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stderr
        self.count = 0

    def report(self, message: str, code: int, line: int, column: int) -> None:
        self.count += 1
        print(Diagnostic(message, code, line, column).format(), file=self.stream)


__all__ = [
    "ADJACENT_LITERALS",
    "ADJACENT_OPERATORS",
    "CLOSING_PAREN_WITHOUT_MATCH",
    "Diagnostic",
    "DiagnosticCollector",
    "DiagnosticSink",
    "EMPTY_GROUPING",
    "INVALID_CHARACTER",
    "MISPLACED_GROUPING",
    "MISPLACED_NEGATION",
    "MISSING_CLOSING_PAREN",
    "MISSING_LEFT_OPERAND",
    "MISSING_NEGATION_OPERAND",
    "MISSING_RIGHT_OPERAND",
    "NESTING_TOO_DEEP",
    "PrintingSink",
]
