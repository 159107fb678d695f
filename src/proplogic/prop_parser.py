"""
Propositional Logic Parser

Parses a line of proplogic tokens into an expression tree, recovering from
syntax errors so that several independent mistakes on one line are reported in
a single pass.

Grammar
-------
    proposition := operation
    operation   := unary ( ("and" | "or" | "->" | "<->") unary )*
    unary       := "not"* primary
    primary     := literal | "(" proposition ")"

Binary connectives share one precedence level and associate to the left.
Only parenthesis nesting recurses: operator chains, runs of negations and
recovery reparses are loops, so long lines do not deepen the stack. Nesting
too deep for the interpreter is reported as an error instead of raising.

Parser Behavior
---------------
- Never raises on malformed input. Each error is reported to the injected
  `DiagnosticSink` and parsing resumes at the next synchronization point
  (a literal or an opening parenthesis).
- Grammar rules return `Expr | None`; None means "nothing could be parsed here".
- Tokens left over after the first proposition are parsed as further,
  erroneous propositions so their errors are reported too.
- The result only carries a tree when no error was reported or forced.

Entry Points
------------
- `Parser(tokens, line, sink).parse()`
- `parse(tokens, line, sink)`

Returns
-------
ParseResult
    `ok` is False if any error occurred; `tree` is set only when `ok` is True.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from proplogic.prop_ast import Binary, Expr, Grouping, Literal, Unary
from proplogic.prop_constants import (
    INVALID,
    LPAREN,
    NOT,
    RPAREN,
    binary_operator_tokens,
    operator_tokens,
)
from proplogic.prop_errors import (
    ADJACENT_LITERALS,
    ADJACENT_OPERATORS,
    CLOSING_PAREN_WITHOUT_MATCH,
    EMPTY_GROUPING,
    MISPLACED_GROUPING,
    MISPLACED_NEGATION,
    MISSING_CLOSING_PAREN,
    MISSING_LEFT_OPERAND,
    MISSING_NEGATION_OPERAND,
    MISSING_RIGHT_OPERAND,
    NESTING_TOO_DEEP,
    DiagnosticCollector,
    DiagnosticSink,
)
from proplogic.prop_lexer import NULL_TOKEN, Token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one token sequence.

    Attributes:
        tree (Expr | None): The expression tree, present only when `ok` is True.
            An empty token sequence parses successfully with no tree.
        ok (bool): False if any syntax error was detected.
    """

    tree: Expr | None
    ok: bool

    def __bool__(self) -> bool:
        return self.ok


class Parser:
    """
    Recursive-descent parser with panic-mode error recovery.

    A Parser is bound to one token sequence and may parse it only once.

    Attributes
    ----------
    tokens : list[Token]
        The input token sequence (never modified).
    line : int
        Source line number attached to every diagnostic.
    sink : DiagnosticSink
        Receiver of diagnostics; a fresh DiagnosticCollector when not given.
    position : int
        Index of the next unconsumed token.
    open_parens : int
        Number of opening parentheses not yet matched.
    had_error : bool
        Set on the first error and never cleared.
    """

    def __init__(
        self,
        tokens: list[Token],
        line: int = 1,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self.tokens: list[Token] = tokens
        self.line: int = line
        self.sink: DiagnosticSink = sink if sink is not None else DiagnosticCollector()
        self.position: int = 0
        self.open_parens: int = 0
        self.had_error: bool = False
        self._resync_position: int | None = None
        self._used: bool = False

    # Token consuming

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def peek(self) -> Token:
        return NULL_TOKEN if self.at_end() else self.tokens[self.position]

    def previous(self) -> Token:
        return NULL_TOKEN if self.position == 0 else self.tokens[self.position - 1]

    def advance(self) -> Token:
        if self.at_end():
            return NULL_TOKEN
        self.position += 1
        return self.tokens[self.position - 1]

    def check(self, *types: str) -> bool:
        return self.peek().type in types

    def match(self, *types: str) -> bool:
        if self.check(*types):
            self.advance()
            return True
        return False

    # Entry point

    def parse(self) -> ParseResult:
        if self._used:
            raise RuntimeError("Parser instances are single-use; create a new Parser per token sequence")
        self._used = True

        try:
            proposition = self.proposition()

            while not self.at_end():
                self.had_error = True
                start = self.position
                self.proposition()
                if self.position == start:
                    # A ")" whose opening group was already reported as unclosed.
                    self.advance()
                    self.open_parens = max(self.open_parens - 1, 0)
        except RecursionError:
            # Only parenthesis nesting recurses; chains and negation runs are loops.
            self.report(NESTING_TOO_DEEP, 0, self.position)
            logger.debug("line %d: recursion limit hit at token %d", self.line, self.position + 1)
            return ParseResult(None, False)

        if self.had_error:
            logger.debug("line %d: parse failed", self.line)
            return ParseResult(None, False)
        return ParseResult(proposition, True)

    # Grammar

    def proposition(self) -> Expr | None:
        proposition = self.operation()

        # Anything that cannot continue the chain is parsed as a replacement proposition.
        while True:
            if self.peek().is_literal():
                if self._unexplained_adjacency():
                    self.error(ADJACENT_LITERALS, 0, self.position)
                self.had_error = True
                proposition = self.operation()
            elif self.match(INVALID):
                self.had_error = True
                proposition = self.operation()
            elif self.check(LPAREN):
                if self._unexplained_adjacency():
                    self.error(MISPLACED_GROUPING, 0, self.position)
                self.had_error = True
                proposition = self.operation()
            elif self.check(NOT):
                self.error(MISPLACED_NEGATION, 0, self.position)
            else:
                return proposition

    def operation(self) -> Expr | None:
        """unary (operator unary)*, left-associative."""
        proposition = self.unary()
        start = self.position

        while self.match(*binary_operator_tokens):
            if proposition is None:
                self.error(MISSING_LEFT_OPERAND, 0, start)
                continue

            start = self.position
            operator = self.previous()
            right = self.unary()

            if right is None:
                # A ")" at depth 0 never gets here: primary consumes and reports it.
                if self.peek().type in operator_tokens:
                    self.error(ADJACENT_OPERATORS, 0, self.position)
                    continue
                if self.match(INVALID):
                    self.had_error = True
                    right = self.unary()
                if right is None:
                    self.error(MISSING_RIGHT_OPERAND, 0, start)
                    continue

            proposition = Binary(proposition, operator, right)

        return proposition

    def unary(self) -> Expr | None:
        negations: list[Token] = []
        while self.match(NOT):
            negations.append(self.previous())

        if not negations:
            return self.primary()

        innermost = self.position - 1
        operand = self.primary()
        if operand is None:
            self.error(MISSING_NEGATION_OPERAND, 0, innermost)
            return None
        for operator in reversed(negations):
            operand = Unary(operator, operand)
        return operand

    def primary(self) -> Expr | None:
        start = self.position

        if self.previous().is_literal():
            if self.check(LPAREN):
                self.error(MISPLACED_GROUPING, 0, start)
            if self.peek().is_literal():
                self.error(ADJACENT_LITERALS, 0, self.position)

        if self.match(LPAREN):
            self.open_parens += 1
            inner = self.proposition()
            if self.open_parens > 0:
                if self.match(RPAREN):
                    self.open_parens -= 1
                else:
                    self.error(MISSING_CLOSING_PAREN, 0, self.position)
            if inner is None:
                self.error(EMPTY_GROUPING, 1, start)
                return None
            return Grouping(inner)

        if self.peek().is_literal():
            return Literal(self.advance())

        if self.check(RPAREN) and self.open_parens == 0:
            self.advance()
            self.error(CLOSING_PAREN_WITHOUT_MATCH, 0, start)

        return None

    def _unexplained_adjacency(self) -> bool:
        """True when a trailing literal or group follows something other than a
        literal and the parser has not just resynchronized onto it. After a
        literal, `primary` reports the adjacency itself."""
        return not self.previous().is_literal() and self.position != self._resync_position

    # Error handling

    def report(self, message: str, code: int, index: int) -> None:
        self.had_error = True
        logger.debug("line %d, token %d: %s", self.line, index + 1, message)
        self.sink.report(message, code, self.line, index + 1)

    def error(self, message: str, code: int, index: int) -> None:
        self.report(message, code, index)
        self.synchronize()

    def synchronize(self) -> None:
        """Skips ahead to a literal, an opening parenthesis or the end of input.

        Closing parentheses skipped on the way still pair off against open
        groups, and unmatched ones are reported.
        """
        while not self.at_end():
            if self.peek().is_literal() or self.check(LPAREN):
                break
            if self.check(RPAREN):
                if self.open_parens > 0:
                    self.open_parens -= 1
                else:
                    self.report(CLOSING_PAREN_WITHOUT_MATCH, 0, self.position)
            self.advance()
        self._resync_position = self.position
        logger.debug("line %d: resynchronized at token %d", self.line, self.position + 1)


def parse(tokens: list[Token], line: int = 1, sink: DiagnosticSink | None = None) -> ParseResult:
    """Parses one token sequence with a fresh Parser."""
    return Parser(tokens, line, sink).parse()


__all__ = ["ParseResult", "Parser", "parse"]
