"""
Token model and reference lexer for propositional-logic sentences.

This module provides the token shape consumed by the parser, together with a small
lexer that turns one line of text into tokens:

Classes:
    CharacterStream: Character cursor that tracks the line and column of each lexeme.
    Token: A tagged lexical value (operator, literal, parenthesis or sentinel).
    Lexer: Converts a CharacterStream into a sequence of tokens.

Features:
    - Skips whitespace and `#` comments
    - Longest-match recognition of symbolic operators (`->`, `<->`, `&&`, ...)
    - Case-insensitive keywords (`and`, `or`, `not`, `implies`, `iff`, `true`, `false`)
    - Any other identifier becomes a `SENTENCE` token carrying its name
    - Unknown characters become `INVALID` tokens instead of raising, so the parser
      can keep going and report further errors on the same line

Example:
    >>> lexer = Lexer(CharacterStream("p -> q"))
    >>> lexer.next_token()
    Token(SENTENCE, p)

Exports:
    - CharacterStream
    - Token
    - Lexer
    - tokenize
    - token_hashmap
"""

from typing import Any

from proplogic.prop_constants import (
    EOF,
    INVALID,
    NULL,
    SENTENCE,
    literal_tokens,
    token_hashmap,
)


class CharacterStream:
    """
    Cursor over one sentence's text, feeding the Lexer.

    `tokenize` starts it at the driver's line number, so each Token's
    `line`/`col` point into the source file even though lines are lexed
    one at a time.

    Attributes:
        source (str): Text of the sentence.
        position (int): Index of the next unread character.
        line (int): Line of the next character (1-indexed).
        column (int): Column of the next character (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """Consumes one character. The Lexer checks `end_of_file` first, so EOFError means a lexer bug."""
        if self.position >= len(self.source):
            raise EOFError(f"read past end of sentence on line {self.line}")
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character at `offset` without advancing, or "" when out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Token:
    """A single lexical token.

    Equality and hashing follow the token's tag, plus the name for `SENTENCE`
    tokens. The spelling of an operator (`&` vs `and`) and the source location
    are carried for diagnostics only.

    Attributes:
        type (str): The token tag (e.g. 'SENTENCE', 'AND', 'LPAREN').
        value (str): The sentence name, or the raw lexeme for every other tag.
        line (int): The 1-based line number where the token appears.
        col (int): The 1-based column number where the token starts.
    """

    __slots__ = ("type", "value", "line", "col")

    def __init__(self, type_: str, value: str = "", line: int = 0, col: int = 0):
        self.type = type_
        self.value = value
        self.line = line
        self.col = col

    def is_literal(self) -> bool:
        """True for tokens that directly denote a truth value or a named sentence."""
        return self.type in literal_tokens

    def _key(self) -> tuple[str, str | None]:
        return (self.type, self.value if self.type == SENTENCE else None)

    def __repr__(self) -> str:
        if self.type == SENTENCE or self.type == INVALID:
            return f"Token({self.type}, {self.value})"
        return f"Token({self.type})"

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Token) and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())


NULL_TOKEN = Token(NULL)
"""Shared sentinel returned when reading before the first or past the last token."""


class Lexer:
    """Lexical analyzer for propositional-logic sentences.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        """Skips all whitespace and comments in the stream."""
        while not self.stream.end_of_file():
            if self.peek() in " \t\r\n":
                self.advance()
            elif self.peek() == "#":
                self.skip_comment()
            else:
                break

    def skip_comment(self) -> None:
        while not self.stream.end_of_file() and self.peek() != "\n":
            self.advance()

    def match_operator(self) -> Token | None:
        """Attempts to match the longest symbolic lexeme from the current position.

        Returns:
            Token | None: A Token if a match is found, otherwise None.
        """
        line, col = self.stream.line, self.stream.column
        max_token = None
        match_len = 0
        candidate = ""

        for i in range(3):  # longest symbol is "<->"
            ch = self.stream.peek(i)
            if ch == "":
                break
            candidate += ch
            if candidate in token_hashmap:
                max_token = candidate
                match_len = i + 1

        if max_token:
            for _ in range(match_len):
                self.advance()
            return Token(token_hashmap[max_token], max_token, line, col)

        return None

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token: The next token; `EOF` once the stream is exhausted.
        """
        self.skip_whitespace()

        if self.stream.end_of_file():
            return Token(EOF, "", self.stream.line, self.stream.column)

        ch = self.peek()
        line, col = self.stream.line, self.stream.column

        # 1. Keyword or sentence name
        if ch.isalpha() or ch == "_":
            ident = ""
            while not self.stream.end_of_file() and (
                self.peek().isalnum() or self.peek() in "_'"
            ):
                ident += self.advance()
            keyword = ident.lower()
            if keyword in token_hashmap:
                return Token(token_hashmap[keyword], ident, line, col)
            return Token(SENTENCE, ident, line, col)

        # 2. Symbolic operator or parenthesis
        token = self.match_operator()
        if token:
            return token

        # 3. Unknown character
        return Token(INVALID, self.advance(), line, col)


def tokenize(source: str, line: int = 1) -> list[Token]:
    """Lexes `source` into a token list without the trailing `EOF` token."""
    lexer = Lexer(CharacterStream(source, 0, line, 1))
    tokens = []
    while True:
        tok = lexer.next_token()
        if tok.type == EOF:
            break
        tokens.append(tok)
    return tokens


__all__ = ["CharacterStream", "Lexer", "NULL_TOKEN", "Token", "token_hashmap", "tokenize"]
