"""
Token vocabulary shared by the proplogic lexer and parser.

Exports:
    - token_hashmap: maps every recognised lexeme (keywords and symbols) to its token type.
    - literal_tokens: token types that carry an atomic truth value or a named sentence.
    - binary_operator_tokens: token types accepted between two operands.
    - operator_tokens: binary operators plus negation.
"""

SENTENCE = "SENTENCE"
TRUE = "TRUE"
FALSE = "FALSE"

AND = "AND"
OR = "OR"
IFTHEN = "IFTHEN"
IFONLYIF = "IFONLYIF"
NOT = "NOT"

LPAREN = "LPAREN"
RPAREN = "RPAREN"

NULL = "NULL"
INVALID = "INVALID"
EOF = "EOF"

# Keywords are matched case-insensitively by the lexer, so only lowercase spellings live here.
token_hashmap: dict[str, str] = {
    # keywords
    "true": TRUE,
    "false": FALSE,
    "and": AND,
    "or": OR,
    "not": NOT,
    "implies": IFTHEN,
    "then": IFTHEN,
    "iff": IFONLYIF,
    # ascii symbols
    "&": AND,
    "&&": AND,
    "|": OR,
    "||": OR,
    "~": NOT,
    "!": NOT,
    "->": IFTHEN,
    "=>": IFTHEN,
    "<->": IFONLYIF,
    "<=>": IFONLYIF,
    "(": LPAREN,
    ")": RPAREN,
    # unicode symbols
    "∧": AND,
    "∨": OR,
    "¬": NOT,
    "→": IFTHEN,
    "↔": IFONLYIF,
    "⊤": TRUE,
    "⊥": FALSE,
}

literal_tokens: frozenset[str] = frozenset({SENTENCE, TRUE, FALSE})

binary_operator_tokens: tuple[str, ...] = (AND, OR, IFONLYIF, IFTHEN)

operator_tokens: frozenset[str] = frozenset(binary_operator_tokens) | {NOT}
