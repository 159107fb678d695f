"""
Defines the expression tree produced by the proplogic parser.

Classes:
    Expr:
        Base node. Stores a kind tag, an optional token and its child nodes, and
        provides structural equality, `to_dict()` and `walk()`.

    Literal, Unary, Binary, Grouping:
        The four concrete node shapes of a propositional sentence.

    ExprDict:
        TypedDict representation of an Expr, suitable for JSON output or debugging.

A node's children are always Expr instances. "Nothing could be parsed here" is
signalled by the parser returning None, so a tree handed back to a caller never
holds a placeholder node.

Example:
    node = Binary(Literal(Token("SENTENCE", "p")), Token("OR"), Literal(Token("SENTENCE", "q")))
"""

from collections.abc import Iterator
from typing import Any, TypedDict

from proplogic.prop_constants import SENTENCE
from proplogic.prop_lexer import Token


class ExprDict(TypedDict, total=False):
    """
    Serialized form of an Expr.

    Fields:
        kind (str): "literal", "unary", "binary" or "grouping".
        token (str | None): The literal's or operator's token tag.
        name (str | None): Sentence name, for `SENTENCE` literals only.
        children (list[ExprDict]): Operands in source order.
    """

    kind: str
    token: str | None
    name: str | None
    children: list["ExprDict"]


class Expr:
    """
    Base class for expression tree nodes.

    Args:
        token (Token, optional): The literal token or the operator token.
        children (list[Expr], optional): Operands in source order.

    Attributes:
        kind (str): Node kind tag, fixed per subclass.

    Methods:
        __eq__(other): Structural equality (kind, token, children).
        to_dict(): Converts the node and all descendants to nested dicts.
        walk(): Pre-order iterator over the subtree.
    """

    kind = "expr"

    def __init__(self, token: Token | None = None, children: list["Expr"] | None = None) -> None:
        self.token = token
        self.children: list[Expr] = children or []

    def __repr__(self) -> str:
        # Children are rendered before parents, so deep trees need no recursion.
        rendered: dict[int, str] = {}
        for node in reversed(list(self.walk())):
            rendered[id(node)] = node._format([rendered[id(c)] for c in node.children])
        return rendered[id(self)]

    def _format(self, children: list[str]) -> str:
        parts = [] if self.token is None else [repr(self.token)]
        return f"{type(self).__name__}({', '.join(parts + children)})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Expr):
            return False
        return (
            self.kind == other.kind
            and self.token == other.token
            and self.children == other.children
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.token, tuple(self.children)))

    def walk(self) -> Iterator["Expr"]:
        stack: list[Expr] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def to_dict(self) -> ExprDict:
        tok = self.token
        return {
            "kind": self.kind,
            "token": tok.type if tok is not None else None,
            "name": tok.value if tok is not None and tok.type == SENTENCE else None,
            "children": [c.to_dict() for c in self.children],
        }


class Literal(Expr):
    """An atomic sentence, `true` or `false`."""

    kind = "literal"

    def __init__(self, token: Token) -> None:
        super().__init__(token)

    @property
    def value(self) -> Token:
        assert self.token is not None
        return self.token


class Unary(Expr):
    """Negation of a single operand."""

    kind = "unary"

    def __init__(self, operator: Token, operand: Expr) -> None:
        super().__init__(operator, [operand])

    @property
    def operator(self) -> Token:
        assert self.token is not None
        return self.token

    @property
    def operand(self) -> Expr:
        return self.children[0]


class Binary(Expr):
    """A connective (and, or, implication, biconditional) applied to two operands."""

    kind = "binary"

    def __init__(self, left: Expr, operator: Token, right: Expr) -> None:
        super().__init__(operator, [left, right])

    def _format(self, children: list[str]) -> str:
        left, right = children
        return f"Binary({left}, {self.operator!r}, {right})"

    @property
    def operator(self) -> Token:
        assert self.token is not None
        return self.token

    @property
    def left(self) -> Expr:
        return self.children[0]

    @property
    def right(self) -> Expr:
        return self.children[1]


class Grouping(Expr):
    """A parenthesized sub-expression."""

    kind = "grouping"

    def __init__(self, inner: Expr) -> None:
        super().__init__(None, [inner])

    @property
    def inner(self) -> Expr:
        return self.children[0]


__all__ = ["Binary", "Expr", "ExprDict", "Grouping", "Literal", "Unary"]
