"""Tokens and their top-down parsing behavior.

nud and led always return a Python list of Values: the expressions read so
far at the current nesting level. Errors are reported through the parser
context and parsing carries on, so that one pass finds as many problems as
possible.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any, Optional

from rum.errors import ErrorKind, SyntaxIssue
from rum.types.values import Float, Identifier, Integer, List, String, Value

if TYPE_CHECKING:
    from rum.reader.source import SourceRef
    from rum.reader.topdown import ParserContext


class TokenKind(enum.Enum):
    EOF = "EOF"
    OPEN = "Open"
    CLOSE = "Close"
    IDENTIFIER = "Identifier"
    INTEGER = "Integer"
    FLOAT = "Float"
    STRING = "String"
    COMMENT = "Comment"
    SPACE = "Space"

    def __str__(self) -> str:
        return self.value


BINDING_POWERS: dict[TokenKind, int] = {
    TokenKind.EOF: 0,
    TokenKind.OPEN: 30,
    # Not 0: a stray ')' must show up as "did not reach the end of the stream"
    # (e.g. "a)b") instead of quietly ending the parse.
    TokenKind.CLOSE: 5,
    TokenKind.IDENTIFIER: 20,
    TokenKind.INTEGER: 20,
    TokenKind.FLOAT: 20,
    TokenKind.STRING: 20,
}

ATOMS = {
    TokenKind.IDENTIFIER: Identifier,
    TokenKind.INTEGER: Integer,
    TokenKind.FLOAT: Float,
    TokenKind.STRING: String,
}


class Token:
    __slots__ = ("kind", "text", "value", "ref")

    def __init__(self, kind: TokenKind, text: str, value: Any, ref: Optional[SourceRef]):
        self.kind = kind
        self.text = text
        self.value = value
        self.ref = ref

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Token)
            and (self.kind, self.text, self.value, self.ref) == (other.kind, other.text, other.value, other.ref)
        )

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.text!r}, {self.value!r}, {self.ref})"

    def atom(self) -> Value:
        return ATOMS[self.kind](self.value, self.ref)

    def lbp(self) -> int:
        return BINDING_POWERS.get(self.kind, 0)

    def nud(self, ctx: ParserContext) -> list[Value]:
        if self.kind is TokenKind.OPEN:
            return [self._sublist(ctx)]
        if self.kind in ATOMS:
            return [self.atom()]
        if self.kind is TokenKind.EOF:
            # An opening parenthesis right before the end of the input.
            return []
        ctx.error(SyntaxIssue(
            ErrorKind.INVALID_NUD_TOKEN,
            f"unexpected {self.text!r} (token type {self.kind}) at the beginning of an expression",
            self.ref,
        ))
        return []

    def led(self, ctx: ParserContext, left: list[Value]) -> list[Value]:
        if self.kind is TokenKind.OPEN:
            return left + [self._sublist(ctx)]
        if self.kind in ATOMS:
            return left + [self.atom()]
        ctx.error(SyntaxIssue(
            ErrorKind.INVALID_LED_TOKEN,
            f"unexpected {self.text!r} (token type {self.kind}) in an expression",
            self.ref,
        ))
        return left

    def _sublist(self, ctx: ParserContext) -> List:
        items: list[Value] = []
        if ctx.peek().kind is not TokenKind.CLOSE:
            items = ctx.expression(BINDING_POWERS[TokenKind.CLOSE])
        closing = ctx.peek()
        if closing.kind is not TokenKind.CLOSE:
            # Keep going as if it was there.
            ctx.error(SyntaxIssue(
                ErrorKind.MISSING_CLOSING_PARENTHESIS,
                f"invalid token - expected ')', got: {closing.text!r}",
                closing.ref,
            ))
        else:
            ctx.advance()
        return List(items, self.ref)
