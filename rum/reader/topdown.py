"""A generic top-down operator precedence (Pratt) parser.

The parser knows nothing about the language: all of the behavior lives in the
tokens, which must implement the Token protocol below. Token nud/led methods
receive the parser itself as their ParserContext and can use it to parse
sub-expressions or to report errors. Errors never stop the parse.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Protocol


class ParserContext(Protocol):
    def expression(self, rbp: int) -> Any: ...
    def advance(self) -> Any: ...
    def peek(self) -> Any: ...
    def error(self, err: Exception) -> None: ...


class Token(Protocol):
    def nud(self, ctx: ParserContext) -> Any:
        """Null denotation: the token starts an expression."""

    def led(self, ctx: ParserContext, left: Any) -> Any:
        """Left denotation: the token continues the expression `left`."""

    def lbp(self) -> int:
        """Left binding power."""


class TopDown:
    """Pratt parser over a token iterator.

    The iterator must keep producing its end-of-stream token (with binding
    power 0) once the input is exhausted.
    """

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: Iterator[Token] = iter(tokens)
        self._token: Token | None = None
        self.errors: list[Exception] = []
        # Make the first token available.
        self.advance()

    def advance(self) -> Token:
        """Return the incoming token and move on to the next one."""
        token = self._token
        self._token = next(self._tokens)
        return token  # type: ignore[return-value]

    def peek(self) -> Token:
        return self._token  # type: ignore[return-value]

    def expression(self, rbp: int) -> Any:
        left = self.advance().nud(self)
        while rbp < self.peek().lbp():
            left = self.advance().led(self, left)
        return left

    def error(self, err: Exception) -> None:
        self.errors.append(err)
