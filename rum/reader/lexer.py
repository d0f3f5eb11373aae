"""State-machine lexer.

The lexer is a pull-driven producer: iterating over it runs the state machine
only as far as needed to hand out the next token, one token at a time. Each
state is a method that consumes characters and returns the next state; None
stops the machine. Spaces and comments are consumed without emitting
anything. Once the input is exhausted the lexer keeps producing EOF tokens.
"""

from __future__ import annotations

import re
from typing import Callable, Iterator, Optional

from rum.errors import ErrorKind, SyntaxIssue
from rum.reader.source import Source, SourceRef
from rum.reader.tokens import Token, TokenKind
from rum.types.values import INT64_MAX, INT64_MIN

# peek()/advance() return this once the input is exhausted.
EOF = ""

INTEGER_RE = re.compile(r"[+-]?[0-9]+\Z")
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z")

StateFn = Callable[[], Optional["StateFn"]]


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def looks_numeric(text: str) -> bool:
    """Anything starting with [+-.]?[0-9] is a number."""
    if not text:
        return False
    if _is_digit(text[0]):
        return True
    return len(text) > 1 and text[0] in "+-." and _is_digit(text[1])


def parse_number(text: str, ref: SourceRef) -> Token:
    # Try as an int64 first, then as a float64.
    if INTEGER_RE.match(text):
        n = int(text)
        if INT64_MIN <= n <= INT64_MAX:
            return Token(TokenKind.INTEGER, text, n, ref)
    if FLOAT_RE.match(text):
        return Token(TokenKind.FLOAT, text, float(text), ref)
    raise SyntaxIssue(ErrorKind.INVALID_NUMBER, f"invalid number {text!r}", ref)


class Lexer:
    """Tokenizer for one Source. Not restartable."""

    def __init__(self, source: Source):
        self.source = source
        self._text = source.text
        self._pos = 0
        # Position of the character that peek() returns.
        self.line = 0
        self.column = 0
        # Token being built.
        self._chars: list[str] = []
        self._start = (0, 0)
        self._ready: Optional[Token] = None
        self._tokens = self._run()

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        return next(self._tokens)

    def _run(self) -> Iterator[Token]:
        state: Optional[StateFn] = self._lex_identifier
        while state is not None:
            state = state()
            if self._ready is not None:
                token, self._ready = self._ready, None
                yield token
        while True:
            yield Token(TokenKind.EOF, "", None, self._ref(self.line, self.column))

    # --- Character level helpers ---
    def peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else EOF

    def advance(self) -> str:
        ch = self.peek()
        if ch == EOF:
            return ch
        self._chars.append(ch)
        self._pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 0
        else:
            self.column += 1
        return ch

    def _ref(self, line: int, column: int) -> SourceRef:
        return SourceRef(self.source, line, column)

    def _start_ref(self) -> SourceRef:
        return self._ref(*self._start)

    def discard(self) -> str:
        """Drop the characters of the current token, returning them."""
        text = "".join(self._chars)
        self._chars = []
        self._start = (self.line, self.column)
        return text

    def emit(self, kind: TokenKind, value=None) -> None:
        ref = self._start_ref()
        self._ready = Token(kind, self.discard(), value, ref)

    # --- States ---
    def _lex_identifier(self) -> Optional[StateFn]:
        """Default state: arbitrary identifiers and numbers."""
        while True:
            ch = self.peek()
            if ch == EOF:
                next_state = None
            elif ch == "(":
                next_state = self._lex_open
            elif ch == ")":
                next_state = self._lex_close
            elif ch == ";":
                next_state = self._lex_comment
            elif ch == '"':
                next_state = self._lex_string
            elif ch.isspace():
                next_state = self._lex_space
            else:
                self.advance()
                continue
            break

        # Empty transitions are just an artifact of switching states.
        if not self._chars:
            return next_state

        text = "".join(self._chars)
        if looks_numeric(text):
            self._ready = parse_number(text, self._start_ref())
            self.discard()
        else:
            self.emit(TokenKind.IDENTIFIER, text)
        return next_state

    def _lex_open(self) -> StateFn:
        self.advance()
        self.emit(TokenKind.OPEN)
        return self._lex_identifier

    def _lex_close(self) -> StateFn:
        self.advance()
        self.emit(TokenKind.CLOSE)
        return self._lex_identifier

    def _lex_space(self) -> StateFn:
        while self.peek() != EOF and self.peek().isspace():
            self.advance()
        self.discard()
        return self._lex_identifier

    def _lex_comment(self) -> StateFn:
        while self.peek() not in ("\n", EOF):
            self.advance()
        self.discard()
        return self._lex_identifier

    def _lex_string(self) -> StateFn:
        self.advance()  # opening quote
        chars: list[str] = []
        while self.peek() != '"':
            ch = self.advance()
            if ch == "\\":
                # Copy whatever follows the backslash, without interpreting it.
                ch = self.advance()
            if ch == EOF:
                raise SyntaxIssue(
                    ErrorKind.UNTERMINATED_STRING, "string literal is not terminated", self._start_ref()
                )
            chars.append(ch)
        self.advance()  # closing quote
        self.emit(TokenKind.STRING, "".join(chars))
        return self._lex_identifier


def lex(source: Source | str) -> Lexer:
    if not isinstance(source, Source):
        source = Source(source)
    return Lexer(source)
