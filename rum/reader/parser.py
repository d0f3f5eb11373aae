"""Entry points turning source text into Values."""

from __future__ import annotations

import logging

from rum.errors import ErrorKind, ParseError, SyntaxIssue
from rum.reader.lexer import Lexer
from rum.reader.source import Source, SourceRef
from rum.reader.tokens import BINDING_POWERS, TokenKind
from rum.reader.topdown import TopDown
from rum.types.values import Value

logger = logging.getLogger(__name__)


def _as_source(source: Source | str | bytes) -> Source:
    return source if isinstance(source, Source) else Source(source)


def _read(source: Source) -> tuple[list[Value], list[SyntaxIssue], bool]:
    """Run the parser over the whole source. The flag is set on fatal lex errors."""
    errors: list[SyntaxIssue] = []
    try:
        # Building the parser already pulls the first token.
        parser = TopDown(Lexer(source))
        errors = parser.errors  # type: ignore[assignment]
        roots = parser.expression(BINDING_POWERS[TokenKind.EOF])
    except SyntaxIssue as fatal:
        errors.append(fatal)
        return [], errors, True
    return roots, errors, False


def _fail(source: Source, errors: list[SyntaxIssue]) -> ParseError:
    logger.debug("parsing %s failed with %d errors", source.name, len(errors))
    return ParseError(errors)


def parse(source: Source | str | bytes) -> Value:
    """Parse a source holding exactly one root expression."""
    source = _as_source(source)
    roots, errors, fatal = _read(source)
    if not fatal:
        if not roots:
            errors.append(SyntaxIssue(ErrorKind.INVALID_ROOT, "no node found", SourceRef(source, 0, 0)))
        elif len(roots) > 1:
            errors.append(SyntaxIssue(
                ErrorKind.INVALID_ROOT,
                f"multiple root nodes: obtained {len(roots)} nodes",
                roots[1].ref,
            ))
    if errors:
        raise _fail(source, errors)
    return roots[0]


def parse_all(source: Source | str | bytes) -> list[Value]:
    """Parse a source holding any number of top-level expressions."""
    source = _as_source(source)
    roots, errors, _ = _read(source)
    if errors:
        raise _fail(source, errors)
    return roots
