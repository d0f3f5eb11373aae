"""Source text and references back into it.

A Source keeps the valid code points of its input plus the offset at which
every line starts, so that diagnostics can pull out any line in O(1).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

REPLACEMENT_CHAR = "\ufffd"


def _is_valid(ch: str) -> bool:
    return ch != REPLACEMENT_CHAR and not ("\ud800" <= ch <= "\udfff")


class Source:
    """Normalized code points plus a line-start index. Immutable."""

    __slots__ = ("name", "_text", "_lines")

    def __init__(self, data: str | bytes, name: str = "<input>"):
        if isinstance(data, bytes):
            # Invalid byte sequences are dropped, they produce no code point.
            data = data.decode("utf-8", errors="ignore")
        text = "".join(ch for ch in data if _is_valid(ch))
        lines = [0]
        for i, ch in enumerate(text):
            if ch == "\n":
                lines.append(i + 1)
        self.name = name
        self._text = text
        self._lines = tuple(lines)

    @property
    def text(self) -> str:
        return self._text

    @property
    def lines(self) -> tuple[int, ...]:
        return self._lines

    def __len__(self) -> int:
        return len(self._text)

    def line(self, i: int) -> str:
        """Return line `i` (0-based), trailing newline included."""
        if i < 0 or i >= len(self._lines):
            raise IndexError(f"out of bound line {i} (source has {len(self._lines)} lines)")
        begin = self._lines[i]
        end = self._lines[i + 1] if i + 1 < len(self._lines) else len(self._text)
        return self._text[begin:end]

    def __repr__(self) -> str:
        return f"Source({self.name!r}, {len(self._text)} chars, {len(self._lines)} lines)"


@dataclass(frozen=True)
class SourceRef:
    """Where a token or value comes from. Line and column are 0-indexed."""

    source: Optional[Source]
    line: int
    column: int

    def context(self, prefix: str = "") -> str:
        """Render the referenced line and a caret pointing at the column."""
        if self.source is None:
            return f"{prefix}no source info\n"
        try:
            line = self.source.line(self.line)
        except IndexError as err:
            return f"{prefix}unable to get source info: {err}\n"
        text = line.rstrip("\n")
        out = f"{prefix}{text}\n"
        if 0 <= self.column <= len(line):
            out += f"{prefix}{'-' * self.column}^\n"
        return out

    def __str__(self) -> str:
        name = self.source.name if self.source is not None else "<unknown>"
        return f"{name}:{self.line + 1}:{self.column + 1}"
