"""Value model shared by the parser and the evaluator.

Parsed code and runtime data are the same objects: atoms (Identifier,
Integer, Float, String, Boolean, Opaque), List, Nil and the callables in
rum.types.callables. Every value has a `ref` slot pointing back to the
source it was parsed from, or None for values built at run time. Equality
compares tag and payload and ignores `ref`.

`str(value)` prints source text that parses back to an equivalent value.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any, Iterable, Iterator, Optional

if TYPE_CHECKING:
    from rum.reader.source import SourceRef

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def wrap_int64(n: int) -> int:
    """Two's complement wrap into the signed 64-bit range."""
    return ((n - INT64_MIN) % (1 << 64)) + INT64_MIN


class Value:
    __slots__ = ("ref",)
    type_name = "value"

    def to_python(self) -> Any:
        """Host-side view of the value, handed to host functions."""
        return self


class Atom(Value):
    __slots__ = ("value",)

    def __init__(self, value: Any, ref: Optional[SourceRef] = None):
        self.value = value
        self.ref = ref

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.value == other.value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __str__(self) -> str:
        return str(self.value)

    def to_python(self) -> Any:
        return self.value


class Identifier(Atom):
    __slots__ = ()
    type_name = "identifier"

    def __init__(self, name: str, ref: Optional[SourceRef] = None):
        super().__init__(sys.intern(name), ref)

    @property
    def name(self) -> str:
        return self.value

    def to_python(self) -> Identifier:
        # Identifiers stay distinct from strings on the host side.
        return self


class Integer(Atom):
    __slots__ = ()
    type_name = "int64"

    def __init__(self, value: int, ref: Optional[SourceRef] = None):
        super().__init__(wrap_int64(int(value)), ref)


class Float(Atom):
    __slots__ = ()
    type_name = "float64"

    def __init__(self, value: float, ref: Optional[SourceRef] = None):
        super().__init__(float(value), ref)

    def __str__(self) -> str:
        return repr(self.value)


class String(Atom):
    __slots__ = ()
    type_name = "string"

    def __str__(self) -> str:
        escaped = self.value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'


class Boolean(Atom):
    __slots__ = ()
    type_name = "bool"

    def __init__(self, value: bool, ref: Optional[SourceRef] = None):
        super().__init__(bool(value), ref)

    def __str__(self) -> str:
        return "true" if self.value else "false"


class Opaque(Atom):
    """Any host object with no language-level equivalent."""

    __slots__ = ()

    @property
    def type_name(self) -> str:  # type: ignore[override]
        return f"opaque:{type(self.value).__name__}"

    def __hash__(self) -> int:
        return id(self.value)

    def __str__(self) -> str:
        return f"<{self.type_name} {self.value!r}>"


class List(Value):
    """An ordered, immutable sequence of values: code and data alike."""

    __slots__ = ("items",)
    type_name = "list"
    __match_args__ = ("items",)

    def __init__(self, items: Iterable[Value] = (), ref: Optional[SourceRef] = None):
        self.items: tuple[Value, ...] = tuple(items)
        self.ref = ref

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __getitem__(self, i):
        return self.items[i]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, List) and self.items == other.items

    def __hash__(self) -> int:
        return hash(self.items)

    def __repr__(self) -> str:
        return f"List({list(self.items)!r})"

    def __str__(self) -> str:
        return "(" + " ".join(str(v) for v in self.items) + ")"

    def to_python(self) -> list[Any]:
        return [v.to_python() for v in self.items]


def from_python(obj: Any) -> Value:
    """Wrap a host object returned by a host function."""
    from rum.types.nil import Nil

    if isinstance(obj, Value):
        return obj
    if obj is None:
        return Nil
    # bool first: it is a subclass of int
    if isinstance(obj, bool):
        return Boolean(obj)
    if isinstance(obj, int):
        return Integer(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, str):
        return String(obj)
    if isinstance(obj, list):
        return List(from_python(x) for x in obj)
    return Opaque(obj)


def type_name(obj: Any) -> str:
    """Language-level type name for either a Value or a host object."""
    return from_python(obj).type_name
