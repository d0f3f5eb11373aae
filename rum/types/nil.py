from __future__ import annotations

from rum.types.values import Value


class NilType(Value):
    """The unit value: result of empty lists, missing else-branches, void host calls."""

    __slots__ = ()
    type_name = "nil"

    def __init__(self):
        self.ref = None

    def __repr__(self): return "nil"
    def __str__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    def to_python(self) -> None:
        return None


Nil = NilType()
